from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from biztime.db import Base


class Company(Base):
    __tablename__ = "companies"

    code = Column(String(64), primary_key=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)

    # deletes are restricted by the FK; never cascade from here
    invoices = relationship(
        "Invoice",
        back_populates="company",
        order_by="Invoice.id",
        passive_deletes="all",
    )

    def __repr__(self):
        return f"<Company code={self.code} name={self.name}>"
