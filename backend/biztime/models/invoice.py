from datetime import date

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from biztime.db import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    comp_code = Column(
        String(64),
        ForeignKey("companies.code", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    amt = Column(Numeric(12, 2), nullable=False)
    paid = Column(Boolean, nullable=False, default=False)
    add_date = Column(Date, nullable=False, default=date.today)
    # only ever written from resolve_paid_date()
    paid_date = Column(Date, nullable=True)

    company = relationship("Company", back_populates="invoices")

    def __repr__(self):
        return f"<Invoice id={self.id} comp_code={self.comp_code} paid={self.paid}>"
