from datetime import date
from typing import Optional


def resolve_paid_date(
    current_paid_date: Optional[date],
    requested_paid: bool,
    today: Optional[date] = None,
) -> Optional[date]:
    """
    Compute the paid_date an invoice should have after an update.

      - unpaid -> paid: today's date
      - paid -> paid: the existing date, so repeated "mark paid" calls don't move it
      - anything -> unpaid: None
    """
    if not requested_paid:
        return None
    if current_paid_date is not None:
        return current_paid_date
    return today or date.today()
