from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from sitetracker.models.labor_entry import LaborEntry


def list_labor(db: Session) -> List[LaborEntry]:
    return db.query(LaborEntry).order_by(LaborEntry.id.desc()).all()


def create_labor(
    db: Session,
    worker_name: Optional[str],
    hours: Optional[Decimal],
    rate: Optional[Decimal],
    role: Optional[str] = None,
) -> LaborEntry:
    # Truthiness check: an hours or rate of 0 counts as missing.
    if not worker_name or not hours or not rate:
        raise ValueError("worker_name, hours, and rate are required")

    row = LaborEntry(worker_name=worker_name, role=role, hours=hours, rate=rate)
    db.add(row)
    db.commit()
    # total is generated by the database, so it only exists after the round-trip.
    db.refresh(row)
    return row
