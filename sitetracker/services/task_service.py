from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from sitetracker.models.task import Task

DEFAULT_STATUS = "todo"


def list_tasks(db: Session) -> List[Task]:
    return db.query(Task).order_by(Task.id.desc()).all()


def create_task(
    db: Session,
    title: Optional[str],
    status: Optional[str] = None,
    amount: Optional[Decimal] = None,
) -> Task:
    if not title:
        raise ValueError("title is required")

    row = Task(
        title=title,
        status=DEFAULT_STATUS if status is None else status,
        amount=Decimal("0") if amount is None else amount,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row
