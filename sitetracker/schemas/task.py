from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from sitetracker.schemas.common import UtcDatetime


class TaskCreate(BaseModel):
    # Numbers sent for text fields are stored as their string form.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Decimal] = None


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    status: Optional[str]
    amount: Optional[Decimal]
    created_at: Optional[UtcDatetime]
