from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from sitetracker.schemas.common import UtcDatetime


class LaborCreate(BaseModel):
    # Numbers sent for text fields are stored as their string form.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    worker_name: Optional[str] = None
    role: Optional[str] = None
    hours: Optional[Decimal] = None
    rate: Optional[Decimal] = None


class LaborResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    worker_name: str
    role: Optional[str]
    hours: Decimal
    rate: Decimal
    total: Optional[Decimal]
    created_at: Optional[UtcDatetime]
