from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from sitetracker.schemas.common import UtcDatetime


class MaterialCreate(BaseModel):
    # Numbers sent for text fields are stored as their string form.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    item_name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[Decimal] = None
    unit_cost: Optional[Decimal] = None


class MaterialUrlCreate(MaterialCreate):
    image_url: Optional[str] = None


class MaterialResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    item_name: str
    category: Optional[str]
    quantity: Decimal
    unit_cost: Decimal
    total: Optional[Decimal]
    image_url: Optional[str]
    created_at: Optional[UtcDatetime]


class MaterialListItem(MaterialResponse):
    has_file: bool
