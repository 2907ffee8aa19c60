from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class OkResponse(BaseModel):
    ok: bool = True


class DataResponse(BaseModel, Generic[T]):
    ok: bool = True
    data: T
