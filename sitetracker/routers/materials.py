from decimal import Decimal, InvalidOperation
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.orm import Session

from sitetracker.core.config import get_max_upload_bytes
from sitetracker.database import get_db
from sitetracker.schemas.envelope import DataResponse
from sitetracker.schemas.material import (
    MaterialCreate,
    MaterialListItem,
    MaterialResponse,
    MaterialUrlCreate,
)
from sitetracker.services import material_service
from sitetracker.services.material_service import ImagePayload

router = APIRouter(prefix="/api/materials", tags=["Materials"])

DEFAULT_MIME_TYPE = "application/octet-stream"


def _read_upload(file: Optional[UploadFile]) -> Optional[ImagePayload]:
    if file is None:
        return None

    limit = get_max_upload_bytes()
    data = file.file.read(limit + 1)
    if len(data) > limit:
        raise HTTPException(status_code=413, detail="File too large")

    return ImagePayload(mime_type=file.content_type or DEFAULT_MIME_TYPE, data=data)


def _parse_decimal(field: str, value: Optional[str]) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        parsed = Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"{field} must be a number") from exc
    # NaN and Infinity parse but cannot be stored or priced.
    if not parsed.is_finite():
        raise ValueError(f"{field} must be a number")
    return parsed


@router.get("", response_model=DataResponse[List[MaterialListItem]])
def list_materials(db: Session = Depends(get_db)):
    rows = material_service.list_materials(db)
    return DataResponse(
        data=[
            MaterialListItem(
                **MaterialResponse.model_validate(material).model_dump(),
                has_file=has_file,
            )
            for material, has_file in rows
        ]
    )


@router.post("", status_code=201, response_model=DataResponse[MaterialResponse])
def create_material(
    payload: Optional[MaterialCreate] = Body(default=None),
    db: Session = Depends(get_db),
):
    payload = payload or MaterialCreate()
    try:
        row = material_service.create_material(
            db,
            item_name=payload.item_name,
            category=payload.category,
            quantity=payload.quantity,
            unit_cost=payload.unit_cost,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return DataResponse(data=MaterialResponse.model_validate(row))


@router.post("/url", status_code=201, response_model=DataResponse[MaterialResponse])
def create_material_with_url(
    payload: Optional[MaterialUrlCreate] = Body(default=None),
    db: Session = Depends(get_db),
):
    payload = payload or MaterialUrlCreate()
    try:
        row = material_service.create_material_with_url(
            db,
            image_url=payload.image_url,
            item_name=payload.item_name,
            category=payload.category,
            quantity=payload.quantity,
            unit_cost=payload.unit_cost,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return DataResponse(data=MaterialResponse.model_validate(row))


@router.post("/upload", status_code=201, response_model=DataResponse[MaterialResponse])
def create_material_with_upload(
    file: Optional[UploadFile] = File(default=None),
    item_name: Optional[str] = Form(default=None),
    category: Optional[str] = Form(default=None),
    quantity: Optional[str] = Form(default=None),
    unit_cost: Optional[str] = Form(default=None),
    db: Session = Depends(get_db),
):
    # Size is enforced here so oversized payloads never reach the store.
    image = _read_upload(file)
    try:
        row = material_service.create_material_with_upload(
            db,
            image=image,
            item_name=item_name,
            category=category,
            quantity=_parse_decimal("quantity", quantity),
            unit_cost=_parse_decimal("unit_cost", unit_cost),
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return DataResponse(data=MaterialResponse.model_validate(row))


@router.get("/{material_id}/image")
def get_material_image(material_id: int, db: Session = Depends(get_db)):
    image = material_service.get_latest_image(db, material_id)
    if image is None:
        return PlainTextResponse("No image", status_code=404)
    return Response(content=image.data, media_type=image.mime_type)
