from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import exists
from sqlalchemy.orm import Session

from sitetracker.models.material import Material
from sitetracker.models.material_image import MaterialImage


@dataclass(frozen=True)
class ImagePayload:
    mime_type: str
    data: bytes


def _has_file_clause():
    return exists().where(MaterialImage.material_id == Material.id).label("has_file")


def list_materials(db: Session) -> List[Tuple[Material, bool]]:
    """
    All materials, newest first, each paired with whether at least one uploaded
    image row exists for it. image_url has no bearing on the flag.
    """
    rows = db.query(Material, _has_file_clause()).order_by(Material.id.desc()).all()
    return [(material, bool(has_file)) for material, has_file in rows]


def _require_fields(item_name, quantity, unit_cost, message: str) -> None:
    # quantity and unit_cost may legitimately be 0, so only None is missing.
    if not item_name or quantity is None or unit_cost is None:
        raise ValueError(message)


def _new_material(
    item_name: str,
    category: Optional[str],
    quantity: Decimal,
    unit_cost: Decimal,
    image_url: Optional[str] = None,
) -> Material:
    return Material(
        item_name=item_name,
        category=category,
        quantity=quantity,
        unit_cost=unit_cost,
        image_url=image_url,
    )


def create_material(
    db: Session,
    item_name: Optional[str],
    quantity: Optional[Decimal],
    unit_cost: Optional[Decimal],
    category: Optional[str] = None,
) -> Material:
    _require_fields(item_name, quantity, unit_cost, "item_name, quantity, and unit_cost are required")

    row = _new_material(item_name, category, quantity, unit_cost)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def create_material_with_url(
    db: Session,
    image_url: Optional[str],
    item_name: Optional[str],
    quantity: Optional[Decimal],
    unit_cost: Optional[Decimal],
    category: Optional[str] = None,
) -> Material:
    if not image_url:
        raise ValueError("image_url, item_name, quantity, and unit_cost are required")
    _require_fields(
        item_name, quantity, unit_cost, "image_url, item_name, quantity, and unit_cost are required"
    )

    # Stored as-is; the link is never fetched or checked.
    row = _new_material(item_name, category, quantity, unit_cost, image_url=image_url)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def _insert_image(db: Session, material_id: int, image: ImagePayload) -> MaterialImage:
    row = MaterialImage(material_id=material_id, mime_type=image.mime_type, data=image.data)
    db.add(row)
    db.flush()
    return row


def create_material_with_upload(
    db: Session,
    image: Optional[ImagePayload],
    item_name: Optional[str],
    quantity: Optional[Decimal],
    unit_cost: Optional[Decimal],
    category: Optional[str] = None,
) -> Material:
    """
    Insert the material and its image in one transaction. Either both rows
    are committed or neither is.
    """
    if image is None:
        raise ValueError("file, item_name, quantity, and unit_cost are required")
    _require_fields(item_name, quantity, unit_cost, "file, item_name, quantity, and unit_cost are required")

    try:
        material = _new_material(item_name, category, quantity, unit_cost)
        db.add(material)
        db.flush()

        _insert_image(db, material.id, image)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(material)
    return material


def get_latest_image(db: Session, material_id: int) -> Optional[ImagePayload]:
    row = (
        db.query(MaterialImage.mime_type, MaterialImage.data)
        .filter(MaterialImage.material_id == int(material_id))
        .order_by(MaterialImage.created_at.desc(), MaterialImage.id.desc())
        .first()
    )
    if row is None:
        return None
    return ImagePayload(mime_type=row.mime_type, data=bytes(row.data))
