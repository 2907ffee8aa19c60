from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from sitetracker.database import get_db
from sitetracker.schemas.envelope import DataResponse
from sitetracker.schemas.labor import LaborCreate, LaborResponse
from sitetracker.services import labor_service

router = APIRouter(prefix="/api/labor", tags=["Labor"])


@router.get("", response_model=DataResponse[List[LaborResponse]])
def list_labor(db: Session = Depends(get_db)):
    rows = labor_service.list_labor(db)
    return DataResponse(data=[LaborResponse.model_validate(row) for row in rows])


@router.post("", status_code=201, response_model=DataResponse[LaborResponse])
def create_labor(
    payload: Optional[LaborCreate] = Body(default=None),
    db: Session = Depends(get_db),
):
    payload = payload or LaborCreate()
    try:
        row = labor_service.create_labor(
            db,
            worker_name=payload.worker_name,
            role=payload.role,
            hours=payload.hours,
            rate=payload.rate,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return DataResponse(data=LaborResponse.model_validate(row))
