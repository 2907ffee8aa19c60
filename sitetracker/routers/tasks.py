from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from sitetracker.database import get_db
from sitetracker.schemas.envelope import DataResponse
from sitetracker.schemas.task import TaskCreate, TaskResponse
from sitetracker.services import task_service

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.get("", response_model=DataResponse[List[TaskResponse]])
def list_tasks(db: Session = Depends(get_db)):
    rows = task_service.list_tasks(db)
    return DataResponse(data=[TaskResponse.model_validate(row) for row in rows])


@router.post("", status_code=201, response_model=DataResponse[TaskResponse])
def create_task(
    payload: Optional[TaskCreate] = Body(default=None),
    db: Session = Depends(get_db),
):
    payload = payload or TaskCreate()
    try:
        row = task_service.create_task(
            db,
            title=payload.title,
            status=payload.status,
            amount=payload.amount,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return DataResponse(data=TaskResponse.model_validate(row))
