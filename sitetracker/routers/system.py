from fastapi import APIRouter, Depends

from sitetracker.database import get_engine
from sitetracker.schemas.envelope import OkResponse
from sitetracker.services import schema_service

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/health", response_model=OkResponse)
def health():
    return OkResponse()


@router.post("/bootstrap", response_model=OkResponse)
def bootstrap(engine=Depends(get_engine)):
    schema_service.bootstrap(engine)
    return OkResponse()
