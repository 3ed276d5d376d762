from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from backend_fastapi.api.envelope import Envelope, ok

router = APIRouter(tags=["health"])


class Health(BaseModel):
    status: str
    timestamp: datetime


@router.get("/health", response_model=Envelope[Health], summary="Liveness check")
def health() -> Envelope[Health]:
    return ok(Health(status="ok", timestamp=datetime.now(timezone.utc)))
