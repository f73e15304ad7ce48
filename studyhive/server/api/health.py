# studyhive/server/api/health.py

from fastapi import APIRouter, Depends

from studyhive.server.api.deps import get_store
from studyhive.server.config import PORT
from studyhive.server.core.store import Store
from studyhive.server.core.timeutil import utc_now


router = APIRouter(prefix="/api")


@router.get("/health")
def health(store: Store = Depends(get_store)):
    return {
        "status": "OK",
        "timestamp": utc_now(),
        **store.counts(),
        "port": PORT,
    }


@router.get("/test")
def test_endpoint():
    return {"message": "Server is working!", "timestamp": utc_now()}
