from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.responses import JSONResponse, RedirectResponse

from cache_headers.cache_control_headers import setup_cache_control
from cache_headers.settings import get_cache_control_config

app = FastAPI(title="Cache-Control Service", version="1.0.0")

# Policy comes from CACHE_CONTROL_* env vars, see cache_headers/settings.py
setup_cache_control(app, get_cache_control_config())

router = APIRouter()

ITEMS = {
    1: {"id": 1, "name": "first"},
    2: {"id": 2, "name": "second"},
}


@router.get("/health")
def health():
    """Health check endpoint - returns service status"""
    return {"status": "ok", "service": "cache-control"}


@router.get("/redirect")
def redirect():
    return RedirectResponse(url="/health", status_code=307)


@router.get("/pinned")
def pinned():
    """Handler that picks its own Cache-Control; the middleware must keep it"""
    return JSONResponse({"pinned": True}, headers={"Cache-Control": "max-age=10"})


@router.get("/items/{item_id}")
def get_item(item_id: int):
    item = ITEMS.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


app.include_router(router)
