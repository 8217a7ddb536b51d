"""FastAPI route for product image uploads."""

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from assets import get_asset_store
from assets.port import AssetStoreError, Upload

logger = structlog.get_logger(__name__)

upload_router = APIRouter(prefix="/upload", tags=["uploads"])


@upload_router.post("")
async def upload_images(request: Request) -> JSONResponse:
    form = await request.form()
    files = [entry for entry in form.getlist("images") if hasattr(entry, "read")]
    if not files:
        return JSONResponse(status_code=400, content={"message": "No files uploaded"})

    uploads = [
        Upload(filename=file.filename or "upload", content=await file.read(), content_type=file.content_type)
        for file in files
    ]
    try:
        urls = get_asset_store().upload(uploads)
    except AssetStoreError as e:
        logger.error("Upload process failed", error=str(e))
        return JSONResponse(status_code=500, content={"message": "Image upload failed", "error": str(e)})

    return JSONResponse(status_code=200, content={"message": "Images uploaded successfully", "urls": urls})
