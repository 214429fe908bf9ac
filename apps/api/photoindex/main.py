import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from photoindex.core.config import get_settings
from photoindex.core.errors import PhotoIndexError
from photoindex.core.logging_config import setup_logging
from photoindex.routers.ingest import router as ingest_router
from photoindex.routers.search import router as search_router

settings = get_settings()
setup_logging(log_level=settings.log_level, log_dir=settings.log_dir, log_file="api.log")

logger = logging.getLogger(__name__)

app = FastAPI(title="Photo Index API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(search_router, prefix="/api/v1")
app.include_router(ingest_router, prefix="/api/v1")

def _error_response(exc: Exception, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=500, content={"message": "Internal server error", "error": str(exc)},
                        headers=headers)

@app.exception_handler(PhotoIndexError)
async def photo_index_error_handler(request: Request, exc: PhotoIndexError) -> JSONResponse:
    logger.error("Error handling %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return _error_response(exc)

# Runs in ServerErrorMiddleware, outside CORSMiddleware, so CORS headers are set here
@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error for %s %s", request.method, request.url.path, exc_info=exc)
    headers = {"Access-Control-Allow-Origin": "*"} if "*" in settings.cors_allow_origins else None
    return _error_response(exc, headers)

@app.get("/healthz")
def healthz():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
