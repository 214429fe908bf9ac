"""
Serverless entry points.

`index_photos` consumes S3 ObjectCreated notifications; `search_photos`
answers API Gateway proxy requests (`/search?q=...`). Both share the
services used by the HTTP API.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from photoindex.core.config import get_settings
from photoindex.core.errors import PhotoIndexError
from photoindex.core.logging_config import setup_logging
from photoindex.dependencies import build_ingestion_service, build_search_service
from photoindex.schemas.ingest import S3Event, UploadNotification

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,x-api-key",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
}

_logging_ready = False

def _setup() -> None:
    global _logging_ready
    if not _logging_ready:
        settings = get_settings()
        setup_logging(log_level=settings.log_level, log_dir=settings.log_dir)
        _logging_ready = True

def _json_response(status_code: int, body: Any) -> Dict[str, Any]:
    return {"statusCode": status_code, "headers": dict(CORS_HEADERS), "body": json.dumps(body)}

def query_from_event(event: Dict[str, Any]) -> Optional[str]:
    """Read q from the proxy query string, falling back to a top-level q."""
    params = event.get("queryStringParameters") or {}
    return params.get("q") or event.get("q")

def index_photos(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    _setup()
    logger.info("Received S3 event: %s", json.dumps(event)[:2000])
    records = S3Event.model_validate(event).Records
    svc = build_ingestion_service(get_settings())
    results = svc.ingest(UploadNotification.from_record(r) for r in records)
    body: List[Dict[str, Any]] = [r.model_dump(mode="json", exclude_none=True) for r in results]
    return {"statusCode": 200, "body": json.dumps(body)}

def search_photos(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    _setup()
    try:
        logger.info("Incoming event: %s", json.dumps(event)[:2000])
        q = query_from_event(event)
        if not q or not q.strip():
            return _json_response(200, [])
        results = build_search_service(get_settings()).execute(q)
        return _json_response(200, [r.model_dump(mode="json") for r in results])
    except PhotoIndexError as e:
        logger.exception("Error in search-photos")
        return _json_response(500, {"message": "Internal server error", "error": str(e)})
    except Exception as e:
        logger.exception("Unexpected error in search-photos")
        return _json_response(500, {"message": "Internal server error", "error": str(e)})
