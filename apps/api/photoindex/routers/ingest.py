from typing import List

from fastapi import APIRouter, Depends

from photoindex.dependencies import get_ingestion_service
from photoindex.schemas.ingest import IngestResult, S3Event, UploadNotification
from photoindex.services.ingestion_service import IngestionService

router = APIRouter(prefix="/ingest", tags=["ingest"])

@router.post("", response_model=List[IngestResult], response_model_exclude_none=True)
def ingest_endpoint(event: S3Event, svc: IngestionService = Depends(get_ingestion_service)) -> List[IngestResult]:
    """Index every object in an S3 upload notification batch. Per-object failures are reported, not raised."""
    return svc.ingest(UploadNotification.from_record(r) for r in event.Records)
