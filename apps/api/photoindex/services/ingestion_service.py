"""
Ingestion pipeline: detect labels for each uploaded photo, merge them with the
user's custom labels and index one document per object.
"""
import logging
from typing import Iterable, List

from photoindex.clients.rekognition import LabelDetector
from photoindex.clients.s3 import ObjectMetadataReader
from photoindex.core.enums import IngestStatus
from photoindex.core.errors import InvalidImageError
from photoindex.core.timestamps import event_time_or_now
from photoindex.domain.labels import custom_labels_raw, merge_labels
from photoindex.repositories.photos_repo import PhotosRepository
from photoindex.schemas.ingest import IngestResult, UploadNotification
from photoindex.schemas.photos import PhotoDocument

logger = logging.getLogger(__name__)


class IngestionService:
    def __init__(self, detector: LabelDetector, metadata: ObjectMetadataReader, repo: PhotosRepository):
        self.detector = detector
        self.metadata = metadata
        self.repo = repo

    def build_document(self, item: UploadNotification) -> PhotoDocument:
        detected = self.detector.detect(item.bucket, item.key)
        logger.info("Rekognition labels: %s", detected)

        custom_raw = custom_labels_raw(self.metadata.read(item.bucket, item.key))
        logger.info("Custom labels: %s", custom_raw)

        return PhotoDocument(
            objectKey=item.key,
            bucket=item.bucket,
            createdTimestamp=event_time_or_now(item.event_time),
            labels=merge_labels(detected, custom_raw),
        )

    def ingest_one(self, item: UploadNotification) -> IngestResult:
        """Process a single upload. Failures become a status, never an exception."""
        logger.info("Processing object: s3://%s/%s", item.bucket, item.key)
        try:
            doc = self.build_document(item)
            logger.info("Indexing document: %s", doc.model_dump_json())
            self.repo.index_document(doc)
        except InvalidImageError as e:
            logger.warning("Skipping invalid image s3://%s/%s: %s", item.bucket, item.key, e)
            return IngestResult(key=item.key, status=IngestStatus.skipped_invalid_image, error=str(e))
        except Exception as e:
            logger.exception("Error processing s3://%s/%s", item.bucket, item.key)
            return IngestResult(key=item.key, status=IngestStatus.error, error=str(e))
        return IngestResult(key=item.key, status=IngestStatus.ok)

    def ingest(self, items: Iterable[UploadNotification]) -> List[IngestResult]:
        results = [self.ingest_one(item) for item in items]
        failed = sum(1 for r in results if r.status.is_failure())
        logger.info("Ingested %d objects, %d failed", len(results), failed)
        return results
