from functools import lru_cache
from typing import Any, Optional

import boto3
from fastapi import Depends, Query
from opensearchpy import OpenSearch

from photoindex.clients.lex import IntentRecognizer
from photoindex.clients.rekognition import LabelDetector
from photoindex.clients.s3 import ObjectMetadataReader
from photoindex.core.config import Settings, get_settings
from photoindex.repositories.photos_repo import PhotosRepository
from photoindex.services.ingestion_service import IngestionService
from photoindex.services.search_service import SearchService

# In tests, the get_*_service providers are overridden. Clients are built lazily and reused.

@lru_cache()
def _aws_client(service: str, region: Optional[str]) -> Any:
    return boto3.client(service, region_name=region)

@lru_cache()
def _opensearch_client(endpoint: str, username: Optional[str], password: Optional[str], timeout: int) -> OpenSearch:
    http_auth = (username, password) if username else None
    return OpenSearch(hosts=[endpoint], http_auth=http_auth, verify_certs=True, timeout=timeout)

def build_photos_repo(settings: Settings) -> PhotosRepository:
    settings.require("opensearch_endpoint")
    client = _opensearch_client(settings.opensearch_endpoint, settings.opensearch_username,
                                settings.opensearch_password, settings.opensearch_timeout)
    return PhotosRepository(client, index=settings.opensearch_index)

def build_search_service(settings: Settings) -> SearchService:
    settings.require("lex_bot_id", "lex_bot_alias_id", "opensearch_endpoint")
    recognizer = IntentRecognizer(_aws_client("lexv2-runtime", settings.aws_region), settings)
    return SearchService(
        recognizer=recognizer,
        repo=build_photos_repo(settings),
        search_intent_name=settings.search_intent_name,
        url_template=settings.public_url_template,
    )

def build_ingestion_service(settings: Settings) -> IngestionService:
    detector = LabelDetector(
        _aws_client("rekognition", settings.aws_region),
        max_labels=settings.rekognition_max_labels,
        min_confidence=settings.rekognition_min_confidence,
    )
    metadata = ObjectMetadataReader(_aws_client("s3", settings.aws_region))
    return IngestionService(detector=detector, metadata=metadata, repo=build_photos_repo(settings))

def search_phrase(q: Optional[str] = Query(default=None)) -> Optional[str]:
    """The trimmed search phrase, or None when it is blank."""
    if not q or not q.strip():
        return None
    return q.strip()

def get_search_service(q: Optional[str] = Depends(search_phrase),
                       settings: Settings = Depends(get_settings)) -> Optional[SearchService]:
    # a blank phrase answers [] without collaborators, so nothing is built or validated
    if q is None:
        return None
    return build_search_service(settings)

def get_ingestion_service(settings: Settings = Depends(get_settings)) -> IngestionService:
    return build_ingestion_service(settings)
