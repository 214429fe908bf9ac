# features/environment.py
import uuid
from typing import Any, Dict, List, Optional

from botocore.exceptions import ClientError
from fastapi.testclient import TestClient

from photoindex.clients.lex import IntentRecognizer
from photoindex.clients.rekognition import LabelDetector
from photoindex.clients.s3 import ObjectMetadataReader
from photoindex.core.config import Settings
from photoindex.dependencies import get_ingestion_service, get_search_service
from photoindex.main import app
from photoindex.repositories.photos_repo import PhotosRepository
from photoindex.services.ingestion_service import IngestionService
from photoindex.services.search_service import SearchService


class FakeOpenSearch:
    """In-memory stand-in for the opensearch-py client: index + terms search on labels."""

    def __init__(self):
        self.docs: Dict[str, Dict[str, Any]] = {}
        self.search_calls: List[Dict[str, Any]] = []

    def index(self, index: str, body: Dict[str, Any]) -> Dict[str, Any]:
        doc_id = str(uuid.uuid4())
        self.docs[doc_id] = dict(body)
        return {"_index": index, "_id": doc_id, "result": "created"}

    def search(self, index: str, body: Dict[str, Any]) -> Dict[str, Any]:
        self.search_calls.append(body)
        terms = set(body["query"]["terms"]["labels"])
        hits = [{"_index": index, "_id": i, "_source": d}
                for i, d in self.docs.items() if terms & set(d.get("labels") or [])]
        return {"hits": {"total": {"value": len(hits)}, "hits": hits}}

    def by_key(self, key: str) -> Optional[Dict[str, Any]]:
        return next((d for d in self.docs.values() if d.get("objectKey") == key), None)


class FakeRekognition:
    def __init__(self):
        self.labels: Dict[str, List[str]] = {}
        self.invalid: set = set()

    def detect_labels(self, Image, MaxLabels, MinConfidence):
        ref = Image["S3Object"]
        key = f"{ref['Bucket']}/{ref['Name']}"
        if key in self.invalid:
            raise ClientError({"Error": {"Code": "InvalidImageFormatException",
                                         "Message": "Request has invalid image format"}}, "DetectLabels")
        return {"Labels": [{"Name": n, "Confidence": 95.0} for n in self.labels.get(key, [])][:MaxLabels]}


class FakeS3:
    def __init__(self):
        self.metadata: Dict[str, Dict[str, str]] = {}

    def head_object(self, Bucket, Key):
        return {"ContentType": "image/jpeg", "Metadata": self.metadata.get(f"{Bucket}/{Key}", {})}


class FakeLex:
    def __init__(self):
        self.intents: Dict[str, Dict[str, Any]] = {}
        self.calls: List[str] = []

    def recognize_text(self, botId, botAliasId, localeId, sessionId, text):
        self.calls.append(text)
        intent = self.intents.get(text)
        if intent is None:
            return {"sessionState": {"intent": {"name": "FallbackIntent", "slots": {}}}}
        return {"sessionState": {"intent": intent}}


def before_scenario(context, scenario):
    settings = Settings(_env_file=None, opensearch_endpoint="https://search.local",
                        lex_bot_id="BOT", lex_bot_alias_id="ALIAS")

    context.opensearch = FakeOpenSearch()
    context.rekognition = FakeRekognition()
    context.s3 = FakeS3()
    context.lex = FakeLex()

    repo = PhotosRepository(context.opensearch, index=settings.opensearch_index)
    ingestion = IngestionService(
        detector=LabelDetector(context.rekognition),
        metadata=ObjectMetadataReader(context.s3),
        repo=repo,
    )
    search = SearchService(recognizer=IntentRecognizer(context.lex, settings), repo=repo,
                           search_intent_name=settings.search_intent_name)

    # Override DI to use the in-memory collaborators
    app.dependency_overrides[get_ingestion_service] = lambda: ingestion
    app.dependency_overrides[get_search_service] = lambda: search

    context.client = TestClient(app)
    context.search_url = "/api/v1/search"
    context.ingest_url = "/api/v1/ingest"
    context.last_response = None


def after_scenario(context, scenario):
    app.dependency_overrides.clear()
