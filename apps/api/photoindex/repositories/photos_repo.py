import logging
from typing import Any, Dict, List

from opensearchpy.exceptions import OpenSearchException, TransportError

from photoindex.core.errors import CollaboratorError, IndexingError
from photoindex.repositories.query_builder import build_labels_query
from photoindex.schemas.photos import PhotoDocument

logger = logging.getLogger(__name__)


class PhotosRepository:
    """Reads and writes photo documents in the OpenSearch index."""

    def __init__(self, client: Any, index: str = "photos"):
        self.client = client
        self.index = index

    def index_document(self, doc: PhotoDocument) -> Dict[str, Any]:
        """
        Write one photo document with an auto-generated id.
        Any non-2xx answer is raised as IndexingError.
        """
        try:
            resp = self.client.index(index=self.index, body=doc.model_dump())
        except TransportError as e:
            status = e.status_code if isinstance(e.status_code, int) else None
            logger.error("OpenSearch index error: %s %s", e.status_code, e.info)
            raise IndexingError(f"OpenSearch indexing failed with status {e.status_code}", status) from e
        except OpenSearchException as e:
            raise IndexingError(f"OpenSearch indexing failed: {e}") from e
        logger.info("OpenSearch response: %s", resp)
        return resp

    def search_labels(self, keywords: List[str]) -> List[Dict[str, Any]]:
        """
        Return raw hits whose labels contain any of the keywords.
        An empty keyword list returns [] without contacting the index.
        """
        if not keywords:
            return []
        try:
            resp = self.client.search(index=self.index, body=build_labels_query(keywords))
        except TransportError as e:
            logger.error("OpenSearch search error: %s %s", e.status_code, e.info)
            raise CollaboratorError(f"OpenSearch search failed with status {e.status_code}") from e
        except OpenSearchException as e:
            raise CollaboratorError(f"OpenSearch search failed: {e}") from e
        return (resp.get("hits") or {}).get("hits") or []
