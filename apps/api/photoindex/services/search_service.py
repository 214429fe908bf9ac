import logging
from typing import List, Optional

from photoindex.clients.lex import IntentRecognizer
from photoindex.domain.expansion import expand_keywords
from photoindex.domain.intents import extract_keywords
from photoindex.repositories.photos_repo import PhotosRepository
from photoindex.repositories.query_builder import DEFAULT_URL_TEMPLATE, map_hit
from photoindex.schemas.photos import PhotoResult

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, recognizer: IntentRecognizer, repo: PhotosRepository,
                 search_intent_name: str = "SearchIntent",
                 url_template: str = DEFAULT_URL_TEMPLATE):
        self.recognizer = recognizer
        self.repo = repo
        self.search_intent_name = search_intent_name
        self.url_template = url_template

    def keywords_for(self, query_text: str) -> List[str]:
        """Ask the intent recognizer for the phrase and pull keywords out of its slots."""
        intent = self.recognizer.recognize(query_text)
        return extract_keywords(intent, self.search_intent_name)

    def execute(self, q: Optional[str]) -> List[PhotoResult]:
        """Run a natural-language photo search. Blank phrases and unrecognized intents return []."""
        if not q or not q.strip():
            return []

        query_text = q.strip()
        logger.info("Search query: %s", query_text)

        keywords = self.keywords_for(query_text)
        logger.info("Extracted keywords: %s", keywords)
        if not keywords:
            return []

        terms = expand_keywords(keywords)
        logger.info("Expanded search terms: %s", terms)

        hits = self.repo.search_labels(terms)
        logger.info("OpenSearch returned %d hits", len(hits))
        return [PhotoResult(**map_hit(h, self.url_template)) for h in hits]
