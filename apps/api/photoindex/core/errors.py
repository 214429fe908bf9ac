from typing import Iterable, Optional


class PhotoIndexError(Exception):
    """Base class for every failure raised by the photo index pipelines."""


class ConfigurationError(PhotoIndexError):
    """A required setting is missing. Fatal, never retried."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")


class InvalidImageError(PhotoIndexError):
    """The image-analysis service rejected the object as an unsupported or corrupt image."""


class CollaboratorError(PhotoIndexError):
    """An external call (S3, Rekognition, Lex, OpenSearch) failed."""


class IndexingError(CollaboratorError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
