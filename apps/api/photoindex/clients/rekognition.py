from typing import Any, List

from botocore.exceptions import BotoCoreError, ClientError

from photoindex.core.errors import CollaboratorError, InvalidImageError

INVALID_IMAGE_CODES = {"InvalidImageFormatException"}

class LabelDetector:
    """Detects labels for an S3-hosted image with Amazon Rekognition."""

    def __init__(self, client: Any, max_labels: int = 10, min_confidence: float = 80):
        self.client = client
        self.max_labels = max_labels
        self.min_confidence = min_confidence

    def detect(self, bucket: str, key: str) -> List[str]:
        """Return the detected label names in the order Rekognition ranks them."""
        try:
            resp = self.client.detect_labels(
                Image={"S3Object": {"Bucket": bucket, "Name": key}},
                MaxLabels=self.max_labels,
                MinConfidence=self.min_confidence,
            )
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code in INVALID_IMAGE_CODES:
                raise InvalidImageError(str(e)) from e
            raise CollaboratorError(f"Rekognition detect_labels failed: {e}") from e
        except BotoCoreError as e:
            raise CollaboratorError(f"Rekognition detect_labels failed: {e}") from e

        return [label.get("Name") for label in resp.get("Labels") or []]
