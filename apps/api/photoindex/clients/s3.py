from typing import Any, Dict

from botocore.exceptions import BotoCoreError, ClientError

from photoindex.core.errors import CollaboratorError

class ObjectMetadataReader:
    """Reads user-defined metadata of an S3 object."""

    def __init__(self, client: Any):
        self.client = client

    def read(self, bucket: str, key: str) -> Dict[str, str]:
        try:
            resp = self.client.head_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise CollaboratorError(f"S3 head_object failed for s3://{bucket}/{key}: {e}") from e
        return resp.get("Metadata") or {}
