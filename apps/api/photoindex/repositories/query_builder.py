from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

DEFAULT_URL_TEMPLATE = "https://{bucket}.s3.amazonaws.com/{key}"

def build_labels_query(keywords: List[str], field: str = "labels") -> Dict[str, Any]:
    # terms = OR across every keyword, one exact match is enough
    return {"query": {"terms": {field: list(keywords)}}}

def public_url(bucket: Optional[str], key: Optional[str],
               template: str = DEFAULT_URL_TEMPLATE) -> Optional[str]:
    if not bucket or not key:
        return None
    return template.format(bucket=bucket, key=quote(key, safe="!'()*"))

def map_hit(hit: Mapping[str, Any], template: str = DEFAULT_URL_TEMPLATE) -> Dict[str, Any]:
    src = hit.get("_source") or {}
    bucket = src.get("bucket")
    key = src.get("objectKey")
    return {
        "objectKey": key,
        "bucket": bucket,
        "labels": src.get("labels"),
        "url": public_url(bucket, key, template),
    }
