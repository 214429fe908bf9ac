"""
Label normalization and merge for the ingestion side.

A label is a lowercase, trimmed, non-empty string. Detected labels and
user-supplied labels are normalized the same way and merged into one
deduplicated, first-seen-order sequence (detected first, then custom).
"""

from typing import Iterable, List, Mapping, Optional

# S3 lowercases user-defined metadata keys; older uploads used the hyphenated form
CUSTOM_LABELS_KEYS = ("customlabels", "custom-labels")


def normalize_label(raw: Optional[str]) -> Optional[str]:
    """Lowercase and trim a label. Returns None when nothing is left."""
    if raw is None:
        return None
    label = raw.strip().lower()
    return label or None


def normalize_labels(raw_labels: Iterable[Optional[str]]) -> List[str]:
    return [label for label in map(normalize_label, raw_labels) if label]


def parse_custom_labels(raw: Optional[str]) -> List[str]:
    """Split a comma-separated custom labels string into normalized labels."""
    if not raw:
        return []
    return normalize_labels(raw.split(","))


def custom_labels_raw(metadata: Optional[Mapping[str, str]]) -> Optional[str]:
    """Return the raw custom labels metadata value, matching keys case-insensitively."""
    if not metadata:
        return None
    lowered = {k.lower(): v for k, v in metadata.items()}
    for key in CUSTOM_LABELS_KEYS:
        if lowered.get(key):
            return lowered[key]
    return None


def merge_unique(*sources: Iterable[str]) -> List[str]:
    """Union the sources preserving first-seen order."""
    seen = set()
    merged: List[str] = []
    for source in sources:
        for item in source:
            if item not in seen:
                seen.add(item)
                merged.append(item)
    return merged


def merge_labels(detected: Iterable[Optional[str]], custom_raw: Optional[str]) -> List[str]:
    """Build the LabelSet for a photo from detected label names and the raw custom labels string."""
    return merge_unique(normalize_labels(detected), parse_custom_labels(custom_raw))
