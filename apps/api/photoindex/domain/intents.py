"""
Keyword extraction from a recognized intent.

The recognizer's response is modelled as an `IntentResult`: the intent name
plus a mapping of slot name to an optional `SlotValue`. Only the search
intent yields keywords; anything else is an empty, valid outcome.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from photoindex.domain.labels import merge_unique

PRIMARY_SLOTS = ("keyword1", "keyword2")
# older bot versions expose a single slot
LEGACY_SLOT = "keyword"

_AND_WORD = re.compile(r"\band\b")
_SEPARATORS = re.compile(r"[,\s]+")


@dataclass
class SlotValue:
    """A slot as resolved by the recognizer."""
    interpreted_value: Optional[str] = None
    resolved_values: List[str] = field(default_factory=list)
    original_value: Optional[str] = None

    def resolve(self) -> Optional[str]:
        """Interpreted value first, then the first resolved alternative, then the raw text."""
        for candidate in (
            self.interpreted_value,
            self.resolved_values[0] if self.resolved_values else None,
            self.original_value,
        ):
            if candidate and candidate.strip():
                return candidate.strip()
        return None


@dataclass
class IntentResult:
    name: Optional[str] = None
    slots: Dict[str, Optional[SlotValue]] = field(default_factory=dict)

    def slot_text(self, slot_name: str) -> Optional[str]:
        slot = self.slots.get(slot_name)
        if slot is None:
            return None
        return slot.resolve()


def tokenize(text: str) -> List[str]:
    """Lowercase, drop the standalone word "and", split on commas/whitespace, dedupe."""
    cleaned = _AND_WORD.sub(" ", text.lower())
    parts = [p.strip() for p in _SEPARATORS.split(cleaned)]
    return merge_unique(p for p in parts if p)


def _tokens_from_slots(intent: IntentResult, slot_names: Sequence[str]) -> List[str]:
    tokens: List[str] = []
    for name in slot_names:
        text = intent.slot_text(name)
        if text:
            tokens.extend(tokenize(text))
    return merge_unique(tokens)


def extract_keywords(intent: Optional[IntentResult], search_intent_name: str) -> List[str]:
    """Extract search keywords from the primary slot pair, falling back to the legacy slot."""
    if intent is None or intent.name != search_intent_name:
        return []

    keywords = _tokens_from_slots(intent, PRIMARY_SLOTS)
    if not keywords:
        keywords = _tokens_from_slots(intent, (LEGACY_SLOT,))
    return keywords
