"""
Intent recognition through an Amazon Lex V2 bot.
"""
import logging
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from photoindex.core.config import Settings
from photoindex.core.errors import CollaboratorError
from photoindex.domain.intents import IntentResult, SlotValue

logger = logging.getLogger(__name__)


def parse_slot(raw: Optional[Dict[str, Any]]) -> Optional[SlotValue]:
    """Convert a Lex V2 slot payload into a SlotValue. Unfilled slots come back as None."""
    if not raw:
        return None
    value = raw.get("value") or {}
    if not value:
        return None
    return SlotValue(
        interpreted_value=value.get("interpretedValue"),
        resolved_values=list(value.get("resolvedValues") or []),
        original_value=value.get("originalValue"),
    )


def parse_recognize_text_response(resp: Dict[str, Any]) -> Optional[IntentResult]:
    intent = (resp.get("sessionState") or {}).get("intent")
    if not intent:
        return None
    slots = intent.get("slots") or {}
    return IntentResult(
        name=intent.get("name"),
        slots={name: parse_slot(slot) for name, slot in slots.items()},
    )


class IntentRecognizer:
    def __init__(self, client: Any, settings: Settings):
        # fail fast, before any remote call is attempted
        settings.require("lex_bot_id", "lex_bot_alias_id")
        self.client = client
        self.bot_id = settings.lex_bot_id
        self.bot_alias_id = settings.lex_bot_alias_id
        self.locale_id = settings.lex_locale_id
        self.session_id = settings.lex_session_id

    def recognize(self, text: str) -> Optional[IntentResult]:
        """Send the phrase to the bot and return the recognized intent, if any."""
        try:
            resp = self.client.recognize_text(
                botId=self.bot_id,
                botAliasId=self.bot_alias_id,
                localeId=self.locale_id,
                sessionId=self.session_id,
                text=text,
            )
        except (ClientError, BotoCoreError) as e:
            raise CollaboratorError(f"Lex recognize_text failed: {e}") from e

        result = parse_recognize_text_response(resp)
        logger.info("Recognized intent: %s", result.name if result else None)
        return result
