"""
Unit tests for the AWS collaborator adapters (Rekognition, S3, Lex V2).

boto3 clients are replaced with mocks; only request shape and response
parsing are checked here.
"""

import pytest
from unittest.mock import Mock

from botocore.exceptions import ClientError, EndpointConnectionError

from photoindex.clients.lex import IntentRecognizer, parse_recognize_text_response, parse_slot
from photoindex.clients.rekognition import LabelDetector
from photoindex.clients.s3 import ObjectMetadataReader
from photoindex.core.config import Settings
from photoindex.core.errors import CollaboratorError, ConfigurationError, InvalidImageError


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


class TestLabelDetector:
    def test_given_image_when_detecting_then_requests_ten_labels_at_eighty_confidence(self):
        # Given
        client = Mock()
        client.detect_labels.return_value = {"Labels": [{"Name": "Dog", "Confidence": 99.1},
                                                        {"Name": "Pet", "Confidence": 90.0}]}
        detector = LabelDetector(client)

        # When
        names = detector.detect("b2", "dog.jpg")

        # Then
        assert names == ["Dog", "Pet"]
        client.detect_labels.assert_called_once_with(
            Image={"S3Object": {"Bucket": "b2", "Name": "dog.jpg"}},
            MaxLabels=10,
            MinConfidence=80,
        )

    def test_given_response_without_labels_when_detecting_then_returns_empty_list(self):
        client = Mock()
        client.detect_labels.return_value = {}
        assert LabelDetector(client).detect("b2", "blank.jpg") == []

    def test_given_invalid_image_format_when_detecting_then_raises_invalid_image_error(self):
        client = Mock()
        client.detect_labels.side_effect = _client_error("InvalidImageFormatException", "DetectLabels")

        with pytest.raises(InvalidImageError):
            LabelDetector(client).detect("b2", "notes.txt")

    def test_given_other_client_error_when_detecting_then_raises_collaborator_error(self):
        client = Mock()
        client.detect_labels.side_effect = _client_error("AccessDeniedException", "DetectLabels")

        with pytest.raises(CollaboratorError) as excinfo:
            LabelDetector(client).detect("b2", "dog.jpg")
        assert not isinstance(excinfo.value, InvalidImageError)

    def test_given_network_failure_when_detecting_then_raises_collaborator_error(self):
        client = Mock()
        client.detect_labels.side_effect = EndpointConnectionError(endpoint_url="https://rekognition")

        with pytest.raises(CollaboratorError):
            LabelDetector(client).detect("b2", "dog.jpg")


class TestObjectMetadataReader:
    def test_given_object_when_reading_then_returns_user_metadata(self):
        client = Mock()
        client.head_object.return_value = {"ContentType": "image/jpeg", "Metadata": {"customlabels": "Sam"}}

        assert ObjectMetadataReader(client).read("b2", "sam.jpg") == {"customlabels": "Sam"}
        client.head_object.assert_called_once_with(Bucket="b2", Key="sam.jpg")

    def test_given_object_without_metadata_when_reading_then_returns_empty_mapping(self):
        client = Mock()
        client.head_object.return_value = {}
        assert ObjectMetadataReader(client).read("b2", "a.jpg") == {}

    def test_given_missing_object_when_reading_then_raises_collaborator_error(self):
        client = Mock()
        client.head_object.side_effect = _client_error("404", "HeadObject")

        with pytest.raises(CollaboratorError, match="s3://b2/gone.jpg"):
            ObjectMetadataReader(client).read("b2", "gone.jpg")


class TestLexParsing:
    def test_given_filled_slot_when_parsing_then_keeps_all_value_forms(self):
        slot = parse_slot({"value": {"originalValue": "Kitties", "interpretedValue": "kitties",
                                     "resolvedValues": ["kitty"]}})
        assert slot.interpreted_value == "kitties"
        assert slot.resolved_values == ["kitty"]
        assert slot.original_value == "Kitties"

    @pytest.mark.parametrize("raw", [None, {}, {"value": None}])
    def test_given_unfilled_slot_when_parsing_then_returns_none(self, raw):
        assert parse_slot(raw) is None

    def test_given_recognize_text_response_when_parsing_then_builds_intent_result(self):
        # Given
        resp = {
            "sessionState": {"intent": {"name": "SearchIntent", "state": "ReadyForFulfillment", "slots": {
                "keyword1": {"value": {"originalValue": "cats", "interpretedValue": "cats", "resolvedValues": []}},
                "keyword2": None,
            }}},
            "interpretations": [],
        }

        # When
        intent = parse_recognize_text_response(resp)

        # Then
        assert intent.name == "SearchIntent"
        assert intent.slot_text("keyword1") == "cats"
        assert intent.slots["keyword2"] is None
        assert intent.slot_text("keyword") is None

    def test_given_response_without_intent_when_parsing_then_returns_none(self):
        assert parse_recognize_text_response({"sessionState": {}}) is None
        assert parse_recognize_text_response({}) is None


class TestIntentRecognizer:
    def test_given_missing_bot_ids_when_constructing_then_fails_fast_with_configuration_error(self):
        """
        Given: Settings without LEX_BOT_ID / LEX_BOT_ALIAS_ID
        When: Constructing the recognizer
        Then: Raises ConfigurationError before any remote call
        """
        # Given
        client = Mock()
        settings = Settings(_env_file=None, lex_bot_id=None, lex_bot_alias_id=None)

        # When / Then
        with pytest.raises(ConfigurationError) as excinfo:
            IntentRecognizer(client, settings)
        assert excinfo.value.missing == ["LEX_BOT_ID", "LEX_BOT_ALIAS_ID"]
        client.recognize_text.assert_not_called()

    def test_given_configured_bot_when_recognizing_then_sends_expected_request(self):
        # Given
        client = Mock()
        client.recognize_text.return_value = {"sessionState": {"intent": {"name": "SearchIntent", "slots": {}}}}
        settings = Settings(_env_file=None, lex_bot_id="BOT123", lex_bot_alias_id="ALIAS9")
        recognizer = IntentRecognizer(client, settings)

        # When
        intent = recognizer.recognize("show me cats")

        # Then
        assert intent.name == "SearchIntent"
        client.recognize_text.assert_called_once_with(
            botId="BOT123",
            botAliasId="ALIAS9",
            localeId="en_US",
            sessionId="photos-session",
            text="show me cats",
        )

    def test_given_lex_failure_when_recognizing_then_raises_collaborator_error(self):
        client = Mock()
        client.recognize_text.side_effect = _client_error("ThrottlingException", "RecognizeText")
        settings = Settings(_env_file=None, lex_bot_id="BOT123", lex_bot_alias_id="ALIAS9")

        with pytest.raises(CollaboratorError):
            IntentRecognizer(client, settings).recognize("cats")
