"""
Unit tests for envelope normalization.

Covers the coded/raw decision, unwrapping of successful coded envelopes,
and business failures for non-200 codes.
"""

import pytest

from travel_client.transport.envelope import (
    EnvelopeMode,
    Failure,
    Success,
    TransportMeta,
    envelope_mode,
    normalize,
)
from travel_client.transport.errors import ClassifiedFailure, FailureKind


class TestEnvelopeMode:
    """Tests for the coded vs raw decision."""

    def test_dict_with_code_is_coded(self):
        """A JSON object carrying its own code key is a coded envelope."""
        assert envelope_mode({"code": 200, "data": 1}) is EnvelopeMode.CODED
        assert envelope_mode({"code": None}) is EnvelopeMode.CODED

    def test_dict_without_code_is_raw(self):
        """Objects without code are already-unwrapped payloads."""
        assert envelope_mode({"tripId": 5, "days": []}) is EnvelopeMode.RAW

    @pytest.mark.parametrize("body", [None, "plain text", [1, 2], 42, True])
    def test_non_objects_are_raw(self, body):
        """Lists, scalars, text and empty bodies are never coded envelopes."""
        assert envelope_mode(body) is EnvelopeMode.RAW

    def test_code_inside_list_item_is_still_raw(self):
        """Only the top-level object decides the mode."""
        assert envelope_mode([{"code": 500}]) is EnvelopeMode.RAW


class TestNormalizeSuccess:
    """Tests for successful normalization."""

    @pytest.mark.parametrize(
        "data",
        [{"userId": 7}, [1, 2, 3], "ok", 0, None, {"code": 500}],
    )
    def test_code_200_unwraps_exactly_data(self, data):
        """code == 200 returns exactly the data field, whatever it holds."""
        result = normalize({"code": 200, "data": data, "message": "Success"})
        assert isinstance(result, Success)
        assert result.payload == data

    def test_code_200_without_data_unwraps_to_none(self):
        """A success envelope with no data yields None, not the envelope."""
        result = normalize({"code": 200, "message": "Success"})
        assert isinstance(result, Success)
        assert result.payload is None

    def test_raw_body_returned_unchanged(self):
        """Raw bodies pass through as the very same object."""
        body = {"tripId": 5, "days": [{"activities": []}]}
        result = normalize(body)
        assert isinstance(result, Success)
        assert result.payload is body


class TestNormalizeFailure:
    """Tests for business failures from coded envelopes."""

    def test_non_200_code_is_business_error(self):
        """code != 200 becomes a BusinessError carrying code and message."""
        result = normalize({"code": 400, "message": "Invalid email or password"})
        assert isinstance(result, Failure)
        assert result.error.kind is FailureKind.BUSINESS_ERROR
        assert result.error.business_code == 400
        assert result.error.message == "Invalid email or password"

    def test_missing_message_uses_default(self):
        """Without a message the default failure text is used."""
        result = normalize({"code": 1001, "data": None})
        assert isinstance(result, Failure)
        assert result.error.message == "Request failed"
        assert result.error.business_code == 1001

    def test_code_401_stays_business_error_here(self):
        """Reclassification of 401 belongs to the interceptor, not the normalizer."""
        result = normalize({"code": 401, "message": "Session invalid"})
        assert result.error.kind is FailureKind.BUSINESS_ERROR
        assert result.error.business_code == 401

    def test_meta_status_attached(self):
        """The HTTP status from transport meta is carried on the failure."""
        meta = TransportMeta(method="GET", path="/trips/1", http_status=200)
        result = normalize({"code": 500, "message": "boom"}, meta)
        assert result.error.http_status == 200


class TestClassifiedFailure:
    """Tests for the failure value itself."""

    def test_attributes_are_read_only(self):
        """A failure cannot be modified after creation."""
        failure = ClassifiedFailure(FailureKind.NOT_FOUND, http_status=404)
        with pytest.raises(AttributeError):
            failure.kind = FailureKind.UNKNOWN

    def test_with_kind_returns_new_failure(self):
        """Reclassifying produces a copy and leaves the original untouched."""
        original = ClassifiedFailure(FailureKind.BUSINESS_ERROR, "expired", business_code=401)
        copy = original.with_kind(FailureKind.UNAUTHORIZED)
        assert copy is not original
        assert original.kind is FailureKind.BUSINESS_ERROR
        assert copy.kind is FailureKind.UNAUTHORIZED
        assert copy.message == "expired"
        assert copy.business_code == 401

    def test_default_messages_per_kind(self):
        """Every kind has a default user-facing message."""
        for kind in FailureKind:
            assert ClassifiedFailure(kind).message
