"""
Tests for API Pydantic schemas.

Validates that:
- Signals only accept the three interaction states
- Stash counters reject negatives
- Error responses serialize their codes
"""

import pytest
from pydantic import ValidationError


class TestPydanticSchemas:
    """Tests for Pydantic schema validation."""

    def test_tick_request_parses_signals(self):
        from everdell.api.schemas import TickRequest, InteractionSignal

        request = TickRequest(signals={"card_ui_1": "pressed", "card_ui_2": "none"})

        assert request.signals["card_ui_1"] == InteractionSignal.PRESSED
        assert request.signals["card_ui_2"] == InteractionSignal.NONE

    def test_tick_request_rejects_unknown_signal(self):
        from everdell.api.schemas import TickRequest

        with pytest.raises(ValidationError):
            TickRequest(signals={"card_ui_1": "clicked"})

    def test_stash_rejects_negative(self):
        from everdell.api.schemas import StashInfo

        with pytest.raises(ValidationError):
            StashInfo(berries=-1)

    def test_error_response_dump(self):
        from everdell.api.schemas import ErrorResponse, ErrorCode

        error = ErrorResponse(error="gone", error_code=ErrorCode.SESSION_NOT_FOUND)
        data = error.model_dump(mode="json")

        assert data["error_code"] == "SESSION_NOT_FOUND"
        assert data["details"] is None

    def test_tick_response_defaults(self):
        from everdell.api.schemas import TickResponse

        response = TickResponse(session_id="s1", tick=1)
        data = response.model_dump()

        assert data["hand"] == []
        assert data["events"] == []
        assert data["stash_text"] == ""
