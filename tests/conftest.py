"""Shared fixtures for the Vapi calendar webhook tests"""
from dataclasses import replace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.auth import get_settings
from app.api.server import app, get_calendar_factory
from app.config import Settings
from app.services.calendar_service import CalendarClient


@pytest.fixture
def base_settings():
    """Settings with auth disabled"""
    return Settings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        refresh_token="test-refresh-token",
        calendar_id="clinic@example.com",
        shared_secret="",
        port=3000,
        log_level="INFO",
    )


@pytest.fixture
def secured_settings(base_settings):
    """Settings with a shared secret configured"""
    return replace(base_settings, shared_secret="s3cret")


@pytest.fixture
def mock_calendar():
    """CalendarClient double; patch returns a Google-like event resource"""
    calendar = MagicMock(spec=CalendarClient)
    calendar.delete_event.return_value = None
    calendar.patch_event.return_value = {
        "id": "evt123",
        "htmlLink": "https://www.google.com/calendar/event?eid=ZXZ0MTIz",
    }
    return calendar


@pytest.fixture
def client_factory(mock_calendar):
    """Calendar factory double that records every client it hands out"""
    factory = MagicMock(return_value=mock_calendar)
    return factory


@pytest.fixture
def make_client(client_factory):
    """Build a TestClient for the given settings with the calendar mocked out"""

    def _make(settings):
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_calendar_factory] = lambda: client_factory
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def api(make_client, base_settings):
    """TestClient with auth disabled"""
    return make_client(base_settings)


@pytest.fixture
def secured_api(make_client, secured_settings):
    """TestClient with x-vapi-secret required"""
    return make_client(secured_settings)


def tool_call(call_id, name, arguments=None):
    """Build one Vapi toolCallList entry"""
    return {
        "id": call_id,
        "type": "function",
        "function": {"name": name, "arguments": arguments if arguments is not None else {}},
    }


def tool_calls_body(*calls):
    """Wrap tool calls in a Vapi tool-calls webhook body"""
    return {"message": {"type": "tool-calls", "toolCallList": list(calls)}}


@pytest.fixture
def build_tool_call():
    return tool_call


@pytest.fixture
def build_body():
    return tool_calls_body
