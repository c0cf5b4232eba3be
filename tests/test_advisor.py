"""
Tests for the advisory client: prompt content, success path, fallbacks.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import requests

from advisor import FALLBACK_MESSAGE, AdvisorClient, build_prompt
from conftest import make_member
from reports import summarize


def _summary():
    return summarize([make_member("a", location_code="ROS", fee_amount=18000.0)])


def _client(**kwargs) -> AdvisorClient:
    defaults = {
        "api_key": "test-key",
        "base_url": "https://advisor.test/v1/chat/completions",
        "model": "test-model",
        "timeout": 5,
        "max_retries": 2,
    }
    defaults.update(kwargs)
    return AdvisorClient(**defaults)


def test_build_prompt_includes_stats() -> None:
    prompt = build_prompt(_summary())
    assert "Members: 1" in prompt
    assert "$18,000" in prompt
    assert '"name": "ROS"' in prompt
    assert '"name": "BUE"' in prompt


@patch("advisor.requests.post")
def test_get_insight_returns_content(mock_post: MagicMock) -> None:
    mock_post.return_value = MagicMock(
        status_code=200,
        json=lambda: {"choices": [{"message": {"content": "  Open a fifth location.  "}}]},
    )
    client = _client()
    assert client.get_insight(_summary()) == "Open a fifth location."

    _, kwargs = mock_post.call_args
    assert kwargs["headers"]["Authorization"] == "Bearer test-key"
    assert kwargs["json"]["model"] == "test-model"
    assert kwargs["timeout"] == 5


@patch("advisor.time.sleep")
@patch("advisor.requests.post")
def test_network_failure_returns_fallback(mock_post: MagicMock, mock_sleep: MagicMock) -> None:
    mock_post.side_effect = requests.ConnectionError("down")
    assert _client().get_insight(_summary()) == FALLBACK_MESSAGE
    assert mock_post.call_count == 2
    assert mock_sleep.call_count == 1


@patch("advisor.time.sleep")
@patch("advisor.requests.post")
def test_retry_then_success(mock_post: MagicMock, mock_sleep: MagicMock) -> None:
    ok = MagicMock(json=lambda: {"choices": [{"message": {"content": "Raise prices."}}]})
    mock_post.side_effect = [requests.Timeout("slow"), ok]
    assert _client().get_insight(_summary()) == "Raise prices."


@patch("advisor.requests.post")
def test_http_error_returns_fallback(mock_post: MagicMock) -> None:
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("500")
    mock_post.return_value = response
    assert _client(max_retries=1).get_insight(_summary()) == FALLBACK_MESSAGE


@patch("advisor.requests.post")
def test_unexpected_payload_returns_fallback(mock_post: MagicMock) -> None:
    mock_post.return_value = MagicMock(json=lambda: {"error": "nope"})
    assert _client().get_insight(_summary()) == FALLBACK_MESSAGE
    assert mock_post.call_count == 1


@patch("advisor.requests.post")
def test_missing_api_key_skips_request(mock_post: MagicMock) -> None:
    assert _client(api_key="").get_insight(_summary()) == FALLBACK_MESSAGE
    mock_post.assert_not_called()
