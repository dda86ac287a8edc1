from unittest.mock import MagicMock, patch

import requests

from agri_sakha.backend import ask_backend, build_prompt
from agri_sakha.translations import CONNECTION_ERROR, NO_VALID_RESPONSE

API_URL = "https://advice.example.test"


def _response(body=None, ok=True, status_code=200, json_error=None):
    response = MagicMock(ok=ok, status_code=status_code)
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


def test_build_prompt_uses_native_language_name():
    assert build_prompt("Best time to sow wheat?", "en") == "Reply in English: Best time to sow wheat?"
    assert build_prompt("Best time to sow wheat?", "hi") == "Reply in हिन्दी: Best time to sow wheat?"
    assert build_prompt("Best time to sow wheat?", "gu") == "Reply in ગુજરાતી: Best time to sow wheat?"


def test_build_prompt_unknown_language_uses_english():
    assert build_prompt("hi", "fr") == "Reply in English: hi"


@patch("agri_sakha.backend.requests.post")
def test_ask_backend_returns_reply(mock_post):
    mock_post.return_value = _response({"reply": "Sow in November."})

    result = ask_backend("When to sow wheat?", "en", API_URL, timeout=5)

    assert result == {"status": "success", "response_text": "Sow in November."}
    mock_post.assert_called_once_with(
        API_URL,
        json={"userMessage": "Reply in English: When to sow wheat?"},
        headers={"Content-Type": "application/json"},
        timeout=5,
    )


@patch("agri_sakha.backend.requests.post")
def test_ask_backend_missing_reply(mock_post):
    mock_post.return_value = _response({"message": "nope"})
    result = ask_backend("q", "en", API_URL)
    assert result == {"status": "invalid", "response_text": NO_VALID_RESPONSE}


@patch("agri_sakha.backend.requests.post")
def test_ask_backend_empty_reply(mock_post):
    mock_post.return_value = _response({"reply": ""})
    assert ask_backend("q", "en", API_URL)["response_text"] == NO_VALID_RESPONSE


@patch("agri_sakha.backend.requests.post")
def test_ask_backend_non_object_body(mock_post):
    mock_post.return_value = _response(["reply"])
    assert ask_backend("q", "en", API_URL)["status"] == "invalid"


@patch("agri_sakha.backend.requests.post")
def test_ask_backend_http_error_with_json_body(mock_post):
    mock_post.return_value = _response({"error": "overloaded"}, ok=False, status_code=503)
    assert ask_backend("q", "hi", API_URL)["response_text"] == NO_VALID_RESPONSE


@patch("agri_sakha.backend.requests.post")
def test_ask_backend_connection_error(mock_post):
    mock_post.side_effect = requests.exceptions.ConnectionError("refused")
    result = ask_backend("q", "gu", API_URL)
    assert result == {"status": "error", "response_text": CONNECTION_ERROR}


@patch("agri_sakha.backend.requests.post")
def test_ask_backend_body_not_json(mock_post):
    mock_post.return_value = _response(json_error=ValueError("Expecting value"), ok=False, status_code=502)
    assert ask_backend("q", "en", API_URL) == {"status": "error", "response_text": CONNECTION_ERROR}
