import logging

import requests

from agri_sakha.translations import NO_VALID_RESPONSE, CONNECTION_ERROR, language_name

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def build_prompt(text, language):
    return f"Reply in {language_name(language)}: {text}"


def ask_backend(text, language, url, timeout=60):
    """Send one farmer question to the advice server.

    Returns a dict with ``status`` (``success``, ``invalid`` or ``error``)
    and ``response_text``, which is always a displayable string.
    """
    payload = {"userMessage": build_prompt(text, language)}
    logger.info(f"Sending query to {url} | Lang: {language} | {len(text)} chars")

    try:
        response = requests.post(url, json=payload, headers=JSON_HEADERS, timeout=timeout)
        if not response.ok:
            logger.warning(f"Backend returned HTTP {response.status_code}.")
        data = response.json()
    except requests.exceptions.RequestException as e:
        logger.error(f"Error talking to backend: {e}", exc_info=True)
        return {"status": "error", "response_text": CONNECTION_ERROR}
    except ValueError as e:
        logger.error(f"Backend response was not valid JSON: {e}", exc_info=True)
        return {"status": "error", "response_text": CONNECTION_ERROR}

    reply = data.get("reply") if isinstance(data, dict) else None
    if not reply:
        logger.warning(f"Backend response missing 'reply'. Body type: {type(data).__name__}")
        return {"status": "invalid", "response_text": NO_VALID_RESPONSE}

    logger.info(f"Received reply from backend ({len(str(reply))} chars).")
    return {"status": "success", "response_text": str(reply)}
