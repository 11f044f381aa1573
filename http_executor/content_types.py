"""
Decide whether a response body is structured text and parse it.
"""

import json
from typing import Any, Mapping, Optional

import structlog
import yaml

logger = structlog.get_logger(__name__)

JSON_SUFFIXES = ('+json', '/json')
STRUCTURED_SUFFIXES = JSON_SUFFIXES + ('+yml', '+yaml', '/yml', '/yaml')


def get_content_type(headers: Optional[Mapping[str, str]]) -> str:
    """Look up the content type under both header spellings."""
    if not headers:
        return ''
    return headers.get('content-type') or headers.get('Content-Type') or ''


def is_structured_content_type(content_type: Optional[str]) -> bool:
    """Check whether a content type names JSON or YAML (including +json/+yaml suffixes)."""
    if not content_type:
        return False

    media_type = content_type.split(';', 1)[0].strip().lower()
    return media_type.endswith(STRUCTURED_SUFFIXES)


def is_json_content_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False

    media_type = content_type.split(';', 1)[0].strip().lower()
    return media_type.endswith(JSON_SUFFIXES)


def _load(text: str, content_type: str) -> Any:
    """JSON media types go through json first; YAML covers the rest and the JSON fallback."""
    if is_json_content_type(content_type):
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            pass
    return yaml.safe_load(text)


def parse_structured_text(text: str, content_type: str = '') -> Any:
    """Parse JSON/YAML text into a native value.

    Returns None when the text fails to parse or yields a bare string,
    which is not a useful structured object.
    """
    try:
        parsed = _load(text, content_type)
    except Exception as e:
        logger.warning("cannot parse JSON/YAML content", content_type=content_type, error=f"{type(e).__name__}: {e}")
        return None

    if isinstance(parsed, str):
        return None
    return parsed


def parse_response_body(headers: Optional[Mapping[str, str]], text: Optional[str], body: Any = None) -> Any:
    """Best-effort parsed body for a response.

    A non-empty body the client already parsed wins. Otherwise the raw text is
    parsed only when the content type is JSON or YAML.
    """
    if isinstance(body, (dict, list)) and len(body) > 0:
        return body

    content_type = get_content_type(headers)
    if not text or not is_structured_content_type(content_type):
        return None

    return parse_structured_text(text, content_type)
