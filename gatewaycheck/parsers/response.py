import json
from typing import Optional

from gatewaycheck.core.errors import DecodeError
from gatewaycheck.core.models import Decoded, JsonBody, TextBody


def is_json(content_type: Optional[str]) -> bool:
    ctype = (content_type or "").split(";", 1)[0].strip().lower()
    return ctype == "application/json" or ctype.endswith("+json")


def decode_body(content_type: Optional[str], raw: bytes, encoding: str = "utf-8") -> Optional[Decoded]:
    """
    Decode a response body according to its Content-Type.

    empty body                      -> None
    application/json (and */*+json) -> JsonBody
    anything else                   -> TextBody

    An unknown charset falls back to utf-8.
    """
    if not raw:
        return None
    try:
        text = raw.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        text = raw.decode("utf-8", errors="replace")
    if not is_json(content_type):
        return TextBody(text)
    try:
        return JsonBody(json.loads(text))
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON body ({content_type}): {e}") from e


def preview(decoded: Optional[Decoded], limit: int = 200) -> str:
    if decoded is None:
        return ""
    if isinstance(decoded, TextBody):
        return decoded.text[:limit]
    return json.dumps(decoded.value, ensure_ascii=False, separators=(",", ":"))[:limit]


def shape(decoded: Optional[Decoded]) -> Optional[str]:
    """'Array (n)' or 'Object' for JSON containers, None otherwise."""
    if not isinstance(decoded, JsonBody):
        return None
    if isinstance(decoded.value, list):
        return f"Array ({len(decoded.value)})"
    if isinstance(decoded.value, dict):
        return "Object"
    return None
