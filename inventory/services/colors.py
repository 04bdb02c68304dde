"""
Colour encoding helpers.

Clothing item colours are stored as a JSON array in a text column.
Reads never fail: anything that does not decode to a list of strings
is treated as "no colours".
"""

import json
import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


def decode_colors(raw: Any, keep_blank: bool = False) -> List[str]:
    """
    Decode a stored colour value into a list of colour names.

    Accepts the JSON text stored on the model, an already-decoded list,
    or None. Malformed input yields an empty list; blank and non-string
    entries are dropped.

    With ``keep_blank`` the entries are kept in place for matching: null
    and blank entries become "", and any other non-string entry makes the
    whole value undecodable.
    """
    if raw is None or raw == "":
        return []

    if isinstance(raw, (list, tuple)):
        values = list(raw)
    elif isinstance(raw, str):
        try:
            values = json.loads(raw)
        except ValueError:
            logger.debug(f"Undecodable colour value: {raw[:50]!r}")
            return []
    else:
        return []

    if not isinstance(values, list):
        return []

    if keep_blank:
        if not all(value is None or isinstance(value, str) for value in values):
            return []
        return [value or "" for value in values]

    return [value for value in values if isinstance(value, str) and value.strip()]


def encode_colors(value: Any) -> Optional[str]:
    """
    Normalise user-supplied colours into the stored JSON text.

    - list: stored as JSON when non-empty
    - JSON text: kept as-is when it decodes to a non-empty list
    - other text: split on commas ("azul, branco")

    Returns None when there is nothing to store.
    """
    if not value:
        return None

    if isinstance(value, (list, tuple)):
        colors = [str(c).strip() for c in value if str(c).strip()]
        return json.dumps(colors, ensure_ascii=False) if colors else None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = json.loads(text)
        except ValueError:
            colors = [part.strip() for part in text.split(",") if part.strip()]
            return json.dumps(colors, ensure_ascii=False) if colors else None
        if isinstance(parsed, list) and parsed:
            return text
        return None

    return None
