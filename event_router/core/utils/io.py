from json import JSONDecodeError, loads
from typing import Any


def safe_json_parse(value: Any) -> Any:
    """Decode given JSON text, or return it unchanged if it isn't valid JSON."""
    try:
        return loads(value)
    except (JSONDecodeError, TypeError):
        return value
