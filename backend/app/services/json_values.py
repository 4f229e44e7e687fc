"""
Total accessors for untyped JSON payloads.

Every getter returns None when the key is missing or holds a value of the
wrong type, so callers can apply their own default without try/except.
"""

from typing import Any, Optional, Union

Number = Union[int, float]


def _lookup(payload: Any, key: str) -> Any:
    if not isinstance(payload, dict):
        return None
    return payload.get(key)


def get_dict(payload: Any, key: str) -> Optional[dict]:
    """Return payload[key] if it is a mapping, else None."""
    value = _lookup(payload, key)
    return value if isinstance(value, dict) else None


def get_string(payload: Any, key: str) -> Optional[str]:
    """Return payload[key] if it is a string, else None."""
    value = _lookup(payload, key)
    return value if isinstance(value, str) else None


def get_number(payload: Any, key: str) -> Optional[Number]:
    """
    Return payload[key] if it is an int or float, else None.

    JSON booleans decode to bool, which is an int subclass in Python; they
    are not treated as numbers here.
    """
    value = _lookup(payload, key)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    return None
