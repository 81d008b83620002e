"""Query string filters for collection endpoints."""

from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

# Characters left as-is in keys and values (BigCommerce uses "id:in=1,2,3")
SAFE_CHARS = ":,[]"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set)):
        return ",".join(_format_value(v) for v in value)
    return str(value)


class Filter:
    """An ordered set of key/value constraints rendered as a query string."""

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None):
        self.parameters = dict(parameters or {})

    @classmethod
    def create(cls, value: Union["Filter", Mapping[str, Any], None] = None) -> "Filter":
        """Return ``value`` if it is already a Filter, else wrap it."""
        if isinstance(value, Filter):
            return value
        return cls(value)

    def __setitem__(self, key: str, value: Any) -> None:
        self.parameters[key] = value

    def __getitem__(self, key: str) -> Any:
        return self.parameters[key]

    def __bool__(self) -> bool:
        return bool(self.parameters)

    def __repr__(self) -> str:
        return f"Filter({self.parameters!r})"

    def to_query(self) -> str:
        """Render as ``?key=value&...``, or an empty string when there are no constraints."""
        pairs = [
            f"{quote(str(key), safe=SAFE_CHARS)}={quote(_format_value(value), safe=SAFE_CHARS)}"
            for key, value in self.parameters.items()
            if value is not None
        ]
        if not pairs:
            return ""
        return "?" + "&".join(pairs)
