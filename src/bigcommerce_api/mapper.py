"""Map decoded JSON onto resource models."""

import logging
from typing import Any, Union

from .exceptions import MappingError
from .resources import RESOURCE_TYPES, Resource, ResourceKind

logger = logging.getLogger(__name__)

KindInput = Union[ResourceKind, str, type[Resource]]


def resolve(kind: KindInput) -> type[Resource]:
    """Look up the resource class registered for ``kind``.

    Accepts a ResourceKind, its string value, or a Resource subclass.
    Unknown kinds raise MappingError rather than falling back to Resource.
    """
    if isinstance(kind, type) and issubclass(kind, Resource):
        return kind
    try:
        return RESOURCE_TYPES[ResourceKind(kind)]
    except (KeyError, ValueError):
        raise MappingError(f"Unknown resource kind: {kind!r}") from None


def map_resource(kind: KindInput, obj: Any) -> Resource:
    """Wrap a single decoded object, unwrapping a ``data`` envelope first."""
    if obj is None:
        return Resource()
    cls = resolve(kind)
    if isinstance(obj, dict) and isinstance(obj.get("data"), dict):
        obj = obj["data"]
    if not isinstance(obj, dict):
        raise MappingError(f"Expected a single object for {cls.__name__}, got {type(obj).__name__}")
    return cls(**obj)


def map_collection(kind: KindInput, objects: Any) -> list[Resource]:
    """Wrap every element of a decoded array in the same resource class."""
    if not isinstance(objects, list):
        raise MappingError(f"Expected an array for {kind}, got {type(objects).__name__}")
    cls = resolve(kind)
    logger.debug(f"Mapping {len(objects)} items to {cls.__name__}")
    return [cls(**item) for item in _objects(objects, kind)]


def _objects(objects: list, kind: KindInput) -> list[dict]:
    for item in objects:
        if not isinstance(item, dict):
            raise MappingError(f"Collection item for {kind} is not an object: {item!r}")
    return objects


def map_count(obj: Any) -> int:
    """Read the ``count`` field of a count response."""
    if isinstance(obj, dict) and isinstance(obj.get("data"), dict):
        obj = obj["data"]
    if not isinstance(obj, dict) or "count" not in obj:
        raise MappingError(f"Response has no count field: {obj!r}")
    try:
        return int(obj["count"])
    except (TypeError, ValueError):
        raise MappingError(f"Count is not an integer: {obj['count']!r}") from None
