"""
Object utilities for identifiers and JSON serialization.

Provides helpers for generating record identifiers and serializing
dataclasses, enums and decimals to JSON.
"""

import json
import uuid
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


def new_id(prefix: str) -> str:
    """
    Return a new unique identifier such as ``inv-3f2a9c1d4b5e``.

    Args:
        prefix: Record kind prefix (``inv``, ``client``, ``item``).
    """
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to JSON string.

    Handles dataclasses by converting them to dictionaries first.
    Falls back to str() for non-serializable objects.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent, sort_keys=True)


def _default_serializer(obj: Any) -> Any:
    """Return a JSON-serializable representation for common non-JSON types."""
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return str(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
