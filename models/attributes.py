"""
Attribute bag helpers for menu items.

Attributes are filtered through a guard list and an optional fillable list,
then converted through a cast table before they are stored. Casts are
declared per class as a mapping of attribute name to cast type:

    casts = {"order": "int", "badge": "bool", "published": "date"}

A cast type is one of the names in ``CAST_TYPES`` or any callable that takes
the raw value and returns the converted one.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Mapping, Union

from pydantic import ConfigDict, TypeAdapter, ValidationError

from models.exceptions import CastError

# Fields owned by the item itself, never writable through the attribute bag.
ALWAYS_GUARDED = ("active", "children", "menu", "name", "route")

_STR_ADAPTER = TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True))
_CONTAINER_ADAPTER = TypeAdapter(Union[List[Any], Dict[str, Any]])
_EXPORT_ADAPTER = TypeAdapter(Any)


def _cast_json(value: Any) -> Any:
    if isinstance(value, (str, bytes, bytearray)):
        return _CONTAINER_ADAPTER.validate_json(value)
    return _CONTAINER_ADAPTER.validate_python(value)


CAST_TYPES: Dict[str, Callable[[Any], Any]] = {
    "int": TypeAdapter(int).validate_python,
    "integer": TypeAdapter(int).validate_python,
    "float": TypeAdapter(float).validate_python,
    "real": TypeAdapter(float).validate_python,
    "double": TypeAdapter(float).validate_python,
    "decimal": TypeAdapter(Decimal).validate_python,
    "str": _STR_ADAPTER.validate_python,
    "string": _STR_ADAPTER.validate_python,
    "bool": TypeAdapter(bool).validate_python,
    "boolean": TypeAdapter(bool).validate_python,
    "array": _cast_json,
    "json": _cast_json,
    "object": _cast_json,
    "date": TypeAdapter(date).validate_python,
    "datetime": TypeAdapter(datetime).validate_python,
}


def cast_attribute(key: str, value: Any, casts: Mapping[str, Any]) -> Any:
    """
    Convert a value through the cast registered for its key.

    Args:
        key: Attribute name
        value: Raw value to store
        casts: Cast table of the item class

    Returns:
        The converted value, or the value unchanged when no cast is registered

    Raises:
        CastError: If the cast type is unknown or the value cannot be converted
    """
    cast_type = casts.get(key)
    if cast_type is None or value is None:
        return value

    if callable(cast_type):
        caster = cast_type
    else:
        caster = CAST_TYPES.get(str(cast_type).lower())
        if caster is None:
            raise CastError(key, cast_type, value, reason="unknown cast type")

    try:
        return caster(value)
    except ValidationError as e:
        raise CastError(key, cast_type, value, reason=e.errors()[0]["msg"]) from e
    except (ValueError, TypeError) as e:
        raise CastError(key, cast_type, value, reason=str(e)) from e


def serialize_attribute(value: Any) -> Any:
    """Dump a stored value into its JSON-compatible form."""
    return _EXPORT_ADAPTER.dump_python(value, mode="json")


def is_fillable(key: str, guarded: Iterable[str], fillable: Iterable[str]) -> bool:
    """Whether a key may be written through bulk fill."""
    if key in ALWAYS_GUARDED:
        return False

    fillable = tuple(fillable)
    if key in fillable:
        return True

    guarded = tuple(guarded)
    if "*" in guarded or key in guarded:
        return False

    return not fillable and "." not in key and not key.startswith("_")


def fill_attributes(
    existing: Mapping[str, Any],
    guarded: Iterable[str],
    fillable: Iterable[str],
    casts: Mapping[str, Any],
    incoming: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Merge incoming values into a copy of an attribute bag.

    Keys that are not fillable are skipped without error. The existing
    mapping is never modified, so a failing cast leaves it untouched.
    """
    guarded = tuple(guarded)
    fillable = tuple(fillable)
    attributes = dict(existing)

    for key, value in incoming.items():
        if is_fillable(key, guarded, fillable):
            attributes[key] = cast_attribute(key, value, casts)

    return attributes
