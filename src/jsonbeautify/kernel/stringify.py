"""Recursive value-to-JSON-text conversion.

The Stringifier renders ``holder[key]`` rather than a bare value so the
custom-serialization hook and the replacer function see the same
``(key, value)`` pair at every position, including the synthetic root.

Value kinds:
- TEXT, NUMBER, BOOLEAN, NULL render directly
- ARRAY renders every slot; absent members become ``null``
- OBJECT renders members in insertion order (or allow-list order);
  absent members are omitted
- UNREPRESENTABLE renders as absent (``None``)

No cycle detection: cyclic input ends in RecursionError.
"""

import datetime
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel

from jsonbeautify.kernel.escape import quote
from jsonbeautify.kernel.layout import join_members
from jsonbeautify.kernel.values import UNDEFINED, SupportsToJSON

ReplacerFunction = Callable[[str, Any], Any]
Replacer = Union[ReplacerFunction, Sequence[str], None]


class ValueKind(str, Enum):
    """Render-relevant kind of a resolved value."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"
    UNREPRESENTABLE = "unrepresentable"


def classify(value: Any) -> ValueKind:
    """Get the kind of a value after hook and replacer resolution."""
    if value is None:
        return ValueKind.NULL
    elif isinstance(value, bool):
        return ValueKind.BOOLEAN
    elif isinstance(value, (int, float)):
        return ValueKind.NUMBER
    elif isinstance(value, str):
        return ValueKind.TEXT
    elif isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    elif isinstance(value, Mapping):
        return ValueKind.OBJECT
    else:
        return ValueKind.UNREPRESENTABLE


def format_number(value: Union[int, float]) -> str:
    """Format a number as JSON; non-finite floats become null."""
    if isinstance(value, int):
        return int.__repr__(value)
    if not math.isfinite(value):
        return "null"
    return float.__repr__(value)


def key_text(key: Any) -> Optional[str]:
    """Coerce a mapping key to a member name, or None if it has no JSON form.

    Follows the standard library encoder: str as-is, int/float as numbers,
    bool and None as their JSON literals.
    """
    if isinstance(key, str):
        return key
    elif key is None:
        return "null"
    elif isinstance(key, bool):
        return "true" if key else "false"
    elif isinstance(key, int):
        return int.__repr__(key)
    elif isinstance(key, float):
        if math.isnan(key):
            return "NaN"
        if math.isinf(key):
            return "Infinity" if key > 0 else "-Infinity"
        return float.__repr__(key)
    return None


def _lookup(holder: Any, key: Union[str, int]) -> Any:
    # Mapping.get avoids __missing__ side effects (e.g. defaultdict inserts)
    if isinstance(holder, Mapping):
        return holder.get(key, UNDEFINED)
    try:
        return holder[key]
    except IndexError:
        return UNDEFINED


def _apply_hook(value: Any, key: str) -> Any:
    """Replace a value by its JSON representation if it provides one."""
    if value is None or value is UNDEFINED:
        return value
    if isinstance(value, SupportsToJSON) and not isinstance(value, type):
        return value.to_json(key)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (datetime.date, datetime.time)):
        # datetime.datetime is a date subclass
        return value.isoformat()
    return value


def _member_names(value: Mapping, replacer: Replacer) -> Dict[str, Any]:
    """Map member names to the mapping keys to render, in output order."""
    names: Dict[str, Any] = {}
    for key in value:
        name = key_text(key)
        if name is not None and name not in names:
            names[name] = key

    if replacer is None or callable(replacer):
        return names

    # Allow-list: only string entries count, first occurrence wins.
    # Names absent from the mapping read as UNDEFINED and are dropped.
    selected: Dict[str, Any] = {}
    for name in replacer:
        if isinstance(name, str) and name not in selected:
            selected[name] = names.get(name, name)
    return selected


def stringify(
    key: Union[str, int],
    holder: Any,
    limit: float,
    indent: str = "",
    gap: str = "",
    replacer: Replacer = None,
) -> Optional[str]:
    """Render ``holder[key]`` as JSON text.

    Args:
        key: Member name or array index of the value inside ``holder``
        holder: The containing array, mapping, or synthetic root mapping
        limit: Maximum single-line container width (see layout.join_members)
        indent: One indentation unit; "" renders fully compact
        gap: Indentation prefix of the current nesting level
        replacer: Replacer function, member-name allow-list, or None

    Returns:
        JSON text, or None when the value has no JSON representation
    """
    name = key if isinstance(key, str) else str(key)
    value = _apply_hook(_lookup(holder, key), name)

    if callable(replacer):
        value = replacer(name, value)

    kind = classify(value)

    if kind is ValueKind.TEXT:
        return quote(value)
    elif kind is ValueKind.NUMBER:
        return format_number(value)
    elif kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    elif kind is ValueKind.NULL:
        return "null"
    elif kind is ValueKind.ARRAY:
        inner = gap + indent
        items: List[str] = []
        for index in range(len(value)):
            text = stringify(index, value, limit, indent, inner, replacer)
            items.append("null" if text is None else text)
        return join_members(items, "[", "]", gap, indent, limit)
    elif kind is ValueKind.OBJECT:
        inner = gap + indent
        separator = ": " if indent else ":"
        members: List[str] = []
        for member, source_key in _member_names(value, replacer).items():
            text = _render_member(source_key, member, value, limit, indent, inner, replacer)
            if text is not None:
                members.append(quote(member) + separator + text)
        return join_members(members, "{", "}", gap, indent, limit)
    else:
        return None


def _render_member(
    source_key: Any,
    member: str,
    holder: Mapping,
    limit: float,
    indent: str,
    gap: str,
    replacer: Replacer,
) -> Optional[str]:
    """Render one object member, handing hooks the member name as the key."""
    if isinstance(source_key, str):
        return stringify(source_key, holder, limit, indent, gap, replacer)
    # Non-string mapping key: read through a one-member view keyed by name.
    return stringify(member, {member: holder[source_key]}, limit, indent, gap, replacer)
