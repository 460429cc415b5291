"""Public API for jsonbeautify.

beautify() validates the caller's options, resolves them into a
BeautifyOptions model, and hands the value to the kernel Stringifier
under a synthetic root mapping ``{"": value}``.
"""

import logging
import math
import numbers
from decimal import Decimal
from typing import Any, Callable, Optional, TextIO, Tuple, Union

from pydantic import BaseModel, ConfigDict

from jsonbeautify.codes import ArgumentCode
from jsonbeautify.kernel.stringify import Replacer, stringify

logger = logging.getLogger(__name__)

IndentSpec = Union[int, str, None]


class InvalidArgumentError(ValueError):
    """Raised before rendering starts when beautify() gets a malformed option."""

    def __init__(self, code: ArgumentCode, message: str):
        super().__init__(message)
        self.code = code


class BeautifyOptions(BaseModel):
    """Resolved rendering options for one beautify() call."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    indent: str = ""  # one indentation unit; "" renders fully compact
    width_limit: float = 0  # single-line container width budget
    replacer: Optional[Union[Callable[[str, Any], Any], Tuple[Any, ...]]] = None


def _resolve_indent(indent: Any) -> str:
    """Turn an indent spec into one indentation unit.

    int -> that many spaces, str -> used literally, anything else -> "".
    """
    if isinstance(indent, bool):
        return ""
    if isinstance(indent, int):
        return " " * indent
    if isinstance(indent, str):
        return indent
    return ""


def _resolve_width(width_limit: Any) -> float:
    """Convert any real number to float; ints too large for a float saturate."""
    try:
        return float(width_limit)
    except OverflowError:
        return math.inf if width_limit > 0 else -math.inf


def resolve_options(
    replacer: Any = None,
    indent: Any = None,
    width_limit: Any = 0,
) -> BeautifyOptions:
    """Validate beautify() arguments and build BeautifyOptions.

    Raises:
        InvalidArgumentError: If width_limit is not a number, or replacer is
            neither None, a callable, nor a list/tuple of member names
    """
    if isinstance(width_limit, bool) or not isinstance(width_limit, (numbers.Real, Decimal)):
        raise InvalidArgumentError(
            ArgumentCode.INVALID_WIDTH_LIMIT,
            f"width_limit must be a number, got {type(width_limit).__name__}",
        )

    if replacer is not None and not callable(replacer) and not isinstance(replacer, (list, tuple)):
        raise InvalidArgumentError(
            ArgumentCode.INVALID_REPLACER,
            f"replacer must be a function or a list of member names, got {type(replacer).__name__}",
        )

    return BeautifyOptions(
        indent=_resolve_indent(indent),
        width_limit=_resolve_width(width_limit),
        replacer=tuple(replacer) if isinstance(replacer, list) else replacer,
    )


def render(value: Any, options: BeautifyOptions) -> str:
    """Render a value with already-resolved options."""
    text = stringify(
        "",
        {"": value},
        options.width_limit,
        options.indent,
        "",
        options.replacer,
    )
    return "" if text is None else text


def beautify(
    value: Any,
    replacer: Replacer = None,
    indent: IndentSpec = None,
    width_limit: float = 0,
) -> str:
    """Serialize a value to JSON text with width-aware layout.

    Containers whose single-line form fits ``width_limit`` stay on one
    line (``[ 1, 2 ]``); longer ones are expanded one member per line.

    Args:
        value: Any value; unrepresentable members are dropped from objects
            and rendered as null inside arrays
        replacer: Function ``(key, value) -> value`` applied at every node
            including the root, or an ordered list of member names that
            selects and orders object members
        indent: Number of spaces or a literal string per nesting level;
            anything else renders fully compact
        width_limit: Maximum single-line container width; 0 always expands
            when indenting

    Returns:
        JSON text, or "" if the root value itself is unrepresentable

    Raises:
        InvalidArgumentError: On a non-numeric width_limit or malformed replacer
    """
    options = resolve_options(replacer, indent, width_limit)
    logger.debug(
        "beautify: indent=%r width_limit=%r replacer=%s",
        options.indent,
        options.width_limit,
        type(options.replacer).__name__,
    )
    return render(value, options)


def dump(
    value: Any,
    fp: TextIO,
    replacer: Replacer = None,
    indent: IndentSpec = None,
    width_limit: float = 0,
) -> None:
    """Write beautify() output to a text stream."""
    fp.write(beautify(value, replacer, indent, width_limit))
