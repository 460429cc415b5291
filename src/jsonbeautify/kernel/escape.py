"""String escaping for JSON text output.

Every string leaf and every object member name passes through quote().
Besides the characters JSON requires to be escaped, a set of invisible
format and bidi control code points is escaped so the output survives
transports and editors that mangle them.
"""

import re

# Lone surrogates cannot be encoded as UTF-8, so they are escaped as well.
_ESCAPABLE = re.compile(
    r'[\\"\x00-\x1f\x7f-\x9f\xad\u0600-\u0604\u070f\u17b4\u17b5'
    r'\u200c-\u200f\u2028-\u202f\u2060-\u206f\ufeff\ufff0-\uffff'
    r'\ud800-\udfff]'
)

_SHORT_ESCAPES = {
    '\b': '\\b',
    '\t': '\\t',
    '\n': '\\n',
    '\f': '\\f',
    '\r': '\\r',
    '"': '\\"',
    '\\': '\\\\',
}


def _escape_char(match: "re.Match[str]") -> str:
    char = match.group(0)
    short = _SHORT_ESCAPES.get(char)
    if short is not None:
        return short
    return f'\\u{ord(char):04x}'


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted JSON string literal.

    Args:
        text: Any Python string

    Returns:
        JSON string literal including the surrounding quotes
    """
    if _ESCAPABLE.search(text) is None:
        return '"' + text + '"'
    return '"' + _ESCAPABLE.sub(_escape_char, text) + '"'
