"""Line-width layout decision shared by arrays and objects."""

from typing import List

# Two brackets plus one padding space on each side of the joined members.
BRACKET_PADDING = 4


def overflows(gap: str, joined: str, limit: float) -> bool:
    """Check whether a single-line container rendering exceeds the width limit.

    Args:
        gap: Indentation of the line the container starts on (parent gap)
        joined: Members joined with ", "
        limit: Maximum width; 0 always overflows
    """
    return len(gap) + len(joined) + BRACKET_PADDING > limit


def join_members(
    members: List[str],
    opener: str,
    closer: str,
    gap: str,
    indent: str,
    limit: float,
) -> str:
    """Wrap rendered members in brackets using the layout rule.

    - No members: ``[]`` / ``{}`` regardless of options
    - No indent unit: fully compact, ``[a,b]``
    - Fits the width limit: single line, ``[ a, b ]``
    - Otherwise one member per line at ``gap + indent``, closer at ``gap``

    Args:
        members: Already-rendered member texts
        opener: "[" or "{"
        closer: "]" or "}"
        gap: Parent-level indentation prefix
        indent: One indentation unit ("" for compact output)
        limit: Maximum single-line width

    Returns:
        Bracketed container text
    """
    if not members:
        return opener + closer
    if not indent:
        return opener + ",".join(members) + closer

    joined = ", ".join(members)
    if not overflows(gap, joined, limit):
        return f"{opener} {joined} {closer}"

    inner = gap + indent
    return f"{opener}\n{inner}" + f",\n{inner}".join(members) + f"\n{gap}{closer}"
