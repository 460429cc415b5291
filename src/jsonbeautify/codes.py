"""Argument error code constants for jsonbeautify.api.beautify().

These constants keep error codes out of free-form strings so callers can
branch on the failure without parsing messages.
"""

from enum import Enum


class ArgumentCode(str, Enum):
    """Invalid-argument error codes."""

    INVALID_WIDTH_LIMIT = "INVALID_WIDTH_LIMIT"
    INVALID_REPLACER = "INVALID_REPLACER"
