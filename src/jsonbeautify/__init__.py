"""jsonbeautify: JSON serialization with width-aware line layout."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("jsonbeautify")
except PackageNotFoundError:
    __version__ = "dev"

from jsonbeautify.api import (
    beautify,
    dump,
    resolve_options,
    BeautifyOptions,
    InvalidArgumentError,
)
from jsonbeautify.codes import ArgumentCode
from jsonbeautify.kernel.values import UNDEFINED, SupportsToJSON

__all__ = [
    "__version__",
    "beautify",
    "dump",
    "resolve_options",
    "BeautifyOptions",
    "InvalidArgumentError",
    "ArgumentCode",
    "UNDEFINED",
    "SupportsToJSON",
]
