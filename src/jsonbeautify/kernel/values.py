"""Value-level building blocks: the UNDEFINED sentinel and the to_json capability."""

from typing import Any, Protocol, runtime_checkable


class _Undefined:
    """Marker for "no value": omitted from objects, ``null`` in arrays."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


@runtime_checkable
class SupportsToJSON(Protocol):
    """Objects that provide their own JSON representation.

    ``to_json`` receives the member name (or array index as text, or ""
    for the root) and returns the value to render in place of the object.
    """

    def to_json(self, key: str) -> Any:
        ...
