"""Sentinel values for classiest."""

from __future__ import annotations


class _Undefined:
    """Singleton standing in for an argument the caller did not pass."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "Undefined"


Undefined = _Undefined()
