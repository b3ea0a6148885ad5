from __future__ import annotations
import re
import sys

# Text the reader could never return as a single symbol token
_UNREADABLE = re.compile(r"[\s()]")


class Symbol:
    """An interned symbol name. Used both as a syntax atom and as an Environment key."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        if not name or _UNREADABLE.search(name):
            raise ValueError(f"Invalid symbol name {name!r}")
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
