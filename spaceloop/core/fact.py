"""
Fact (FINAL / FROZEN)

Smallest unit of data exchanged between execution units.

Invariants:
- Facts are immutable once created.
- The engine never interprets `value`; only the chunks that agree
  on a fact name do.
- An unset / empty truth flag means True.
- Names are stored verbatim; comparisons trim whitespace and
  ignore case.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Union

from spaceloop.utils.errors import InvalidTrivalentError


class Trivalent(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNDECIDED = "Undecided"

    @classmethod
    def coerce(cls, raw: Union["Trivalent", str, bool, None]) -> "Trivalent":
        """
        None / "" -> TRUE
        bool      -> TRUE / FALSE
        str       -> case-insensitive, surrounding whitespace ignored
        """
        if isinstance(raw, Trivalent):
            return raw
        if raw is None:
            return cls.TRUE
        if isinstance(raw, bool):
            return cls.TRUE if raw else cls.FALSE
        if isinstance(raw, str):
            text = raw.strip()
            if not text:
                return cls.TRUE
            for member in cls:
                if member.value.lower() == text.lower():
                    return member
        raise InvalidTrivalentError(f"invalid trivalent: {raw!r}")


def normalize_name(name: str) -> str:
    return name.strip().casefold()


@dataclass(frozen=True)
class Fact:
    name: str
    value: Any = None
    trivalent: Trivalent = Trivalent.TRUE

    def __post_init__(self):
        # frozen: bypass __setattr__ to store the coerced flag
        object.__setattr__(self, "trivalent", Trivalent.coerce(self.trivalent))

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    def matches(self, name: str) -> bool:
        return self.key == normalize_name(name)


# -------------------------
# lookup helpers
# -------------------------
def facts_named(facts: Iterable[Fact], name: str) -> list[Fact]:
    target = normalize_name(name)
    return [f for f in facts if f.key == target]


def find_first(facts: Iterable[Fact], name: str) -> Optional[Fact]:
    target = normalize_name(name)
    for f in facts:
        if f.key == target:
            return f
    return None


def find_last(facts: Iterable[Fact], name: str) -> Optional[Fact]:
    """Pool is append-only, so the last match is the most recent value."""
    found = None
    target = normalize_name(name)
    for f in facts:
        if f.key == target:
            found = f
    return found
