"""
Core matcher protocol shared by signature type slots and synthesized shapes.

A matcher answers two questions about a candidate value:

- ``check(value)``: which structured issues (one per divergent path) keep the
  value from matching. An empty list means the value matches.
- ``parse(value)``: how strongly a value is accepted when used as a call
  operand (strict, loose or rejected), plus the narrowed operand value.
"""

import reprlib
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

Path = Tuple[Any, ...]

_repr = reprlib.Repr()
_repr.maxstring = 60
_repr.maxother = 60
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8
_repr.maxset = 8


def format_value(value: Any) -> str:
    """Short, bounded repr used in failure messages."""
    return _repr.repr(value)


def format_path(path: Path) -> str:
    """Render a path like ``a.b[0]['odd key']``; the empty path is ``<root>``."""
    if not path:
        return "<root>"
    rendered = []
    for key in path:
        if isinstance(key, int) and not isinstance(key, bool):
            rendered.append(f"[{key}]")
        elif isinstance(key, str) and key.isidentifier():
            rendered.append(f".{key}" if rendered else key)
        else:
            rendered.append(f"[{key!r}]")
    return "".join(rendered)


class MatchLevel(Enum):
    """How an operand was accepted by a type slot."""
    REJECTED = "rejected"
    LOOSE = "loose"      # accepted by an unconstrained or coercing matcher
    STRICT = "strict"    # accepted under the matcher's native interpretation


@dataclass(frozen=True)
class Issue:
    """One reason a candidate failed a matcher, anchored at a path."""
    path: Path
    message: str
    expected: Any = None
    actual: Any = None

    def render(self) -> str:
        if not self.path:
            return self.message
        return f"{format_path(self.path)}: {self.message}"


@dataclass(frozen=True)
class SlotParse:
    """Result of offering one call argument to a type slot."""
    level: MatchLevel
    value: Any = None
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.level is not MatchLevel.REJECTED


def mismatch(path: Path, expected: str, actual: Any, expected_value: Any = None) -> Issue:
    return Issue(
        path=path,
        message=f"expected {expected}, got {format_value(actual)}",
        expected=expected_value,
        actual=actual,
    )


class Matcher:
    """
    Base class for all matchers.

    Subclasses implement ``check``. ``accepts`` and ``parse`` derive from it;
    ``parse`` is overridden only by matchers that accept loosely.
    """

    name = "value"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        raise NotImplementedError

    def accepts(self, value: Any) -> bool:
        return not self.check(value)

    def parse(self, value: Any) -> SlotParse:
        issues = self.check(value)
        if issues:
            return SlotParse(MatchLevel.REJECTED, value, issues[0].message)
        return SlotParse(MatchLevel.STRICT, value)

    def describe(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class Unconstrained(Matcher):
    """Accepts anything. As a slot it only ever matches loosely."""

    name = "any"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        return []

    def parse(self, value: Any) -> SlotParse:
        return SlotParse(MatchLevel.LOOSE, value)
