"""
Shape matchers produced by the synthesizer.

Every shape keeps the source value it was built from in ``expected`` so a
failure can report what was asked for alongside the per-path issues.
"""

import math
import re
from collections.abc import Mapping, Sequence, Set
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from ..assertion.deferred import DeferredAssertion
from ..errors import AssertionFailure
from ..matchers.model import Issue, Matcher, Path, format_value, mismatch

_TEXT = (str, bytes, bytearray)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def naturally_equal(left: Any, right: Any) -> bool:
    """``==`` except that NaN equals NaN and booleans only equal booleans."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if _is_nan(left) and _is_nan(right):
        return True
    return bool(left == right)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT)


class Equals(Matcher):
    """Natural equality with the expected value."""

    def __init__(self, expected: Any):
        self.expected = expected

    def describe(self) -> str:
        return format_value(self.expected)

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if naturally_equal(self.expected, value):
            return []
        return [mismatch(path, self.describe(), value, self.expected)]


class OfCategory(Matcher):
    """Any value of the same category (dates of a kind, callables) as the source."""

    def __init__(self, test: Callable[[Any], bool], name: str, expected: Any = None):
        self.test = test
        self.name = name
        self.expected = expected

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if self.test(value):
            return []
        return [mismatch(path, self.name, value, self.expected)]


class PatternLiteral(Matcher):
    """A compiled pattern with the same source and flags."""

    def __init__(self, expected: re.Pattern):
        self.expected = expected

    def describe(self) -> str:
        return f"pattern /{self.expected.pattern}/"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if (
            isinstance(value, re.Pattern)
            and value.pattern == self.expected.pattern
            and value.flags == self.expected.flags
        ):
            return []
        return [mismatch(path, self.describe(), value, self.expected)]


class PatternSearch(Matcher):
    """A string (or a number, as text) in which the pattern is found."""

    def __init__(self, expected: re.Pattern):
        self.expected = expected

    def describe(self) -> str:
        return f"string matching /{self.expected.pattern}/"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        text = value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            text = str(value)
        if isinstance(text, str) and self.expected.search(text):
            return []
        return [mismatch(path, self.describe(), value, self.expected)]


class EmptyMapping(Matcher):
    name = "empty mapping"

    def __init__(self, expected: Any = None):
        self.expected = {} if expected is None else expected

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if isinstance(value, Mapping) and len(value) == 0:
            return []
        return [mismatch(path, self.name, value, self.expected)]


class MappingShape(Matcher):
    """Per-key matchers. In exact mode keys beyond the shape are issues too."""

    def __init__(self, entries: Dict[Any, Matcher], exact: bool, expected: Any = None):
        self.entries = entries
        self.exact = exact
        self.expected = expected

    def describe(self) -> str:
        keys = ", ".join(format_value(key) for key in self.entries)
        return f"mapping with keys {{{keys}}}" + (" only" if self.exact else "")

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if not isinstance(value, Mapping):
            return [mismatch(path, "mapping", value, self.expected)]
        issues: List[Issue] = []
        for key, matcher in self.entries.items():
            if key not in value:
                issues.append(Issue(path + (key,), "missing key", expected=self.expected))
                continue
            issues.extend(matcher.check(value[key], path + (key,)))
        if self.exact:
            for key in value:
                if key not in self.entries:
                    issues.append(Issue(path + (key,), "unexpected key", actual=value[key]))
        return issues


class AttributeShape(Matcher):
    """
    Field-by-field shape of an object: dataclass fields or instance attributes.

    Exact mode requires the same class. With ``closed`` set, attributes in the
    candidate's ``__dict__`` beyond the shape are issues too.
    Partial mode accepts any object carrying the fields.
    """

    def __init__(
        self,
        cls: Type,
        fields: Dict[str, Matcher],
        exact: bool,
        expected: Any = None,
        closed: bool = False,
    ):
        self.cls = cls
        self.fields = fields
        self.exact = exact
        self.expected = expected
        self.closed = closed

    def describe(self) -> str:
        return f"{self.cls.__name__}({', '.join(self.fields)})"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if self.exact and type(value) is not self.cls:
            return [mismatch(path, f"instance of {self.cls.__name__}", value, self.expected)]
        issues: List[Issue] = []
        for name, matcher in self.fields.items():
            if not hasattr(value, name):
                issues.append(Issue(path + (name,), "missing attribute", expected=self.expected))
                continue
            issues.extend(matcher.check(getattr(value, name), path + (name,)))
        if self.closed:
            for name, item in getattr(value, "__dict__", {}).items():
                if name not in self.fields:
                    issues.append(Issue(path + (name,), "unexpected attribute", actual=item))
        return issues


def error_view(error: BaseException) -> dict:
    """Attributes of an exception as a mapping, with ``message`` and ``args`` filled in."""
    view = dict(vars(error))
    view.setdefault("message", str(error))
    view.setdefault("args", error.args)
    return view


class ErrorShape(Matcher):
    """
    An exception of the expected class whose ``error_view`` meets ``view``.

    Exact mode requires the very same class; partial mode accepts subclasses.
    """

    def __init__(self, cls: Type, view: Matcher, exact: bool, expected: Any = None):
        self.cls = cls
        self.view = view
        self.exact = exact
        self.expected = expected

    def describe(self) -> str:
        return f"{self.cls.__name__} error"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if self.exact:
            ok = type(value) is self.cls
        else:
            ok = isinstance(value, self.cls)
        if not ok:
            return [mismatch(path, self.describe(), value, self.expected)]
        return self.view.check(error_view(value), path)


class SequenceShape(Matcher):
    """Positional shape: equal length and one matcher per index."""

    def __init__(self, items: List[Matcher], kind: Optional[Type] = None, expected: Any = None):
        self.items = items
        self.kind = kind
        self.expected = expected

    def describe(self) -> str:
        kind = self.kind.__name__ if self.kind else "sequence"
        return f"{kind} of length {len(self.items)}"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if not _is_sequence(value):
            return [mismatch(path, "sequence", value, self.expected)]
        if self.kind is not None and type(value) is not self.kind:
            return [mismatch(path, self.kind.__name__, value, self.expected)]
        if len(value) != len(self.items):
            return [
                Issue(
                    path,
                    f"expected length {len(self.items)}, got {len(value)}",
                    expected=self.expected,
                    actual=value,
                )
            ]
        issues: List[Issue] = []
        for index, matcher in enumerate(self.items):
            issues.extend(matcher.check(value[index], path + (index,)))
        return issues


class EachOf(Matcher):
    """Any sequence whose every element meets at least one of the given matchers."""

    def __init__(self, options: List[Matcher], expected: Any = None):
        self.options = options
        self.expected = expected

    def describe(self) -> str:
        if not self.options:
            return "empty sequence"
        return "sequence of " + " | ".join(option.describe() for option in self.options)

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if not _is_sequence(value):
            return [mismatch(path, "sequence", value, self.expected)]
        issues: List[Issue] = []
        for index, item in enumerate(value):
            item_path = path + (index,)
            if len(self.options) == 1:
                issues.extend(self.options[0].check(item, item_path))
            elif not any(option.accepts(item) for option in self.options):
                names = " | ".join(option.describe() for option in self.options)
                issues.append(mismatch(item_path, f"one of {names}", item))
        return issues


class MemberShape(Matcher):
    """
    Shape of a set.

    Every member matcher must be met by some element. In exact mode the sizes
    must agree and every element must meet some member matcher as well.
    """

    def __init__(self, members: List[Matcher], exact: bool, expected: Any = None):
        self.members = members
        self.exact = exact
        self.expected = expected

    def describe(self) -> str:
        return "set containing " + ", ".join(member.describe() for member in self.members)

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if not isinstance(value, Set):
            return [mismatch(path, "set", value, self.expected)]
        elements = list(value)
        issues: List[Issue] = []
        if self.exact and len(elements) != len(self.members):
            issues.append(
                Issue(path, f"expected {len(self.members)} members, got {len(elements)}",
                      expected=self.expected, actual=value)
            )
        for member in self.members:
            if not any(member.accepts(element) for element in elements):
                issues.append(Issue(path, f"missing member {member.describe()}", expected=self.expected))
        if self.exact:
            for element in elements:
                if not any(member.accepts(element) for member in self.members):
                    issues.append(Issue(path, f"unexpected member {format_value(element)}", actual=element))
        return issues


class LiveAssertion(Matcher):
    """Runs a deferred assertion against the candidate."""

    def __init__(self, deferred: DeferredAssertion):
        self.deferred = deferred
        self.expected = deferred

    def describe(self) -> str:
        return str(self.deferred)

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        try:
            self.deferred(value)
        except AssertionFailure as failure:
            return [Issue(path, failure.message, expected=self.deferred, actual=value)]
        return []


class EachItem(Matcher):
    """Every element of an iterable meets ``matcher``; issues carry the element index."""

    def __init__(self, matcher: Matcher):
        self.matcher = matcher
        self.expected = getattr(matcher, "expected", None)

    def describe(self) -> str:
        return f"items each {self.matcher.describe()}"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        issues: List[Issue] = []
        for index, item in enumerate(value):
            issues.extend(self.matcher.check(item, path + (index,)))
        return issues


class AnyItem(Matcher):
    """At least one element of an iterable meets ``matcher``."""

    def __init__(self, matcher: Matcher):
        self.matcher = matcher
        self.expected = getattr(matcher, "expected", None)

    def describe(self) -> str:
        return f"an item {self.matcher.describe()}"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        items: Tuple[Any, ...] = tuple(value)
        if any(self.matcher.accepts(item) for item in items):
            return []
        return [Issue(path, f"expected {self.describe()}, got {format_value(value)}",
                      expected=self.expected, actual=value)]
