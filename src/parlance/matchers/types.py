"""Type matchers for signature slots."""

import inspect
import numbers
import re
from collections.abc import Iterable, Mapping, Sequence, Set, Sized
from datetime import date, datetime
from typing import Any, Callable, List, Optional, Tuple, Type

from .model import Issue, Matcher, MatchLevel, Path, SlotParse, Unconstrained, format_value, mismatch


class InstanceOf(Matcher):
    """Matches instances of any of ``types`` that are not instances of ``exclude``."""

    def __init__(self, *types: Type, name: Optional[str] = None, exclude: Tuple[Type, ...] = ()):
        if not types:
            raise ValueError("InstanceOf requires at least one type")
        self.types = types
        self.exclude = tuple(exclude)
        self.name = name or " | ".join(t.__name__ for t in types)

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if isinstance(value, self.types) and not (self.exclude and isinstance(value, self.exclude)):
            return []
        return [mismatch(path, self.name, value)]


class Predicate(Matcher):
    """Matches values for which ``test`` returns a truthy result."""

    def __init__(self, test: Callable[[Any], bool], name: str):
        self.test = test
        self.name = name

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if self.test(value):
            return []
        return [mismatch(path, self.name, value)]


class Identical(Matcher):
    """Matches exactly one object, by identity."""

    def __init__(self, value: Any, name: Optional[str] = None):
        self.value = value
        self.name = name or format_value(value)

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if value is self.value:
            return []
        return [mismatch(path, self.name, value, self.value)]


class OneOf(Matcher):
    """Union of matchers. As a slot it reports the strongest member acceptance."""

    def __init__(self, *matchers: Matcher, name: Optional[str] = None):
        if not matchers:
            raise ValueError("OneOf requires at least one matcher")
        self.matchers = matchers
        self.name = name or " | ".join(m.describe() for m in matchers)

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        for matcher in self.matchers:
            if not matcher.check(value, path):
                return []
        return [mismatch(path, self.describe(), value)]

    def parse(self, value: Any) -> SlotParse:
        loose = None
        for matcher in self.matchers:
            parsed = matcher.parse(value)
            if parsed.level is MatchLevel.STRICT:
                return parsed
            if parsed.level is MatchLevel.LOOSE and loose is None:
                loose = parsed
        if loose is not None:
            return loose
        return SlotParse(MatchLevel.REJECTED, value, f"expected {self.describe()}, got {format_value(value)}")


class Coercing(Matcher):
    """
    Wraps a matcher so that values of a ``coercible`` type are converted first.

    Native values match strictly; coerced values match loosely and are
    narrowed to the converted value.
    """

    def __init__(
        self,
        matcher: Matcher,
        coerce: Callable[[Any], Any],
        coercible: Tuple[Type, ...] = (str,),
        name: Optional[str] = None,
    ):
        self.matcher = matcher
        self.coerce = coerce
        self.coercible = coercible
        self.name = name or matcher.describe()

    def _try_coerce(self, value: Any) -> Tuple[bool, Any, Optional[str]]:
        if not isinstance(value, self.coercible):
            return False, value, f"expected {self.describe()}, got {format_value(value)}"
        try:
            coerced = self.coerce(value)
        except (TypeError, ValueError, re.error) as exc:
            return False, value, f"cannot interpret {format_value(value)} as {self.describe()}: {exc}"
        if self.matcher.check(coerced):
            return False, value, f"cannot interpret {format_value(value)} as {self.describe()}"
        return True, coerced, None

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if not self.matcher.check(value, path):
            return []
        ok, _, reason = self._try_coerce(value)
        if ok:
            return []
        return [Issue(path=path, message=reason, actual=value)]

    def parse(self, value: Any) -> SlotParse:
        if not self.matcher.check(value):
            return SlotParse(MatchLevel.STRICT, value)
        ok, coerced, reason = self._try_coerce(value)
        if ok:
            return SlotParse(MatchLevel.LOOSE, coerced)
        return SlotParse(MatchLevel.REJECTED, value, reason)


class AwaitableSource(Matcher):
    """
    Subject of asynchronous assertions: an awaitable, or a callable producing one.

    Awaitables and coroutine functions match strictly. Any other callable
    matches loosely, since whether it returns an awaitable is only known
    once it is called.
    """

    name = "awaitable or async callable"

    def check(self, value: Any, path: Path = ()) -> List[Issue]:
        if inspect.isawaitable(value) or callable(value):
            return []
        return [mismatch(path, self.name, value)]

    def parse(self, value: Any) -> SlotParse:
        if inspect.isawaitable(value) or inspect.iscoroutinefunction(value):
            return SlotParse(MatchLevel.STRICT, value)
        if callable(value):
            return SlotParse(MatchLevel.LOOSE, value)
        return SlotParse(MatchLevel.REJECTED, value, f"expected {self.name}, got {format_value(value)}")


def _is_exception_class(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, BaseException)


def _parse_date(value: str) -> datetime:
    return datetime.fromisoformat(value)


ANY = Unconstrained()
STRING = InstanceOf(str, name="string")
BYTES = InstanceOf(bytes, bytearray, name="bytes")
NUMBER = InstanceOf(numbers.Real, exclude=(bool,), name="number")
INTEGER = InstanceOf(numbers.Integral, exclude=(bool,), name="integer")
FLOAT = InstanceOf(float, name="float")
BOOLEAN = InstanceOf(bool, name="boolean")
NONE = Identical(None, name="None")
CALLABLE = Predicate(callable, "callable")
CLASS = InstanceOf(type, name="class")
EXCEPTION = InstanceOf(BaseException, name="exception")
EXCEPTION_CLASS = Predicate(_is_exception_class, "exception class")
SEQUENCE = InstanceOf(Sequence, exclude=(str, bytes, bytearray), name="sequence")
LIST = InstanceOf(list, name="list")
TUPLE = InstanceOf(tuple, name="tuple")
MAPPING = InstanceOf(Mapping, name="mapping")
SET = InstanceOf(Set, name="set")
SIZED = InstanceOf(Sized, name="sized collection")
ITERABLE = InstanceOf(Iterable, name="iterable")
STRING_OR_SEQUENCE = OneOf(STRING, SEQUENCE, name="string or sequence")
PATTERN = Coercing(InstanceOf(re.Pattern, name="pattern"), re.compile, coercible=(str,), name="pattern")
DATE_LIKE = Coercing(InstanceOf(date, name="date"), _parse_date, coercible=(str,), name="date")
AWAITABLE = AwaitableSource()
