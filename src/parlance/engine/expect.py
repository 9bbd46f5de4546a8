"""
The engine behind ``expect`` and ``expect_async``.

An engine pairs a registry with settings. Extending it with ``use`` builds a
new engine; nothing about the original changes.
"""

import inspect
from dataclasses import dataclass, field, replace
from typing import Any, List, NoReturn, Optional, Sequence, Tuple

from ..assertion.deferred import DeferredAssertion
from ..assertion.model import AssertionDefinition
from ..config import Settings
from ..errors import AmbiguousAssertionError, FailAssertionFailure, UnknownAssertionError
from ..logging import get_logger
from . import resolver
from .conjunction import regroupings
from .executor import execute, execute_async
from .negation import strip_negation
from .registry import AssertionSet, Registry

logger = get_logger(__name__)

Step = Tuple[bool, resolver.MatchResult, Tuple[Any, ...]]


@dataclass(frozen=True)
class Engine:
    registry: Registry = field(default_factory=Registry)
    settings: Settings = field(default_factory=Settings)

    @property
    def definitions(self) -> Tuple[AssertionDefinition, ...]:
        return self.registry.definitions

    def use(self, definitions: Sequence[AssertionDefinition]) -> "Engine":
        """Return a new engine with ``definitions`` registered after the current ones."""
        return replace(self, registry=self.registry.use(definitions))

    def _resolve_clause(self, assertion_set: AssertionSet, clause: Sequence[Any]) -> Step:
        is_negated, stripped = strip_negation(clause)
        result = resolver.resolve(assertion_set, stripped, self.settings)
        return is_negated, result, stripped

    def _plan(self, assertion_set: AssertionSet, args: Sequence[Any]) -> List[Step]:
        """Resolve every clause of a call before anything runs."""
        args = tuple(args)
        groupings = regroupings(args) if self.settings.conjunctions else [[args]]
        # The unsplit call comes last, so its No-Match error is the one reported
        for grouping in groupings[:-1]:
            try:
                return [self._resolve_clause(assertion_set, clause) for clause in grouping]
            except UnknownAssertionError:
                logger.debug(f"Grouping into {len(grouping)} clauses did not resolve")
        return [self._resolve_clause(assertion_set, clause) for clause in groupings[-1]]

    def resolve(self, *args: Any) -> Tuple[bool, resolver.MatchResult]:
        """Resolve a single clause against the sync definitions, without running it."""
        is_negated, result, _ = self._resolve_clause(self.registry.sync, args)
        return is_negated, result

    def resolve_async(self, *args: Any) -> Tuple[bool, resolver.MatchResult]:
        is_negated, result, _ = self._resolve_clause(self.registry.asynchronous, args)
        return is_negated, result

    def expect(self, *args: Any) -> None:
        """
        Assert synchronously, e.g. ``expect(5, "to be within", 1, 10)``.

        Raises:
            AssertionFailure: If the assertion does not hold
            UnknownAssertionError: If no assertion matches the call
            AmbiguousAssertionError: If the call matches several assertions exactly
        """
        for is_negated, result, clause in self._plan(self.registry.sync, args):
            execute(result.definition, result.operands, clause, is_negated)

    async def expect_async(self, *args: Any) -> None:
        """Assert against the asynchronous definitions, e.g. ``await expect_async(coro, "to resolve")``."""
        try:
            plan = self._plan(self.registry.asynchronous, args)
        except (UnknownAssertionError, AmbiguousAssertionError):
            if args:
                _close_unstarted(args[0])
            raise
        for is_negated, result, clause in plan:
            await execute_async(result.definition, result.operands, clause, is_negated)

    def fail(self, reason: Optional[str] = None) -> NoReturn:
        raise FailAssertionFailure(reason or "Explicit failure")

    def it(self, *args: Any) -> DeferredAssertion:
        """An assertion awaiting its subject, for embedding in ``"to satisfy"`` shapes."""
        return DeferredAssertion(self.expect, args)


def _close_unstarted(subject: Any) -> None:
    # A call that never resolves never awaits its subject
    if inspect.iscoroutine(subject) and inspect.getcoroutinestate(subject) == inspect.CORO_CREATED:
        subject.close()
