"""Immutable, append-only collections of assertion definitions."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Tuple

from ..assertion.model import AssertionDefinition
from ..errors import AssertionImplementationError
from ..logging import get_logger

logger = get_logger(__name__)


class AssertionSet:
    """
    Ordered definitions of one kind (sync or async) with a phrase index.

    The index maps each phrase at call position 1 to the registration
    positions of the definitions accepting it, so a lookup never reorders
    candidates.
    """

    def __init__(self, definitions: Iterable[AssertionDefinition]):
        self.definitions: Tuple[AssertionDefinition, ...] = tuple(definitions)
        index: Dict[str, List[int]] = {}
        for position, definition in enumerate(self.definitions):
            for phrase in definition.phrases:
                index.setdefault(phrase, []).append(position)
        self._index = {phrase: tuple(positions) for phrase, positions in index.items()}

    def candidates(self, args: Sequence[Any]) -> Tuple[AssertionDefinition, ...]:
        """Definitions that could accept ``args``, in registration order."""
        if len(args) < 2 or not isinstance(args[1], str):
            return ()
        return tuple(self.definitions[position] for position in self._index.get(args[1], ()))

    @property
    def phrases(self) -> List[str]:
        return sorted(self._index)

    def __iter__(self) -> Iterator[AssertionDefinition]:
        return iter(self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)


@dataclass(frozen=True)
class Registry:
    """All definitions of an engine, split into sync and async sets."""
    definitions: Tuple[AssertionDefinition, ...] = ()
    sync: AssertionSet = field(init=False, repr=False, compare=False)
    asynchronous: AssertionSet = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        seen = set()
        for definition in self.definitions:
            if not isinstance(definition, AssertionDefinition):
                raise AssertionImplementationError(
                    f"Expected an assertion definition, got {definition!r}", result=definition
                )
            if definition.id in seen:
                raise AssertionImplementationError(f"Duplicate assertion id: {definition.id}")
            seen.add(definition.id)
        object.__setattr__(self, "definitions", tuple(self.definitions))
        object.__setattr__(self, "sync", AssertionSet(d for d in self.definitions if not d.is_async))
        object.__setattr__(self, "asynchronous", AssertionSet(d for d in self.definitions if d.is_async))

    def use(self, extra: Sequence[AssertionDefinition]) -> "Registry":
        """Return a new registry holding these definitions followed by ``extra``."""
        if not extra:
            raise ValueError("use() requires at least one assertion definition")
        registry = Registry(self.definitions + tuple(extra))
        logger.debug(f"Extended registry from {len(self.definitions)} to {len(registry.definitions)} definitions")
        return registry

    def get(self, assertion_id: str) -> AssertionDefinition:
        for definition in self.definitions:
            if definition.id == assertion_id:
                return definition
        raise KeyError(assertion_id)
