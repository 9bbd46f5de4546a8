"""
Splitting ``expect(x, "to be a string", "and", "to have length", 3)`` into clauses.

Phrases may themselves be ``"and"`` (``"to be between", 1, "and", 10``), so a
split is only a guess; ``regroupings`` lists the alternatives to try.
"""

from typing import Any, List, Sequence, Tuple

from ..config import CONJUNCTION

Clause = Tuple[Any, ...]


def split_conjunctions(args: Sequence[Any]) -> List[Clause]:
    """Split on every conjunction at position 2 or later; each clause repeats the subject."""
    args = tuple(args)
    if not args:
        return [args]
    subject = args[0]
    clauses: List[Clause] = []
    current = [subject]
    for position, arg in enumerate(args[1:], start=1):
        if position >= 2 and isinstance(arg, str) and arg == CONJUNCTION:
            clauses.append(tuple(current))
            current = [subject]
        else:
            current.append(arg)
    clauses.append(tuple(current))
    return clauses


def _join(left: Clause, right: Clause) -> Clause:
    return left + (CONJUNCTION,) + right[1:]


def regroupings(args: Sequence[Any]) -> List[List[Clause]]:
    """
    Clause groupings to try, in order.

    The full split comes first, then the split with each adjacent pair of
    clauses rejoined, and finally the unsplit call.
    """
    args = tuple(args)
    clauses = split_conjunctions(args)
    groupings: List[List[Clause]] = []
    if len(clauses) > 1:
        groupings.append(clauses)
        for index in range(len(clauses) - 1):
            rejoined = clauses[:index] + [_join(clauses[index], clauses[index + 1])] + clauses[index + 2:]
            if len(rejoined) > 1:
                groupings.append(rejoined)
    groupings.append([args])
    return groupings
