from typing import Any, Sequence, Tuple

from ..config import NEGATION_PREFIX


def strip_negation(args: Sequence[Any]) -> Tuple[bool, Tuple[Any, ...]]:
    """
    Remove the negation prefix from the phrase at call position 1.

    A run of prefixes is removed whole and still means a single negation, so
    ``"not not to be"`` reads as ``"not to be"``.

    Returns:
        Tuple of (is_negated, args without the prefix)
    """
    args = tuple(args)
    if len(args) < 2 or not isinstance(args[1], str) or not args[1].startswith(NEGATION_PREFIX):
        return False, args

    phrase = args[1]
    while phrase.startswith(NEGATION_PREFIX):
        phrase = phrase[len(NEGATION_PREFIX):]
    return True, (args[0], phrase) + args[2:]
