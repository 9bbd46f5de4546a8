from dataclasses import dataclass
from typing import Any, Callable, Tuple

from ..matchers.model import format_value


@dataclass(frozen=True)
class DeferredAssertion:
    """
    An assertion waiting for its subject, as built by ``it("to be a", "string")``.

    Calling it with a subject runs ``run(subject, *args)``. Inside an expected
    value given to ``"to satisfy"`` it becomes a live check on the candidate.
    """
    run: Callable[..., Any]
    args: Tuple[Any, ...]

    def __call__(self, subject: Any) -> Any:
        return self.run(subject, *self.args)

    def __str__(self) -> str:
        return "it(" + ", ".join(format_value(arg) for arg in self.args) + ")"
