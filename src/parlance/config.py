from dataclasses import dataclass

# Reserved words of the call grammar. Definitions may not use them as phrases
# (except "and" directly before a type slot).
NEGATION_PREFIX = "not "
CONJUNCTION = "and"


@dataclass(frozen=True)
class Settings:
    max_reported_rejections: int = 20
    conjunctions: bool = True
    use_phrase_index: bool = True

    def __post_init__(self) -> None:
        if self.max_reported_rejections < 1:
            raise ValueError(
                f"max_reported_rejections must be at least 1, got {self.max_reported_rejections}"
            )
