from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorPattern:
    """One recognizable failure class and the substrings that identify it."""

    key: str
    category: str
    patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClassificationResult:
    """Category assigned to a failed transaction."""

    key: str
    category: str
    patterns: tuple[str, ...] = ()

    @classmethod
    def from_pattern(cls, pattern: ErrorPattern) -> "ClassificationResult":
        return cls(key=pattern.key, category=pattern.category, patterns=pattern.patterns)

    @property
    def is_unknown(self) -> bool:
        return self.key == UNKNOWN_KEY

    def as_payload(self) -> dict[str, object]:
        return {
            "key": self.key,
            "category": self.category,
            "patterns": list(self.patterns),
        }


UNKNOWN_KEY = "UNKNOWN"

UNKNOWN_RESULT = ClassificationResult(key=UNKNOWN_KEY, category="Unknown Error")
