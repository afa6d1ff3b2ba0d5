"""
Shape violations raised when a document does not match the Card schema.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable


class ViolationKind(str, Enum):
    """Elementary violation categories."""

    MISSING_REQUIRED_FIELD = "missing_required_field"
    WRONG_TYPE = "wrong_type"
    INVALID_URL_FORMAT = "invalid_url_format"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    INVALID_NESTED_SHAPE = "invalid_nested_shape"
    AMBIGUOUS_IMAGE_URIS = "ambiguous_image_uris"


@dataclass(frozen=True)
class Violation:
    """A single problem found at one field path."""

    path: str
    kind: ViolationKind
    message: str
    actual: Any = None
    expected: str | None = None
    allowed: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: [{self.kind.value}] {self.message}"

    def is_under(self, prefix: str) -> bool:
        """Check whether this violation sits at or below a field path."""
        if not prefix or self.path == prefix:
            return True
        return self.path.startswith(prefix) and self.path[len(prefix)] in ".["


class ShapeError(Exception):
    """Raised when a document does not match the expected shape."""

    def __init__(self, violations: Iterable[Violation]):
        self.violations: tuple[Violation, ...] = tuple(violations)
        if not self.violations:
            raise ValueError("ShapeError requires at least one violation")
        count = len(self.violations)
        summary = "\n".join(f"  {violation}" for violation in self.violations)
        super().__init__(
            f"{count} shape violation{'s' if count != 1 else ''}:\n{summary}"
        )

    @property
    def paths(self) -> list[str]:
        """Offending field paths, in report order."""
        return [violation.path for violation in self.violations]

    def of_kind(self, kind: ViolationKind) -> list[Violation]:
        """All violations of one kind."""
        return [violation for violation in self.violations if violation.kind is kind]

    def nested(self, prefix: str) -> ShapeError | None:
        """
        Violations under a nested field, with paths relative to it
        :param prefix: Field path such as "card_faces[1]"
        :return: A ShapeError for the nested record, or None if it had no violations
        """
        inner = []
        for violation in self.violations:
            if not violation.is_under(prefix):
                continue
            relative = violation.path[len(prefix):].lstrip(".")
            inner.append(replace(violation, path=relative))
        return ShapeError(inner) if inner else None
