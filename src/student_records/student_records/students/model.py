from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError

KNOWN_FIELDS = frozenset({"name", "email", "rollNo", "roll_no", "division"})


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class StudentRecord:
    """Candidate student payload.

    Nothing is checked on construction; run it through ``validate``.
    Non-string values are treated as missing.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    roll_no: Optional[str] = None
    division: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StudentRecord":
        if not isinstance(data, Mapping):
            raise ValidationError("Student record must be an object")

        roll_no = data.get("rollNo", data.get("roll_no"))
        return cls(
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            roll_no=_text(roll_no),
            division=_text(data.get("division")),
        )


@dataclass(frozen=True)
class ValidationResult:
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"isValid": self.is_valid, "errors": list(self.errors)}


@dataclass(frozen=True)
class ProcessedStudent:
    """Student prepared for listing: display name plus email check.

    ``extra`` carries payload fields other than the four known ones
    (``id``, ``studentId``...) through unchanged.
    """

    name: str
    email: Optional[str]
    roll_no: Optional[str]
    division: Optional[str]
    is_valid: bool
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict:
        return {
            **self.extra,
            "name": self.name,
            "email": self.email,
            "rollNo": self.roll_no,
            "division": self.division,
            "isValid": self.is_valid,
        }
