"""Models for vetter notes."""

from dataclasses import dataclass
from enum import Enum


class NoteLevel(Enum):
    """Severity of a note."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class Note:
    """A finding reported by a vetter."""

    type: str
    summary: str
    level: NoteLevel = NoteLevel.WARNING
    message: str = ""

    def to_display_string(self) -> str:
        """Convert note to user-friendly display string."""
        parts = [f"[{self.level.value}]", self.summary]
        if self.message:
            parts.append(f"- {self.message}")
        return " ".join(parts)
