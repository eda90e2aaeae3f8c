"""Data models for the terminal to-do list.

Exposes the Task dataclass and the EditResult returned by the edit prompt.
Only ``text`` and ``completed`` are persisted; ``id`` is assigned at runtime
by the TodoList so rendered rows can refer to a task without relying on its
position (positions shift after a delete).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

@dataclass
class Task:
    """A single to-do entry.

    Fields:
        text: Non-empty, trimmed text.
        completed: Completion flag.
        id: Runtime id (never written to storage).
    """
    text: str
    completed: bool = False
    id: int = field(default=0, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {'text': self.text, 'completed': self.completed}

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, text={self.text!r}, completed={self.completed})"


@dataclass(frozen=True)
class EditResult:
    """Outcome of an edit prompt: submitted text, or cancelled (text is None)."""
    text: Optional[str] = None

    @classmethod
    def submitted(cls, text: str) -> "EditResult":
        return cls(text=text)

    @classmethod
    def cancelled(cls) -> "EditResult":
        return cls(text=None)

    @property
    def is_cancelled(self) -> bool:
        return self.text is None
