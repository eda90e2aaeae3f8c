"""Rendering: one TodoNode per task, rebuilt in full on every refresh.

A node captures the task's runtime id when it is created, so a handler
fired against a node always targets the same task even if positions have
shifted since. Positions shown to the user are 1-based.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO

import click

from models import Task
from theme import BOLD, DONE_STYLE, EMPTY_COLOR, HEADER_COLOR, OPEN_STYLE, POSITION_COLOR, color

TITLE = 'TO DO'
CHECKED = '[x]'
UNCHECKED = '[ ]'
DELETE_LABEL = '[del]'


@dataclass(frozen=True)
class TodoNode:
    task_id: int
    position: int
    text: str
    completed: bool

    @property
    def checkbox(self) -> str:
        return CHECKED if self.completed else UNCHECKED

    @property
    def label(self) -> str:
        return color(self.text, DONE_STYLE if self.completed else OPEN_STYLE)

    @property
    def delete_label(self) -> str:
        return color(DELETE_LABEL, EMPTY_COLOR)

    def line(self) -> str:
        prefix = color(f"{self.position:>2}.", POSITION_COLOR)
        return f"{prefix} {self.checkbox} {self.label}  {self.delete_label}"


def render(tasks: Iterable[Task]) -> List[TodoNode]:
    return [
        TodoNode(task_id=t.id, position=pos, text=t.text, completed=t.completed)
        for pos, t in enumerate(tasks, start=1)
    ]


class TodoView:
    """Holds the last rendered nodes and draws them to a text stream."""

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out
        self.nodes: List[TodoNode] = []

    def refresh(self, tasks: Iterable[Task]) -> List[TodoNode]:
        self.nodes = render(tasks)
        return self.nodes

    def node_at(self, position: int) -> Optional[TodoNode]:
        if 1 <= position <= len(self.nodes):
            return self.nodes[position - 1]
        return None

    def display(self) -> None:
        self._echo(color(TITLE, HEADER_COLOR, BOLD))
        self._echo(color('-' * 24, HEADER_COLOR))
        if not self.nodes:
            self._echo(color('(empty)', EMPTY_COLOR))
        for node in self.nodes:
            self._echo(node.line())
        left = sum(1 for n in self.nodes if not n.completed)
        self._echo(color(f"\n{left} item{'s' if left != 1 else ''} left", EMPTY_COLOR))

    def _echo(self, text: str) -> None:
        click.echo(text, file=self.out)
