"""Input controller: turns user gestures into TodoList calls, then re-renders.

Handlers receive the TodoNode the gesture was made on and resolve its task
id to the current index just before mutating. A node whose task no longer
exists raises IndexError.
"""
import logging
from typing import Callable

from models import EditResult
from todolist import TodoList
from view import TodoNode, TodoView

logger = logging.getLogger(__name__)

EditPrompt = Callable[[str], EditResult]


class TodoController:
    def __init__(self, todos: TodoList, view: TodoView, prompt_edit: EditPrompt):
        self.todos = todos
        self.view = view
        self.prompt_edit = prompt_edit

    def render(self) -> None:
        self.view.refresh(self.todos)

    def _index(self, node: TodoNode) -> int:
        try:
            return self.todos.index_of(node.task_id)
        except KeyError:
            raise IndexError(f"item {node.position} is no longer in the list") from None

    # -------------------- gestures --------------------
    def submit(self, raw_text: str) -> bool:
        """Add from the input field; True means the field should be cleared."""
        added = self.todos.add(raw_text) is not None
        self.render()
        return added

    def toggle(self, node: TodoNode, checked: bool) -> None:
        self.todos.toggle(self._index(node), checked)
        self.render()

    def edit(self, node: TodoNode) -> None:
        current = self.todos[self._index(node)].text
        result = self.prompt_edit(current)
        if result.is_cancelled:
            logger.debug("edit of item %d cancelled", node.position)
        self.todos.edit(self._index(node), result)
        self.render()

    def delete(self, node: TodoNode) -> None:
        self.todos.delete(self._index(node))
        self.render()
