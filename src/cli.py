"""Command-line interface loop for the to-do list.

The list is cleared and redrawn from the current TodoList after every
command. Item numbers typed by the user refer to the last drawn list.
"""
from typing import Callable, Dict, Optional

import click

from controller import TodoController
from models import EditResult
from todolist import TodoList
from view import TodoNode, TodoView

# --- terminal control helpers ---
# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
CLEAR_SEQ = "\033[3J\033[H\033[2J\033[H"
ALT_SCREEN_ON = "\033[?1049h"
ALT_SCREEN_OFF = "\033[?1049l"


def _emit(seq: str) -> None:
    click.echo(seq, nl=False)


def prompt_edit(current: str) -> EditResult:
    """Ask for replacement text; Ctrl-C / EOF cancels."""
    try:
        text = click.prompt("Edit your to-do", default=current)
    except click.Abort:
        click.echo()
        return EditResult.cancelled()
    return EditResult.submitted(text)


class CLI:
    def __init__(self, todos: TodoList, alt_screen: bool = True,
                 edit_prompt: Callable[[str], EditResult] = prompt_edit):
        self.todos = todos
        self.alt_screen = alt_screen
        self.view = TodoView()
        self.controller = TodoController(todos, self.view, edit_prompt)
        self._notice: Optional[str] = None
        self._commands: Dict[str, Callable[[str], None]] = {
            'add': self._cmd_add,
            'a': self._cmd_add,
            'x': self._cmd_toggle,
            'toggle': self._cmd_toggle,
            'done': lambda rest: self._cmd_set(rest, "done", True),
            'undo': lambda rest: self._cmd_set(rest, "undo", False),
            'edit': self._cmd_edit,
            'e': self._cmd_edit,
            'rm': self._cmd_rm,
            'del': self._cmd_rm,
            'clear': self._cmd_clear,
        }

    def run(self) -> None:
        """Main REPL loop; the list is always cleared/redrawn each cycle."""
        exit_message: Optional[str] = None
        if self.alt_screen:
            _emit(ALT_SCREEN_ON)
        self.controller.render()
        try:
            while True:
                self._draw()
                line = click.prompt("\n", prompt_suffix=": ", default='', show_default=False).strip()
                if not line:
                    continue
                lower = line.lower()
                if lower == 'help':
                    _emit(CLEAR_SEQ)
                    self._help()
                    click.prompt("\nPress Enter to return to the list", default='', show_default=False)
                    continue
                if lower in ('exit', 'quit'):
                    exit_message = "Goodbye."
                    break
                self._handle_command(line)
        except click.Abort:
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _emit(ALT_SCREEN_OFF)
            if exit_message:
                click.echo(exit_message)

    def _draw(self) -> None:
        _emit(CLEAR_SEQ)
        self.view.display()
        if self._notice:
            click.echo(f"\n{self._notice}")
            self._notice = None

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        parts = line.split(None, 1)
        rest = parts[1] if len(parts) > 1 else ''
        handler = self._commands.get(parts[0].lower())
        if handler is None:
            self._notice = "Unknown command. Type 'help' for instructions."
            return
        handler(rest)

    def _node(self, rest: str, usage: str) -> Optional[TodoNode]:
        tokens = rest.split()
        if len(tokens) != 1:
            self._notice = f"Usage: {usage}"
            return None
        raw = tokens[0].rstrip('.')
        if not raw.isdigit():
            self._notice = "Invalid item number."
            return None
        node = self.view.node_at(int(raw))
        if node is None:
            self._notice = f"No item #{raw}."
        return node

    # ---- individual command helpers ----
    def _cmd_add(self, rest: str) -> None:
        if rest:
            text = rest
        else:
            try:
                text = click.prompt("Enter to-do", default='', show_default=False)
            except click.Abort:
                return
        if not self.controller.submit(text):
            self._notice = "Text required."

    def _cmd_toggle(self, rest: str) -> None:
        node = self._node(rest, "x <n>")
        if node is not None:
            self.controller.toggle(node, not node.completed)

    def _cmd_set(self, rest: str, name: str, checked: bool) -> None:
        node = self._node(rest, f"{name} <n>")
        if node is not None:
            self.controller.toggle(node, checked)

    def _cmd_edit(self, rest: str) -> None:
        node = self._node(rest, "edit <n>")
        if node is not None:
            self.controller.edit(node)

    def _cmd_rm(self, rest: str) -> None:
        node = self._node(rest, "rm <n>")
        if node is not None:
            self.controller.delete(node)
            self._notice = f'Removed "{node.text}".'

    def _cmd_clear(self, rest: str) -> None:
        self.todos.clear()
        self.controller.render()

    # -------------------- help --------------------
    def _help(self) -> None:
        click.echo("Commands:")
        click.echo("  add                 Add a to-do (prompts for text)")
        click.echo("  add <text...>       Shorthand add with inline text (e.g., add buy milk)")
        click.echo("  x <n>               Toggle the checkbox of item n (alias: toggle)")
        click.echo("  done <n> / undo <n> Mark item n completed / not completed")
        click.echo("  edit <n>            Edit the text of item n (Enter keeps it, Ctrl-C cancels)")
        click.echo("  rm <n>              Delete item n (alias: del)")
        click.echo("  clear               Delete every item")
        click.echo("  help                Show this help (press Enter to return)")
        click.echo("  exit                Exit (changes are saved as you go)")
