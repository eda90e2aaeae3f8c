"""Main entry point for the terminal to-do list."""
import logging
from pathlib import Path
from typing import Optional

import click

from cli import CLI
from config import get_settings
from logging_setup import setup_logging
from storage import KeyValueStore, Storage
from todolist import TodoList

logger = logging.getLogger(__name__)


@click.command()
@click.option('--file', 'store_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Key-value store file (default: $TODO_FILE or ~/.local/share/todo/store.json).')
@click.option('--alt-screen/--no-alt-screen', default=None,
              help='Draw in the alternate screen buffer (default: $TODO_ALT_SCREEN, on).')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Console log level (default: $TODO_LOG_LEVEL or WARNING).')
def main(store_file: Optional[Path], alt_screen: Optional[bool], log_level: Optional[str]) -> None:
    """Keep a persistent to-do list in the terminal."""
    settings = get_settings()
    level = logging.getLevelName(log_level.upper()) if log_level else settings.log_level
    setup_logging(log_dir=settings.log_dir, console_level=level)

    path = store_file or settings.store_file
    logger.info("Using store %s", path)
    todos = TodoList.load(Storage(KeyValueStore(path)))
    CLI(todos, alt_screen=settings.alt_screen if alt_screen is None else alt_screen).run()

if __name__ == "__main__":
    main()
