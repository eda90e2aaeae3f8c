"""TodoList: the in-memory ordered task collection and its mutations.

Every successful mutation writes the full collection through Storage once.
Blank input on add/edit is a silent no-op and writes nothing.
Indices are positions in the current list; negative values are rejected
rather than wrapping around.
"""
import logging
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from models import EditResult, Task
from storage import Storage

logger = logging.getLogger(__name__)


class TodoList:
    def __init__(self, storage: Storage, tasks: Optional[Sequence[Task]] = None):
        self.storage = storage
        self._tasks: List[Task] = []
        self._next_id: int = 1
        for task in tasks or ():
            task.id = self._allocate_id()
            self._tasks.append(task)

    @classmethod
    def load(cls, storage: Storage) -> "TodoList":
        todos = cls(storage, storage.load())
        logger.info("Loaded %d todos", len(todos))
        return todos

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def index_of(self, task_id: int) -> int:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        raise KeyError(task_id)

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def __getitem__(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def _check_index(self, index: int) -> int:
        if index < 0 or index >= len(self._tasks):
            raise IndexError(f"todo index {index} out of range (have {len(self._tasks)})")
        return index

    # -------------------- task operations --------------------
    def add(self, raw_text: str) -> Optional[Task]:
        text = raw_text.strip()
        if not text:
            return None
        task = Task(text=text, completed=False, id=self._allocate_id())
        self._tasks.append(task)
        logger.debug("add #%d %r", task.id, text)
        self._save()
        return task

    def toggle(self, index: int, completed: bool) -> Task:
        task = self._tasks[self._check_index(index)]
        task.completed = bool(completed)
        logger.debug("toggle #%d -> %s", task.id, task.completed)
        self._save()
        return task

    def edit(self, index: int, result: Union[EditResult, str, None]) -> Task:
        task = self._tasks[self._check_index(index)]
        if isinstance(result, EditResult):
            result = result.text
        if result is None:
            return task
        text = result.strip()
        if not text:
            return task
        task.text = text
        logger.debug("edit #%d -> %r", task.id, text)
        self._save()
        return task

    def delete(self, index: int) -> Task:
        task = self._tasks.pop(self._check_index(index))
        logger.debug("delete #%d %r", task.id, task.text)
        self._save()
        return task

    def clear(self) -> None:
        """Drop every task and the persisted key."""
        self._tasks.clear()
        self.storage.clear()

    def _save(self) -> None:
        self.storage.save(self._tasks)
