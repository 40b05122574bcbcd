"""
In-memory store for the to-do API.
"""

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class TodoError(Exception):
    """Base class for errors returned to API clients."""

    message = "Todo error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class EmptyBodyError(TodoError):
    message = "Todo body is required"


class TodoNotFoundError(TodoError):
    message = "Todo not found"


@dataclass
class Todo:
    id: int
    completed: bool
    body: str

    def to_dict(self) -> Dict:
        return asdict(self)


def parse_id(todo_id: Union[int, str]) -> Optional[int]:
    """Return the integer id for `todo_id`, or None if it can't name a task.

    Path text only matches when it is the exact decimal form of an id,
    so "01" or " 1" never resolve to task 1.
    """
    if isinstance(todo_id, bool):
        return None
    if isinstance(todo_id, int):
        return todo_id
    if not isinstance(todo_id, str) or not (todo_id.isascii() and todo_id.isdigit()):
        return None
    try:
        value = int(todo_id)
    except ValueError:
        # past the int string conversion limit; no live id is that long
        return None
    if str(value) != todo_id:
        return None
    return value


class TodoStore:
    """Ordered collection of todos keyed by id.

    All access goes through a single lock. Ids come from a monotonic
    counter and are never reused after a delete.
    """

    def __init__(self):
        self._todos: "OrderedDict[int, Todo]" = OrderedDict()
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self) -> List[Dict]:
        with self._lock:
            return [todo.to_dict() for todo in self._todos.values()]

    def get(self, todo_id: Union[int, str]) -> Dict:
        with self._lock:
            return self._lookup(todo_id).to_dict()

    def create(self, body: str, completed: bool = False) -> Dict:
        if not body:
            raise EmptyBodyError()
        with self._lock:
            self._last_id += 1
            todo = Todo(id=self._last_id, completed=bool(completed), body=body)
            self._todos[todo.id] = todo
            logger.debug("Created todo %d", todo.id)
            return todo.to_dict()

    def toggle(self, todo_id: Union[int, str]) -> Dict:
        with self._lock:
            todo = self._lookup(todo_id)
            todo.completed = not todo.completed
            logger.debug("Toggled todo %d to completed=%s", todo.id, todo.completed)
            return todo.to_dict()

    def delete(self, todo_id: Union[int, str]) -> None:
        with self._lock:
            todo = self._lookup(todo_id)
            del self._todos[todo.id]
            logger.debug("Deleted todo %d", todo.id)

    # Caller must hold self._lock
    def _lookup(self, todo_id: Union[int, str]) -> Todo:
        key = parse_id(todo_id)
        if key is None or key not in self._todos:
            raise TodoNotFoundError()
        return self._todos[key]
