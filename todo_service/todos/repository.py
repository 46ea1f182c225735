# todo_service/todos/repository.py
import logging
import threading

from .models import Todo

log = logging.getLogger(__name__)


class TodoRepository:
    """
    In-memory todo store shared by all request handlers.

    A single lock covers the id counter and the map, so id allocation plus
    insertion is one step, and each update/toggle is one read-modify-write.
    Missing ids are reported with a False return, never an exception.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._serial = 0
        self._todos: dict[int, Todo] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self) -> list[Todo]:
        with self._lock:
            items = list(self._todos.values())
        return sorted(items, key=lambda t: t.id)

    def add(self, text: str) -> Todo:
        with self._lock:
            self._serial += 1
            todo = Todo(id=self._serial, text=text, done=False)
            self._todos[todo.id] = todo
        log.debug("todo added id=%s (%s stored)", todo.id, len(self))
        return todo

    def update(self, todo_id: int, text: str) -> bool:
        with self._lock:
            current = self._todos.get(todo_id)
            if current is None:
                return False
            self._todos[todo_id] = current.model_copy(update={"text": text})
        log.debug("todo updated id=%s", todo_id)
        return True

    def toggle(self, todo_id: int) -> bool:
        with self._lock:
            current = self._todos.get(todo_id)
            if current is None:
                return False
            self._todos[todo_id] = current.model_copy(update={"done": not current.done})
        log.debug("todo toggled id=%s", todo_id)
        return True
