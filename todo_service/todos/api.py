# todo_service/todos/api.py
import logging
import re

from fastapi import APIRouter, Depends, Response
from todo_service.shared.http import err
from .repository import TodoRepository
from .schemas import TodoCreateIn, TodoUpdateIn, TodoOut

log = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")

def parse_todo_id(raw: str) -> tuple[int | None, str | None]:
    """Return (id, None) for a usable id, or (None, reason) when it is rejected."""
    if not _INT_RE.fullmatch(raw):
        return None, "ID must be an integer"
    try:
        value = int(raw)
    except ValueError:
        # digit strings past the int conversion limit
        return None, "ID must be an integer"
    if value <= 0:
        return None, "ID must be greater than 0"
    return value, None

def path_todo_id(todo_id: str) -> int:
    """
    Parse and check the {todo_id} path segment.
    Runs as a dependency, so a bad id is rejected before the body is validated.
    """
    value, problem = parse_todo_id(todo_id)
    if problem:
        log.info("rejected todo id %r: %s", todo_id[:32], problem)
        err(problem, code="invalid_input", details={"id": todo_id})
    return value

def create_router(repo: TodoRepository) -> APIRouter:
    router = APIRouter(prefix="/todos", tags=["Todos"])

    @router.get("", response_model=list[TodoOut])
    def list_todos():
        return repo.list()

    @router.post("", status_code=201, response_class=Response)
    def create_todo(payload: TodoCreateIn):
        todo = repo.add(payload.text)
        log.info("created todo %s", todo.id)
        return Response(status_code=201)

    @router.put("/{todo_id}", response_class=Response)
    def update_todo(payload: TodoUpdateIn, tid: int = Depends(path_todo_id)):
        if not repo.update(tid, payload.text):
            log.info("update: todo %s not found", tid)
            err("Todo not found", code="not_found", status=404)
        return Response(status_code=200)

    @router.post("/{todo_id}:toggle", response_class=Response)
    def toggle_todo(tid: int = Depends(path_todo_id)):
        if not repo.toggle(tid):
            log.info("toggle: todo %s not found", tid)
            err("Todo not found", code="not_found", status=404)
        return Response(status_code=200)

    return router
