"""FastAPI endpoints for the task list."""

from fastapi import APIRouter, HTTPException, Path, Request, Response

from .logging import get_logger
from .models import INT64_MAX, INT64_MIN, ListOptions, Task
from .store import DuplicateIdError, TaskNotFoundError, TodoStore

logger = get_logger(__name__, component="router")


def create_todo_router(store: TodoStore) -> APIRouter:
    """Create the ``/todos`` router bound to ``store``."""
    router = APIRouter(prefix="/todos", tags=["todos"])

    @router.get("", response_model=list[Task])
    async def list_todos(request: Request):
        """List tasks in insertion order, optionally paginated."""
        opts = ListOptions.from_request(request.query_params, await request.body())
        return await store.snapshot(opts.effective_offset, opts.limit)

    @router.post("", status_code=201)
    async def create_todo(task: Task):
        """Store a new task; its id must not be in use."""
        logger.debug(f"create_todo: {task!r}")
        try:
            await store.insert(task)
        except DuplicateIdError as e:
            logger.debug(f"todo {e.task_id} already exists")
            raise HTTPException(status_code=400, detail=str(e)) from e
        return Response(status_code=201)

    @router.put("/{todo_id}")
    async def update_todo(
        task: Task,
        todo_id: int = Path(ge=INT64_MIN, le=INT64_MAX),
    ):
        """Replace the task stored under ``todo_id``."""
        logger.debug(f"update_todo: id={todo_id} {task!r}")
        try:
            await store.replace(todo_id, task)
        except TaskNotFoundError as e:
            logger.debug(f"todo {todo_id} not found")
            raise HTTPException(status_code=404, detail=str(e)) from e
        except DuplicateIdError as e:
            logger.debug(f"cannot rename todo {todo_id}: id {e.task_id} is taken")
            raise HTTPException(status_code=400, detail=str(e)) from e
        return Response(status_code=200)

    @router.delete("/{todo_id}", status_code=204)
    async def delete_todo(todo_id: int = Path(ge=INT64_MIN, le=INT64_MAX)):
        """Remove the task stored under ``todo_id``."""
        logger.debug(f"delete_todo: id={todo_id}")
        try:
            await store.remove(todo_id)
        except TaskNotFoundError as e:
            logger.debug(f"todo {todo_id} not found")
            raise HTTPException(status_code=404, detail=str(e)) from e
        return Response(status_code=204)

    return router
