# routers/tasks.py
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel
from starlette.status import HTTP_201_CREATED

from dependencies import get_task_store, parse_task_id
from errors import InvalidTaskError, TaskNotFoundError
from logging_config import get_logger
from storage import TaskStore, find_task, next_id

logger = get_logger(__name__)

# --- Router Setup ---
router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)

# --- Messages ---
# GET answers without the trailing period, PUT and DELETE with it.
NOT_FOUND = "Task not found"
NOT_FOUND_MUTATION = "Task not found."
FIELDS_REQUIRED = "Title and description are required."
DELETED = "Task deleted successfully."


# --- Data Models ---
class Task(BaseModel):
    id: int
    title: str
    description: str


class TaskFields(BaseModel):
    # Only presence is checked, any JSON value is accepted.
    title: Optional[Any] = None
    description: Optional[Any] = None

    @classmethod
    def from_body(cls, body: Any) -> "TaskFields":
        return cls.model_validate(body) if isinstance(body, dict) else cls()


class ErrorMessage(BaseModel):
    error: str


class DeleteMessage(BaseModel):
    message: str


# --- Endpoints ---

@router.get("", responses={200: {"model": list[Task]}})
async def get_tasks(store: TaskStore = Depends(get_task_store)):
    """Get the list of all tasks."""
    return store.load_all()


@router.get("/{task_id}", responses={200: {"model": Task}, 404: {"model": ErrorMessage}})
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Get a single task by its id."""
    parsed_id = parse_task_id(task_id)
    task = find_task(store.load_all(), parsed_id) if parsed_id is not None else None
    if task is None:
        raise TaskNotFoundError(NOT_FOUND)
    return task


@router.post(
    "",
    status_code=HTTP_201_CREATED,
    responses={201: {"model": Task}, 400: {"model": ErrorMessage}},
)
async def create_task(body: Any = Body(default=None), store: TaskStore = Depends(get_task_store)):
    """Create a task. The id is always assigned by the server."""
    payload = TaskFields.from_body(body)
    if not payload.title or not payload.description:
        raise InvalidTaskError(FIELDS_REQUIRED)

    tasks = store.load_all()
    new_task = {
        "id": next_id(tasks),
        "title": payload.title,
        "description": payload.description,
    }
    tasks.append(new_task)
    store.save_all(tasks)
    logger.info(f"Created task {new_task['id']}")
    return new_task


@router.put("/{task_id}", responses={200: {"model": Task}, 404: {"model": ErrorMessage}})
async def update_task(
    task_id: str,
    body: Any = Body(default=None),
    store: TaskStore = Depends(get_task_store),
):
    """Update the title and/or description of a task. Omitted fields stay as they are."""
    parsed_id = parse_task_id(task_id)
    tasks = store.load_all()
    task = find_task(tasks, parsed_id) if parsed_id is not None else None
    if task is None:
        raise TaskNotFoundError(NOT_FOUND_MUTATION)

    payload = TaskFields.from_body(body)
    if payload.title:
        task["title"] = payload.title
    if payload.description:
        task["description"] = payload.description
    store.save_all(tasks)
    logger.info(f"Updated task {parsed_id}")
    return task


@router.delete("/{task_id}", responses={200: {"model": DeleteMessage}, 404: {"model": ErrorMessage}})
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Delete a task by its id."""
    parsed_id = parse_task_id(task_id)
    tasks = store.load_all()
    task_to_delete = find_task(tasks, parsed_id) if parsed_id is not None else None
    if task_to_delete is None:
        raise TaskNotFoundError(NOT_FOUND_MUTATION)

    remaining_tasks = [t for t in tasks if t is not task_to_delete]
    store.save_all(remaining_tasks)
    logger.info(f"Deleted task {parsed_id}")
    return {"message": DELETED}
