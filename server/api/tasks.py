# server/api/tasks.py

from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from api.auth import get_current_user
from core.repository import TaskRepository
from core.schemas import TaskOut, TaskRequest, TaskStatusUpdate, ok
from core.security import CurrentUser
from core.services import TaskService
from database import get_db


# -------------------------------
# Router & Dependencies
# -------------------------------

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(TaskRepository(db))


# -------------------------------
# Task Endpoints
# -------------------------------

@router.get("")
def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    """
    Returns all tasks of the caller, newest first.
    """
    result = tasks.list_tasks(current_user.user_id)
    return ok([TaskOut.model_validate(t) for t in result])


# registered before /{task_id} so "stats" is not taken for an id
@router.get("/stats")
def get_task_stats(
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    """
    Returns the number of the caller's tasks per status, plus the total.
    """
    return ok(tasks.get_stats(current_user.user_id))


@router.get("/{task_id}")
def get_task(
    task_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    task = tasks.get_task(str(task_id), current_user.user_id)
    return ok(TaskOut.model_validate(task))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    req: TaskRequest,
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    task = tasks.create_task(req, current_user.user_id)
    return ok(TaskOut.model_validate(task), "Task created successfully", status_code=status.HTTP_201_CREATED)


@router.put("/{task_id}")
def update_task(
    task_id: UUID,
    req: TaskRequest,
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    """
    Replaces title and description. Status changes only if the body carries one.
    """
    task = tasks.update_task(str(task_id), req, current_user.user_id)
    return ok(TaskOut.model_validate(task), "Task updated successfully")


@router.patch("/{task_id}/status")
def update_task_status(
    task_id: UUID,
    req: TaskStatusUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    task = tasks.update_status(str(task_id), req.status, current_user.user_id)
    return ok(TaskOut.model_validate(task), "Task status updated successfully")


@router.delete("/{task_id}")
def delete_task(
    task_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    tasks.delete_task(str(task_id), current_user.user_id)
    return ok(message="Task deleted successfully")
