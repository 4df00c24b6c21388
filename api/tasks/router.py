"""
Task API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Store, get_store
from core.responses import SuccessResponse, acknowledge

from . import repository, schemas

router = APIRouter(prefix="/api/tasks")


@router.get("", response_model=list[schemas.TaskResponse])
async def list_tasks(store: Store = Depends(get_store)) -> list[dict]:
    """
    All tasks, newest first.
    """
    return await repository.list_tasks(store)


@router.post("", response_model=schemas.CreatedTaskResponse)
async def create_task(
    request: schemas.CreateTaskRequest,
    store: Store = Depends(get_store),
) -> schemas.CreatedTaskResponse:
    row = await repository.create_task(store, text=request.text, user_id=request.user_id)
    return schemas.CreatedTaskResponse(
        id=int(row["id"]),
        text=request.text,
        completed=bool(row.get("completed", False)),
    )


@router.put("/{task_id}", response_model=SuccessResponse)
async def update_task(
    task_id: int,
    request: schemas.UpdateTaskRequest,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    affected = await repository.set_completed(store, task_id, completed=request.completed)
    return acknowledge(affected, resource="task", resource_id=task_id)


@router.delete("/{task_id}", response_model=SuccessResponse)
async def delete_task(task_id: int, store: Store = Depends(get_store)) -> SuccessResponse:
    affected = await repository.delete_task(store, task_id)
    return acknowledge(affected, resource="task", resource_id=task_id)
