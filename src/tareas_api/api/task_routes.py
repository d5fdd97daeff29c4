# src/tareas_api/api/task_routes.py

from __future__ import annotations

import logging
import re

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.errors import NotFoundError, ValidationError
from ..core.state import AppState
from ..storage.models import Task, next_id
from .deps import Session, get_state, require_session
from .schemas import TaskIn

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Tarea no encontrada"
TASK_FIELDS_REQUIRED = "Título y descripción son requeridos"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

router = APIRouter(prefix="/tareas", tags=["tareas"], dependencies=[Depends(require_session)])


def parse_task_id(raw: str) -> int | None:
    """Leading integer of a path segment ("12", "12abc" -> 12), None if there is none."""
    m = _LEADING_INT.match(raw)
    return int(m.group(1)) if m else None


def _require_fields(payload: TaskIn | None) -> tuple[str, str]:
    titulo = payload.titulo if payload else None
    descripcion = payload.descripcion if payload else None
    if not titulo or not descripcion:
        raise ValidationError(TASK_FIELDS_REQUIRED)
    return titulo, descripcion


@router.get("")
def list_tasks(state: AppState = Depends(get_state)) -> list[dict]:
    return [t.to_dict() for t in state.task_store.list_tasks()]


@router.get("/{task_id}")
def get_task(task_id: str, state: AppState = Depends(get_state)) -> dict:
    tid = parse_task_id(task_id)
    for task in state.task_store.list_tasks():
        if task.id == tid:
            return task.to_dict()
    raise NotFoundError(TASK_NOT_FOUND)


@router.post("", status_code=201)
def create_task(
    payload: TaskIn | None = None,
    state: AppState = Depends(get_state),
    session: Session = Depends(require_session),
) -> JSONResponse:
    titulo, descripcion = _require_fields(payload)

    tasks = state.task_store.list_tasks()
    task = Task(id=next_id(tasks), titulo=titulo, descripcion=descripcion)
    tasks.append(task)
    state.task_store.save_tasks(tasks)

    logger.info("Task created id=%s by user=%s", task.id, session.username)
    return JSONResponse(status_code=201, content=task.to_dict())


@router.put("/{task_id}")
def update_task(
    task_id: str,
    payload: TaskIn | None = None,
    state: AppState = Depends(get_state),
) -> dict:
    tid = parse_task_id(task_id)
    tasks = state.task_store.list_tasks()
    idx = next((i for i, t in enumerate(tasks) if t.id == tid), None)
    if idx is None:
        raise NotFoundError(TASK_NOT_FOUND)

    titulo, descripcion = _require_fields(payload)
    tasks[idx] = Task(id=tasks[idx].id, titulo=titulo, descripcion=descripcion)
    state.task_store.save_tasks(tasks)

    logger.info("Task updated id=%s", tasks[idx].id)
    return tasks[idx].to_dict()


@router.delete("/{task_id}")
def delete_task(task_id: str, state: AppState = Depends(get_state)) -> dict:
    tid = parse_task_id(task_id)
    tasks = state.task_store.list_tasks()
    remaining = [t for t in tasks if t.id != tid]
    if len(remaining) == len(tasks):
        raise NotFoundError(TASK_NOT_FOUND)

    state.task_store.save_tasks(remaining)
    logger.info("Task deleted id=%s", tid)
    return {"mensaje": "Tarea eliminada correctamente"}
