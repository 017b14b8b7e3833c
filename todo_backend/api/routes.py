"""API routes for todo management."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from todo_backend.api.dependencies import get_todo_service
from todo_backend.models.todo import Todo, TodoCreate, TodoCreated, TodoUpdate
from todo_backend.services.todo_service import TodoService
from todo_backend.settings import Settings, get_settings

# Handlers are coroutines that never await, so each store call runs to
# completion on the event loop before the next request touches the store.
router = APIRouter()

TODO_NOT_FOUND = "Todo not found"


@router.get("/todos", response_model=List[Todo])
async def get_todos(
    after_id: Optional[int] = Query(
        None, ge=0, description="Return only todos with an id greater than this"
    ),
    limit: Optional[int] = Query(
        None, ge=0, description="Maximum number of items to return"
    ),
    service: TodoService = Depends(get_todo_service),
    settings: Settings = Depends(get_settings),
) -> List[Todo]:
    """Get one page of todos ordered by id."""
    if limit is None:
        limit = settings.default_page_size
    limit = min(limit, settings.max_page_size)
    return service.get_todos(after_id=after_id, limit=limit)


@router.get("/todos/{todo_id}", response_model=Todo)
async def get_todo(
    todo_id: int = Path(..., ge=0),
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Get a specific todo item by ID."""
    todo = service.get_todo_by_id(todo_id)
    if not todo:
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    return todo


@router.post("/todos", response_model=TodoCreated, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo_data: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> TodoCreated:
    """Create a new todo item."""
    return TodoCreated(id=service.create_todo(todo_data.text))


@router.put("/todos/{todo_id}", response_model=Todo)
async def update_todo(
    todo_data: TodoUpdate,
    todo_id: int = Path(..., ge=0),
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Replace the text of an existing todo item."""
    todo = service.update_todo(todo_id, todo_data.text)
    if not todo:
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    return todo


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: int = Path(..., ge=0),
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Soft-delete a todo item."""
    if not service.delete_todo(todo_id):
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
