
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from todoapp.auth.deps import get_db, get_current_user
from todoapp.models.todo import Todo
from todoapp.resources.service import ResourceService
from todoapp.schemas.records import TodoCreate, TodoUpdate, TodoRecord
from todoapp.schemas.user import UserPublic
from todoapp.stores.sql import SqlRecordStore

router = APIRouter(prefix="/todos", tags=["todos"])

def get_todo_service(db: Session = Depends(get_db)) -> ResourceService[TodoRecord]:
    return ResourceService(SqlRecordStore(db, Todo, TodoRecord), TodoRecord, "todo")

@router.get("", response_model=list[TodoRecord])
def list_todos(todos: ResourceService = Depends(get_todo_service), user: UserPublic = Depends(get_current_user)):
    return todos.list(user)

@router.post("", response_model=TodoRecord)
def create_todo(body: TodoCreate, todos: ResourceService = Depends(get_todo_service), user: UserPublic = Depends(get_current_user)):
    return todos.create(user, body.model_dump())

@router.get("/{todo_id}", response_model=TodoRecord)
def get_todo(todo_id: str, todos: ResourceService = Depends(get_todo_service), user: UserPublic = Depends(get_current_user)):
    return todos.get(user, todo_id)

@router.patch("/{todo_id}/toggle", response_model=TodoRecord)
def toggle_todo(todo_id: str, todos: ResourceService = Depends(get_todo_service), user: UserPublic = Depends(get_current_user)):
    return todos.toggle_complete(user, todo_id)

@router.patch("/{todo_id}", response_model=TodoRecord)
def update_todo(todo_id: str, body: TodoUpdate, todos: ResourceService = Depends(get_todo_service), user: UserPublic = Depends(get_current_user)):
    return todos.update(user, todo_id, body.model_dump())

@router.delete("/{todo_id}")
def delete_todo(todo_id: str, todos: ResourceService = Depends(get_todo_service), user: UserPublic = Depends(get_current_user)):
    todos.delete(user, todo_id)
    return {"success": True}
