# todo_service/todos/models.py
from pydantic import BaseModel, ConfigDict, Field

class Todo(BaseModel):
    """Immutable todo value. Changes go through model_copy(update=...)."""
    model_config = ConfigDict(frozen=True)
    id: int = Field(gt=0)
    text: str = Field(min_length=1)
    done: bool = False
