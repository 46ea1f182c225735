from pydantic import BaseModel, ConfigDict, field_validator

class TodoTextIn(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        # trim is only for the check; the text is stored as sent
        if not v.strip():
            raise ValueError("Text cannot be blank")
        return v

class TodoCreateIn(TodoTextIn):
    pass

class TodoUpdateIn(TodoTextIn):
    pass

class TodoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    text: str
    done: bool
