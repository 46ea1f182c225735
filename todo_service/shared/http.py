from fastapi import HTTPException
from typing import Any, Optional

def error_body(message: str, code: str = "bad_request", details: Optional[Any] = None) -> dict:
    return {"ok": False, "error": {"code": code, "message": message, "details": details}}

def err(message: str, code: str = "bad_request", status: int = 400, details: Optional[Any] = None):
    # always raises; handlers use it to short-circuit
    raise HTTPException(status_code=status, detail=error_body(message, code, details))
