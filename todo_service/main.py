import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_service.shared.config import settings
from todo_service.shared.http import error_body
from todo_service.shared.logging_setup import setup_logging
from todo_service.todos.api import create_router, parse_todo_id
from todo_service.todos.repository import TodoRepository

log = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Todos", "description": "List, create, edit and toggle todo items"},
    {"name": "Health", "description": "Service health"},
]

def _validation_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in exc.errors()
    ]

def create_app(repo: TodoRepository | None = None) -> FastAPI:
    repo = repo if repo is not None else TodoRepository()

    app = FastAPI(
        title="Todo Service",
        version="0.1.0",
        description="In-memory todo list over HTTP/JSON.",
        openapi_tags=TAGS_METADATA,
    )

    # FastAPI answers 422 by default; this service reports bad input as 400
    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        # FastAPI decodes the body before resolving dependencies; a bad id still wins
        raw_id = request.path_params.get("todo_id")
        if raw_id is not None:
            _, problem = parse_todo_id(raw_id)
            if problem:
                log.info("%s %s rejected: %s", request.method, request.url.path, problem)
                return JSONResponse(status_code=400, content={"detail": error_body(problem, "invalid_input", {"id": raw_id})})
        details = _validation_errors(exc)
        message = details[0]["msg"].removeprefix("Value error, ") if details else "Invalid request"
        log.info("%s %s rejected: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"detail": error_body(message, "invalid_input", details)})

    # ---- DEV-ONLY error handler (surfaces the real error text) ----
    if settings.ENV == "dev":
        @app.exception_handler(Exception)
        async def _dev_ex_handler(request: Request, exc: Exception):
            log.exception("unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.get("/healthz", tags=["Health"])
    def healthz():
        return {"ok": True}

    app.include_router(create_router(repo))
    return app

app = create_app()

def run() -> None:
    import uvicorn

    setup_logging()
    log.info("starting todo service on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.ENV)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)

if __name__ == "__main__":
    run()
