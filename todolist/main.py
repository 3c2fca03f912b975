# todolist/main.py

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

# ---------------- ENV ----------------
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"))

# ---------------- LOGGING ----------------
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("todolist")

app = FastAPI(title="Todo List API")

# ---------------- CORS ----------------
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

frontend_origin = os.getenv("FRONTEND_ORIGIN")
if frontend_origin:
    origins.append(frontend_origin)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------- ERRORS ----------------
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # invalid payloads are a bad request, like the referential checks
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(SQLAlchemyError)
async def persistence_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("persistence_error", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"detail": "Database error"})


# ---------------- DATABASE INIT ----------------
from todolist.database import Base, engine  # noqa: E402
import todolist.models  # noqa: E402,F401

logger.info("Checking database models...")
Base.metadata.create_all(bind=engine)
logger.info("Database ready.")

# ---------------- ROUTERS ----------------
from todolist.priority.priority_router import router as priority_router  # noqa: E402
from todolist.status.status_router import router as status_router  # noqa: E402
from todolist.tag.tag_router import router as tag_router  # noqa: E402
from todolist.todo.todo_router import router as todo_router  # noqa: E402

app.include_router(priority_router)
app.include_router(status_router)
app.include_router(tag_router)
app.include_router(todo_router)


# ---------------- HEALTH ----------------
@app.get("/health")
def health():
    return {"status": "ok"}
