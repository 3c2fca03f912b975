# tests/conftest.py
import os
from datetime import datetime

# keep the app's own engine away from the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from todolist.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from todolist.main import app  # noqa: E402
from todolist.models import Priority, Status, Tag, Todo  # noqa: E402


def seed(db):
    db.add_all([
        Priority(name="High", color="#FF0000"),
        Priority(name="Medium", color="#FFFF00"),
        Priority(name="Low", color="#00FF00"),
    ])
    db.add_all([
        Status(name="Not Started", color="#FFFF00"),
        Status(name="In Progress", color="#0000FF"),
        Status(name="Completed", color="#00FF00"),
    ])
    db.add_all([
        Tag(name="Personal", color="#FF69B4"),
        Tag(name="Work", color="#4682B4"),
        Tag(name="Research", color="#8A2BE2"),
        Tag(name="Development", color="#32CD32"),
        Tag(name="Review", color="#FFD700"),
        Tag(name="Training", color="#D3D3D3"),
    ])
    db.commit()

    tags = {tag.name: tag for tag in db.query(Tag).all()}
    work, research, training = tags["Work"], tags["Research"], tags["Training"]
    personal, development, review = tags["Personal"], tags["Development"], tags["Review"]

    now = datetime.utcnow()
    rows = [
        ("Prepare project proposal", datetime(2024, 8, 31), 1, 2,
         [work, research, training, personal, development, review]),
        ("Team meeting", datetime(2025, 6, 10), 3, 1, [work, research, training, personal, development]),
        ("Code review", datetime(2024, 9, 3), 1, 2, [work, research, training, personal]),
        ("Update documentation", datetime(2024, 9, 20), 1, 1, [work, research, training]),
        ("Client presentation", datetime(2024, 8, 27), 3, 1, [work, research]),
        ("Research new technologies", datetime(2024, 7, 31), 2, 3, [work]),
        ("Training session", datetime(2024, 10, 3), 2, 3, []),
    ]
    for name, due_date, priority_id, status_id, todo_tags in rows:
        db.add(Todo(
            name=name,
            description=f"{name} description",
            due_date=due_date,
            priority_id=priority_id,
            status_id=status_id,
            created_at=now,
            updated_at=now,
            tags=todo_tags,
        ))
        # flush one at a time so ids follow list order
        db.flush()

    for index in range(1, 4):
        db.add(Todo(name=f"Empty Task {index}", created_at=now, updated_at=now))
        db.flush()

    db.commit()


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)

    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = factory()
    try:
        seed(db)
    finally:
        db.close()

    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()