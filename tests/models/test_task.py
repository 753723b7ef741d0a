"""Tests for the Task ORM model."""

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from task_manager_api.models.task import Task


class TestTaskModel:
    """Test cases for Task construction, persistence and serialization."""

    def test_defaults_are_applied_on_construction(self):
        before = datetime.now(timezone.utc)

        task = Task(title="Nueva")

        assert isinstance(task.id, uuid.UUID)
        assert task.completed is False
        assert task.description is None
        assert before <= task.created_at <= datetime.now(timezone.utc)

    def test_explicit_values_are_kept(self):
        task_id = uuid.uuid4()
        created_at = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

        task = Task(id=task_id, title="Fija", completed=True, created_at=created_at)

        assert task.id == task_id
        assert task.completed is True
        assert task.created_at == created_at

    def test_each_task_gets_a_unique_id(self):
        assert Task(title="a").id != Task(title="b").id

    def test_persist_and_reload(self, db_session: Session):
        task = Task(title="Guardada", description="Con descripción")
        db_session.add(task)
        db_session.commit()

        db_session.expunge_all()
        stored = db_session.get(Task, task.id)

        assert stored.title == "Guardada"
        assert stored.description == "Con descripción"
        assert stored.completed is False

    def test_title_is_required_by_the_table(self, db_session: Session):
        db_session.add(Task(title=None))

        with pytest.raises(IntegrityError):
            db_session.commit()

        db_session.rollback()

    def test_to_dict_uses_api_field_names(self):
        task = Task(
            id=uuid.UUID("123e4567-e89b-12d3-a456-426614174000"),
            title="Informe",
            description="Trimestral",
            created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        )

        assert task.to_dict() == {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "title": "Informe",
            "description": "Trimestral",
            "completed": False,
            "createdAt": "2024-01-15T10:30:00+00:00",
        }

    def test_to_dict_treats_naive_timestamps_as_utc(self):
        task = Task(title="SQLite", created_at=datetime(2024, 1, 15, 10, 30))

        assert task.to_dict()["createdAt"] == "2024-01-15T10:30:00+00:00"

    def test_repr(self):
        task = Task(title="Repr")

        assert repr(task) == f"<Task(id={task.id}, title='Repr', completed=False)>"
