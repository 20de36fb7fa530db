"""
Tests for the credential and resume stores, run directly against the session.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import inspect

from buildmate.core.errors import ConflictError
from buildmate.db.models import Resume, User
from buildmate.schemas.resume import ResumeSave
from buildmate.services import crud_resumes, crud_users


@pytest.fixture
def user(db_session):
    return crud_users.create_user(db_session, "alice@x.com", "not-a-real-hash")


class TestCredentialStore:

    def test_create_and_find(self, db_session, user):
        found = crud_users.get_user_by_email(db_session, "alice@x.com")

        assert found is not None
        assert found.id == user.id
        assert found.password_hash == "not-a-real-hash"

    def test_lookup_is_exact_match(self, db_session, user):
        assert crud_users.get_user_by_email(db_session, "ALICE@x.com") is None
        assert crud_users.get_user_by_email(db_session, "alice@x.co") is None

    def test_duplicate_insert_raises_conflict(self, db_session, user):
        with pytest.raises(ConflictError):
            crud_users.create_user(db_session, "alice@x.com", "another-hash")

        # Session is usable again after the rollback
        assert crud_users.get_user_by_email(db_session, "alice@x.com").id == user.id


class TestResumeStore:

    def test_missing_resume_is_none(self, db_session, user):
        assert crud_resumes.get_resume_for_user(db_session, user.id) is None

    def test_first_save_inserts(self, db_session, user):
        crud_resumes.upsert_resume(db_session, user.id, ResumeSave(full_name="Alice", skills=["go"]))

        resume = crud_resumes.get_resume_for_user(db_session, user.id)
        assert resume.full_name == "Alice"
        assert resume.skills == ["go"]
        assert resume.updated_at is not None

    def test_second_save_replaces_all_fields(self, db_session, user):
        crud_resumes.upsert_resume(
            db_session,
            user.id,
            ResumeSave(full_name="Alice", education=[{"school": "MIT"}], photo_data="abc"),
        )
        crud_resumes.upsert_resume(db_session, user.id, ResumeSave(title="CTO"))

        resume = crud_resumes.get_resume_for_user(db_session, user.id)
        assert resume.full_name == ""
        assert resume.title == "CTO"
        assert resume.education == []
        assert resume.photo_data is None
        assert db_session.query(Resume).count() == 1


class TestResumeSaveSchema:

    def test_defaults(self):
        data = ResumeSave()

        assert data.full_name == data.title == data.summary == ""
        assert data.education == data.experience == data.skills == []
        assert data.photo_data is None

    def test_non_list_values_become_empty(self):
        data = ResumeSave(education={"a": 1}, experience=42, skills="python, sql")

        assert data.education == []
        assert data.experience == []
        assert data.skills == []

    def test_skill_entries_are_stringified(self):
        assert ResumeSave(skills=["python", 3, 1.5]).skills == ["python", "3", "1.5"]

    def test_null_skill_entries_are_dropped(self):
        assert ResumeSave(skills=["python", None, "sql"]).skills == ["python", "sql"]

    def test_structured_skill_entries_are_dropped(self):
        assert ResumeSave(skills=["python", {"name": "go"}, ["rust"], True]).skills == ["python", "true"]

    def test_scalar_text_fields_are_stored_as_text(self):
        data = ResumeSave(full_name=42, title=3.5, summary=False, photo_data=7)

        assert data.full_name == "42"
        assert data.title == "3.5"
        assert data.summary == "false"
        assert data.photo_data == "7"

    def test_structured_text_fields_reset_to_default(self):
        data = ResumeSave(full_name={"first": "Alice"}, title=["CTO"], photo_data={"url": "x"})

        assert data.full_name == ""
        assert data.title == ""
        assert data.photo_data is None


def test_upsert_on_dialect_without_on_conflict_fails():
    db = MagicMock()
    db.get_bind.return_value.dialect.name = "mysql"

    with pytest.raises(RuntimeError, match="mysql"):
        crud_resumes.upsert_resume(db, 1, ResumeSave())

    db.execute.assert_not_called()


def test_models_are_plain_tables():
    # Stores query by column; neither model loads the other
    assert not inspect(User).relationships
    assert not inspect(Resume).relationships
