# buildmate/services/crud_resumes.py

from typing import Optional

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from buildmate.db.models import Resume
from buildmate.schemas.resume import ResumeSave

# Dialects with INSERT ... ON CONFLICT support
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def get_resume_for_user(db: Session, user_id: int) -> Optional[Resume]:
    """Fetches the resume owned by the given user, if any."""
    return db.query(Resume).filter(Resume.user_id == user_id).first()


def upsert_resume(db: Session, user_id: int, data: ResumeSave) -> None:
    """
    Creates or fully replaces the user's resume in a single statement.

    Fields the client left out are written as their defaults, so a save never
    merges with what was stored before.
    """
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise RuntimeError(f"Resume upsert needs INSERT ... ON CONFLICT, which {dialect} lacks")

    values = {
        "full_name": data.full_name,
        "title": data.title,
        "summary": data.summary,
        "education": data.education,
        "experience": data.experience,
        "skills": data.skills,
        "photo_data": data.photo_data,
        "updated_at": func.now(),
    }

    stmt = insert(Resume).values(user_id=user_id, **values)
    stmt = stmt.on_conflict_do_update(index_elements=["user_id"], set_=values)

    db.execute(stmt)
    db.commit()
