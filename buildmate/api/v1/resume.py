# buildmate/api/v1/resume.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from buildmate.core.errors import InternalError
from buildmate.db.database import get_db
from buildmate.schemas.resume import ResumeResponse, ResumeSave
from buildmate.schemas.user import MessageResponse, TokenPayload
from buildmate.security.dependencies import get_current_identity
from buildmate.services import crud_resumes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resume", tags=["resume"])


@router.get("")
def read_resume(
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """
    Return the caller's resume, or {} when nothing has been saved yet.
    """
    try:
        resume = crud_resumes.get_resume_for_user(db, identity.id)
    except SQLAlchemyError:
        logger.exception("Resume fetch failed for user %s", identity.id)
        raise InternalError()

    if resume is None:
        return {}
    return ResumeResponse.model_validate(resume)


@router.post("", response_model=MessageResponse)
def save_resume(
    payload: ResumeSave | None = None,
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """
    Create or fully replace the caller's resume.
    """
    data = payload or ResumeSave()

    try:
        crud_resumes.upsert_resume(db, identity.id, data)
    except SQLAlchemyError:
        # Details stay in the server log
        logger.exception("Resume save failed for user %s", identity.id)
        raise InternalError()

    return MessageResponse(message="Resume saved")
