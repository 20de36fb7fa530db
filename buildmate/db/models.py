# buildmate/db/models.py

from sqlalchemy import (
    Column, Integer, String, Text, DateTime, ForeignKey, JSON, func
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import declarative_base

# Base class for declarative models
Base = declarative_base()

# jsonb / text[] on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")
StringList = JSON().with_variant(ARRAY(Text), "postgresql")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Case-sensitive, compared exactly as submitted
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Resume(Base):
    """
    A single resume document per user.
    Every save replaces all fields, so columns hold their defaults rather than NULL
    whenever the client leaves a field out.
    """
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)

    full_name = Column(Text, nullable=False, default="")
    title = Column(Text, nullable=False, default="")
    summary = Column(Text, nullable=False, default="")

    education = Column(JSONDocument, nullable=False, default=list)
    experience = Column(JSONDocument, nullable=False, default=list)
    skills = Column(StringList, nullable=False, default=list)

    # Embedded image payload (usually a base64 data URL), stored as sent
    photo_data = Column(Text, nullable=True)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
