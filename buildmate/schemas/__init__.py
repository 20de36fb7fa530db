# buildmate/schemas/__init__.py

from .user import Credentials, MessageResponse, TokenResponse, TokenPayload
from .resume import ResumeSave, ResumeResponse
