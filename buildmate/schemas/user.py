# buildmate/schemas/user.py

from pydantic import BaseModel


# Both fields are optional at the schema level so that a missing field
# produces the handler's own 400 message instead of a generic validation error.
class Credentials(BaseModel):
    email: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    message: str


# Schema for the login endpoint response
class TokenResponse(BaseModel):
    token: str


# Identity carried inside the bearer token
class TokenPayload(BaseModel):
    id: int
    email: str
