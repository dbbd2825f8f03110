# =============================================================================
# core/models/user.py - User Document and Input Schemas
# =============================================================================
# - User: the `users` collection
# - UserCreate: validated input of the createUser mutation
# =============================================================================

from beanie import Indexed
from pydantic import BaseModel, EmailStr, Field, ValidationError

from .base import BaseDocument

DEFAULT_STATUS = "I am new!"


class User(BaseDocument):
    """
    A registered user.

    `password` always holds an argon2 hash, never the plain password.
    """

    email: Indexed(str, unique=True)
    name: str
    password: str
    status: str = DEFAULT_STATUS

    class Settings:
        name = "users"


class UserCreate(BaseModel):
    """
    Input for creating a user.

    Example:
        {
            "email": "test@test.com",
            "name": "Max",
            "password": "tester"
        }
    """

    email: EmailStr
    name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=5)


# Field name -> message reported to the client when the field is invalid
USER_INPUT_MESSAGES = {
    "email": "E-Mail is invalid.",
    "name": "Name is invalid.",
    "password": "Password too short!",
}


def user_input_errors(exc: ValidationError) -> list[str]:
    """
    Translate a UserCreate ValidationError into client messages.

    One message per invalid field, in field declaration order.
    """
    invalid = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
    return [message for field, message in USER_INPUT_MESSAGES.items() if field in invalid]
