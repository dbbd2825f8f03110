# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles signup, login and profile updates.
# Separates GraphQL concerns from database/business logic.
# =============================================================================

import logging

from beanie import PydanticObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

from app.exceptions import PasswordIncorrectError, UserExistsError, UserNotFoundError
from core.models.user import User, UserCreate
from lib.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


def to_object_id(value: str | PydanticObjectId | None) -> PydanticObjectId | None:
    """Parse an id coming from a client; None when it is not an ObjectId."""
    if value is None:
        return None
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        return None


class UserService:
    """
    Service for user management operations.

    Provides a clean interface between resolvers and the database.
    """

    @staticmethod
    async def get_user(user_id: str | PydanticObjectId | None) -> User | None:
        """Get a user by ID, or None if there is no such user."""
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        return await User.get(object_id)

    @staticmethod
    async def get_by_email(email: str) -> User | None:
        """Get a user by email address."""
        return await User.find_one(User.email == email)

    @staticmethod
    async def create_user(data: UserCreate) -> User:
        """
        Create a new user with a hashed password.

        Raises:
            UserExistsError: If the email is already registered
        """
        if await UserService.get_by_email(data.email) is not None:
            raise UserExistsError(data.email)

        user = User(
            email=data.email,
            name=data.name,
            password=hash_password(data.password),
        )

        try:
            await user.insert()
        except DuplicateKeyError:
            # Lost a race with a concurrent signup for the same email
            raise UserExistsError(data.email)

        logger.info(f"Created user: {user.id}")
        return user

    @staticmethod
    async def authenticate(email: str, password: str) -> User:
        """
        Check a user's credentials.

        Raises:
            UserNotFoundError: If no user has this email
            PasswordIncorrectError: If the password does not match
        """
        user = await UserService.get_by_email(email)
        if user is None:
            raise UserNotFoundError()

        if not verify_password(user.password, password):
            logger.info(f"Rejected password for user: {user.id}")
            raise PasswordIncorrectError()

        return user

    @staticmethod
    async def update_status(user_id: str, status: str) -> User:
        """
        Set a user's status text.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        user = await UserService.get_user(user_id)
        if user is None:
            raise UserNotFoundError()

        user.status = status
        await user.save()
        return user
