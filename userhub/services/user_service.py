"""
User service: business rules for the User aggregate.

Design notes
------------
- The service is stateless.  It holds references to a repository and a
  cache (both process-wide, owned by the entry point) and nothing else, so
  concurrent requests need no locking.
- Port errors are never swallowed.  They propagate unchanged; the only
  translation is an absent user (``None``) becoming ``UserNotFoundError``.
- Email uniqueness is check-then-create and not transactional.  Two
  concurrent creates with the same email can both pass the check; the
  unique index then rejects the second one, which reaches the caller as
  ``InternalError`` rather than ``UserAlreadyExistsError``.
- The cache is wired in but no use case reads or writes it yet.
"""
import logging
import uuid

from userhub.errors import InvalidInputError, UserAlreadyExistsError, UserNotFoundError
from userhub.ports import CacheRepository, UserRepository, UserServicePort
from userhub.schemas import CreateUserInput, UpdateUserInput, User, utcnow

logger = logging.getLogger(__name__)


class UserService(UserServicePort):
    def __init__(self, repository: UserRepository, cache: CacheRepository) -> None:
        self._repository = repository
        self._cache = cache

    async def _require_user(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    async def create_user(self, data: CreateUserInput) -> User:
        """
        Create a user after validating the input and checking that the email
        is not taken.

        Raises ``InvalidInputError`` when email or name is empty (the
        repository is not touched) and ``UserAlreadyExistsError`` when a user
        with the same email exists (nothing is written).
        """
        if not data.email or not data.name:
            raise InvalidInputError()

        if await self._repository.get_by_email(data.email) is not None:
            raise UserAlreadyExistsError()

        now = utcnow()
        user = User(
            id=str(uuid.uuid4()),
            email=data.email,
            name=data.name,
            created_at=now,
            updated_at=now,
        )
        await self._repository.create(user)
        logger.info("Created user id=%s", user.id)
        return user

    async def get_user(self, user_id: str) -> User:
        return await self._require_user(user_id)

    async def list_users(self, limit: int, offset: int) -> list[User]:
        return await self._repository.list(limit, offset)

    async def update_user(self, user_id: str, data: UpdateUserInput) -> User:
        """
        Apply a partial update.  Existence is confirmed first; the repository
        then re-reads the row itself to merge the fields left unset.
        """
        await self._require_user(user_id)

        user = await self._repository.update(user_id, data)
        if user is None:
            raise UserNotFoundError()
        logger.info("Updated user id=%s fields=%s", user_id, sorted(data.changes()))
        return user

    async def delete_user(self, user_id: str) -> None:
        await self._require_user(user_id)

        await self._repository.delete(user_id)
        logger.info("Deleted user id=%s", user_id)
