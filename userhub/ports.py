"""
Ports: the abstract contracts between the user service and the outside.

Every operation is a coroutine; the awaiting task is the call context, so
cancelling it (or wrapping the call in ``asyncio.timeout``) aborts the
in-flight I/O in the adapter.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from userhub.schemas import CreateUserInput, UpdateUserInput, User


class UserRepository(ABC):
    """Durable user storage.

    Storage faults, including constraint violations, are raised as
    ``InternalError``.  A missing user is reported as ``None`` (an adapter
    may raise ``UserNotFoundError`` instead; the service accepts both).
    """

    @abstractmethod
    async def create(self, user: User) -> None: ...

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    async def list(self, limit: int, offset: int) -> list[User]:
        """Return one page of users.  Callers must not rely on the sort order."""

    @abstractmethod
    async def update(self, user_id: str, data: UpdateUserInput) -> User | None:
        """Overwrite the fields present in *data*, keeping the stored values of the rest."""

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Remove the user; deleting an unknown id is not an error."""


class CacheRepository(ABC):
    """Ephemeral key-value storage.

    *ttl* is in seconds; ``None`` or a value ``<= 0`` means the entry never
    expires.  ``set`` serialises *value* to JSON and ``get`` returns that JSON
    text, or ``None`` on a miss.
    """

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int | None = None) -> None: ...

    @abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abstractmethod
    async def delete(self, key: str) -> None: ...

    @abstractmethod
    async def exists(self, key: str) -> bool: ...


class UserServicePort(ABC):
    """Use cases the protocol adapters are allowed to call."""

    @abstractmethod
    async def create_user(self, data: CreateUserInput) -> User: ...

    @abstractmethod
    async def get_user(self, user_id: str) -> User: ...

    @abstractmethod
    async def list_users(self, limit: int, offset: int) -> list[User]: ...

    @abstractmethod
    async def update_user(self, user_id: str, data: UpdateUserInput) -> User: ...

    @abstractmethod
    async def delete_user(self, user_id: str) -> None: ...
