"""
User service tests.

The first half drives ``UserService`` with ``AsyncMock`` ports to pin down
which repository calls each use case makes (and which it must not make).
The second half runs it against the SQLite-backed repository.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from userhub.errors import (
    ErrorKind,
    InternalError,
    InvalidInputError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from userhub.ports import CacheRepository, UserRepository
from userhub.schemas import CreateUserInput, UpdateUserInput, User
from userhub.services.user_service import UserService


def _user(user_id: str = "u-1", email: str = "a@x.com", name: str = "A") -> User:
    ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return User(id=user_id, email=email, name=name, created_at=ts, updated_at=ts)


@pytest.fixture
def mock_repo():
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_id.return_value = None
    repo.get_by_email.return_value = None
    return repo


@pytest.fixture
def mock_cache():
    return AsyncMock(spec=CacheRepository)


@pytest.fixture
def service(mock_repo, mock_cache) -> UserService:
    return UserService(mock_repo, mock_cache)


# ---------------------------------------------------------------------------
# create_user
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_user_assigns_id_and_equal_timestamps(service, mock_repo):
    user = await service.create_user(CreateUserInput(email="a@x.com", name="A"))

    assert user.id
    assert user.email == "a@x.com"
    assert user.name == "A"
    assert user.created_at == user.updated_at
    assert user.created_at.tzinfo is not None
    mock_repo.get_by_email.assert_awaited_once_with("a@x.com")
    mock_repo.create.assert_awaited_once_with(user)


@pytest.mark.asyncio
async def test_create_user_ids_are_unique(service):
    first = await service.create_user(CreateUserInput(email="a@x.com", name="A"))
    second = await service.create_user(CreateUserInput(email="b@x.com", name="B"))
    assert first.id != second.id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, name",
    [("", "A"), ("a@x.com", ""), ("", "")],
)
async def test_create_user_rejects_empty_fields(service, mock_repo, email, name):
    with pytest.raises(InvalidInputError) as exc_info:
        await service.create_user(CreateUserInput(email=email, name=name))

    assert exc_info.value.kind is ErrorKind.INVALID_INPUT
    mock_repo.get_by_email.assert_not_awaited()
    mock_repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_duplicate_email_performs_no_write(service, mock_repo):
    mock_repo.get_by_email.return_value = _user()

    with pytest.raises(UserAlreadyExistsError):
        await service.create_user(CreateUserInput(email="a@x.com", name="Other"))

    mock_repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_propagates_lookup_failure(service, mock_repo):
    """A failing uniqueness check is an error, not a green light to insert."""
    mock_repo.get_by_email.side_effect = InternalError("connection reset")

    with pytest.raises(InternalError):
        await service.create_user(CreateUserInput(email="a@x.com", name="A"))

    mock_repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_propagates_create_failure(service, mock_repo):
    mock_repo.create.side_effect = InternalError("unique violation")

    with pytest.raises(InternalError):
        await service.create_user(CreateUserInput(email="a@x.com", name="A"))


# ---------------------------------------------------------------------------
# get_user / list_users
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_user_missing_raises_not_found(service):
    with pytest.raises(UserNotFoundError) as exc_info:
        await service.get_user("missing")
    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert str(exc_info.value) == "user not found"


@pytest.mark.asyncio
async def test_get_user_accepts_repository_raising_not_found(service, mock_repo):
    mock_repo.get_by_id.side_effect = UserNotFoundError()
    with pytest.raises(UserNotFoundError):
        await service.get_user("missing")


@pytest.mark.asyncio
async def test_get_user_returns_stored_user_unchanged(service, mock_repo):
    stored = _user()
    mock_repo.get_by_id.return_value = stored
    assert await service.get_user("u-1") == stored


@pytest.mark.asyncio
async def test_list_users_passes_bounds_through(service, mock_repo):
    mock_repo.list.return_value = []
    assert await service.list_users(-1, -5) == []
    mock_repo.list.assert_awaited_once_with(-1, -5)


# ---------------------------------------------------------------------------
# update_user / delete_user
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_update_user_missing_skips_update(service, mock_repo):
    with pytest.raises(UserNotFoundError):
        await service.update_user("missing", UpdateUserInput(name="B"))
    mock_repo.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_user_row_vanished_raises_not_found(service, mock_repo):
    mock_repo.get_by_id.return_value = _user()
    mock_repo.update.return_value = None

    with pytest.raises(UserNotFoundError):
        await service.update_user("u-1", UpdateUserInput(name="B"))


@pytest.mark.asyncio
async def test_update_user_delegates_merge_to_repository(service, mock_repo):
    mock_repo.get_by_id.return_value = _user()
    mock_repo.update.return_value = _user(name="B")
    data = UpdateUserInput(name="B")

    updated = await service.update_user("u-1", data)

    assert updated.name == "B"
    mock_repo.update.assert_awaited_once_with("u-1", data)


@pytest.mark.asyncio
async def test_delete_user_missing_skips_delete(service, mock_repo):
    with pytest.raises(UserNotFoundError):
        await service.delete_user("missing")
    mock_repo.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_user_existing(service, mock_repo):
    mock_repo.get_by_id.return_value = _user()
    await service.delete_user("u-1")
    mock_repo.delete.assert_awaited_once_with("u-1")


@pytest.mark.asyncio
async def test_cache_is_never_used(service, mock_repo, mock_cache):
    mock_repo.get_by_id.return_value = _user()
    mock_repo.update.return_value = _user(name="B")
    mock_repo.list.return_value = []

    await service.create_user(CreateUserInput(email="c@x.com", name="C"))
    await service.get_user("u-1")
    await service.list_users(10, 0)
    await service.update_user("u-1", UpdateUserInput(name="B"))
    await service.delete_user("u-1")

    assert mock_cache.mock_calls == []


# ---------------------------------------------------------------------------
# Against the SQLite-backed repository
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_then_get_round_trip(user_service):
    created = await user_service.create_user(CreateUserInput(email="rt@x.com", name="RT"))
    fetched = await user_service.get_user(created.id)
    assert fetched == created


@pytest.mark.asyncio
async def test_update_name_only_keeps_email(user_service):
    created = await user_service.create_user(CreateUserInput(email="keep@x.com", name="Old"))

    updated = await user_service.update_user(created.id, UpdateUserInput(name="New"))

    assert updated.email == "keep@x.com"
    assert updated.name == "New"
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    assert await user_service.get_user(created.id) == updated


@pytest.mark.asyncio
async def test_update_email_only_keeps_name(user_service):
    created = await user_service.create_user(CreateUserInput(email="old@x.com", name="Name"))

    updated = await user_service.update_user(created.id, UpdateUserInput(email="new@x.com"))

    assert updated.email == "new@x.com"
    assert updated.name == "Name"


@pytest.mark.asyncio
async def test_user_lifecycle_scenario(user_service):
    user = await user_service.create_user(CreateUserInput(email="a@x.com", name="A"))
    assert user.id
    assert (user.email, user.name) == ("a@x.com", "A")

    with pytest.raises(UserAlreadyExistsError):
        await user_service.create_user(CreateUserInput(email="a@x.com", name="A"))

    updated = await user_service.update_user(user.id, UpdateUserInput(name="B"))
    assert (updated.email, updated.name) == ("a@x.com", "B")

    await user_service.delete_user(user.id)

    with pytest.raises(UserNotFoundError):
        await user_service.get_user(user.id)


@pytest.mark.asyncio
async def test_duplicate_that_slips_past_the_check_is_internal(user_service, repository, monkeypatch):
    """Check-then-create is not atomic; the unique index is the backstop."""
    await user_service.create_user(CreateUserInput(email="race@x.com", name="First"))
    monkeypatch.setattr(repository, "get_by_email", AsyncMock(return_value=None))

    with pytest.raises(InternalError):
        await user_service.create_user(CreateUserInput(email="race@x.com", name="Second"))


@pytest.mark.asyncio
async def test_list_users_paginates(user_service):
    for i in range(3):
        await user_service.create_user(CreateUserInput(email=f"p{i}@x.com", name=f"P{i}"))

    first_page = await user_service.list_users(2, 0)
    second_page = await user_service.list_users(2, 2)

    assert len(first_page) == 2
    assert len(second_page) == 1
    assert {u.id for u in first_page}.isdisjoint({u.id for u in second_page})
