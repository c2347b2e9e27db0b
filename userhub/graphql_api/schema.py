"""
GraphQL surface for the user service (strawberry).

Resolvers only translate: they build the domain inputs, call the
``UserServicePort`` found in the request context under ``user_service`` and
convert the result.  Domain errors are reported as ``GraphQLError`` with the
error kind in ``extensions.code``; anything else is logged and reported as
``INTERNAL`` with a fixed message.
"""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Optional, TypeVar

import strawberry
from fastapi import Request
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from userhub import schemas
from userhub.errors import INTERNAL_MESSAGE, DomainError, ErrorKind
from userhub.ports import UserServicePort

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 10
DEFAULT_LIST_OFFSET = 0

T = TypeVar("T")


async def _resolve(operation: Awaitable[T]) -> T:
    try:
        return await operation
    except DomainError as exc:
        if exc.kind is ErrorKind.INTERNAL:
            logger.error("GraphQL operation failed: %s", exc)
            raise GraphQLError(INTERNAL_MESSAGE, extensions={"code": ErrorKind.INTERNAL.value}) from None
        raise GraphQLError(exc.message, extensions={"code": exc.kind.value}) from None
    except Exception:
        logger.exception("GraphQL operation failed with an unexpected error")
        raise GraphQLError(INTERNAL_MESSAGE, extensions={"code": ErrorKind.INTERNAL.value}) from None


def _service(info: Info) -> UserServicePort:
    return info.context["user_service"]


# --- Types ---

@strawberry.type
class User:
    id: strawberry.ID
    email: str
    name: str
    created_at: str = strawberry.field(description="RFC3339 timestamp.")
    updated_at: str = strawberry.field(description="RFC3339 timestamp.")

    @classmethod
    def from_domain(cls, user: schemas.User) -> "User":
        return cls(
            id=strawberry.ID(user.id),
            email=user.email,
            name=user.name,
            created_at=schemas.format_rfc3339(user.created_at),
            updated_at=schemas.format_rfc3339(user.updated_at),
        )


@strawberry.input
class CreateUserInput:
    email: str
    name: str


@strawberry.input(description="Omitted or null fields keep their stored value.")
class UpdateUserInput:
    email: Optional[str] = None
    name: Optional[str] = None


# --- Operations ---

@strawberry.type
class Query:
    @strawberry.field
    async def user(self, info: Info, id: strawberry.ID) -> User:
        user = await _resolve(_service(info).get_user(str(id)))
        return User.from_domain(user)

    @strawberry.field
    async def users(
        self,
        info: Info,
        limit: Optional[int] = DEFAULT_LIST_LIMIT,
        offset: Optional[int] = DEFAULT_LIST_OFFSET,
    ) -> list[User]:
        # An explicit null falls back to the default.
        limit = DEFAULT_LIST_LIMIT if limit is None else limit
        offset = DEFAULT_LIST_OFFSET if offset is None else offset
        users = await _resolve(_service(info).list_users(limit, offset))
        return [User.from_domain(u) for u in users]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_user(self, info: Info, input: CreateUserInput) -> User:
        data = schemas.CreateUserInput(email=input.email, name=input.name)
        user = await _resolve(_service(info).create_user(data))
        return User.from_domain(user)

    @strawberry.mutation
    async def update_user(self, info: Info, id: strawberry.ID, input: UpdateUserInput) -> User:
        data = schemas.UpdateUserInput(email=input.email, name=input.name)
        user = await _resolve(_service(info).update_user(str(id), data))
        return User.from_domain(user)

    @strawberry.mutation
    async def delete_user(self, info: Info, id: strawberry.ID) -> bool:
        await _resolve(_service(info).delete_user(str(id)))
        return True


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(request: Request) -> dict[str, Any]:
    return {"user_service": request.app.state.user_service}


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_context)
