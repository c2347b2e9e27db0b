import logging

import grpc

from userhub.errors import INTERNAL_MESSAGE, DomainError, ErrorKind
from userhub.grpc_api import users_pb2, users_pb2_grpc
from userhub.ports import UserServicePort
from userhub.schemas import CreateUserInput, UpdateUserInput, User, format_rfc3339

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 10

_STATUS_BY_KIND: dict[ErrorKind, grpc.StatusCode] = {
    ErrorKind.NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: grpc.StatusCode.ALREADY_EXISTS,
    ErrorKind.INVALID_INPUT: grpc.StatusCode.INVALID_ARGUMENT,
    ErrorKind.INTERNAL: grpc.StatusCode.INTERNAL,
}


def to_message(user: User) -> users_pb2.User:
    return users_pb2.User(
        id=user.id,
        email=user.email,
        name=user.name,
        created_at=format_rfc3339(user.created_at),
        updated_at=format_rfc3339(user.updated_at),
    )


def status_for(exc: Exception) -> tuple[grpc.StatusCode, str]:
    """Map an exception to the (code, details) pair sent to the client."""
    if isinstance(exc, DomainError):
        code = _STATUS_BY_KIND.get(exc.kind, grpc.StatusCode.INTERNAL)
        if code is not grpc.StatusCode.INTERNAL:
            return code, exc.message
    return grpc.StatusCode.INTERNAL, INTERNAL_MESSAGE


class UserServiceServicer(users_pb2_grpc.UserServiceServicer):
    """Translates ``users.v1.UserService`` RPCs into user service calls."""

    def __init__(self, service: UserServicePort) -> None:
        self._service = service

    async def _call(self, context: grpc.aio.ServicerContext, rpc: str, operation):
        try:
            return await operation
        except DomainError as exc:
            if exc.kind is ErrorKind.INTERNAL:
                logger.error("%s failed: %s", rpc, exc)
            code, details = status_for(exc)
        except Exception:
            logger.exception("%s failed with an unexpected error", rpc)
            code, details = grpc.StatusCode.INTERNAL, INTERNAL_MESSAGE
        await context.abort(code, details)

    async def CreateUser(self, request, context):
        data = CreateUserInput(email=request.email, name=request.name)
        user = await self._call(context, "CreateUser", self._service.create_user(data))
        return users_pb2.UserResponse(user=to_message(user))

    async def GetUser(self, request, context):
        user = await self._call(context, "GetUser", self._service.get_user(request.id))
        return users_pb2.UserResponse(user=to_message(user))

    async def ListUsers(self, request, context):
        limit = request.limit or DEFAULT_LIST_LIMIT
        users = await self._call(
            context, "ListUsers", self._service.list_users(limit, request.offset)
        )
        return users_pb2.ListUsersResponse(users=[to_message(u) for u in users])

    async def UpdateUser(self, request, context):
        data = UpdateUserInput(
            email=request.email if request.HasField("email") else None,
            name=request.name if request.HasField("name") else None,
        )
        user = await self._call(context, "UpdateUser", self._service.update_user(request.id, data))
        return users_pb2.UserResponse(user=to_message(user))

    async def DeleteUser(self, request, context):
        await self._call(context, "DeleteUser", self._service.delete_user(request.id))
        return users_pb2.DeleteUserResponse(success=True)
