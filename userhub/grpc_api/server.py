import logging

import grpc

from userhub.grpc_api.servicer import UserServiceServicer
from userhub.grpc_api.users_pb2_grpc import add_UserServiceServicer_to_server
from userhub.ports import UserServicePort

logger = logging.getLogger(__name__)


def create_grpc_server(service: UserServicePort, address: str) -> tuple[grpc.aio.Server, int]:
    """
    Build an (unstarted) ``grpc.aio`` server exposing *service* on *address*.

    Returns the server and the bound port, which differs from the requested
    one when *address* asks for port 0.
    """
    server = grpc.aio.server()
    add_UserServiceServicer_to_server(UserServiceServicer(service), server)
    port = server.add_insecure_port(address)
    logger.debug("gRPC server bound to port %d", port)
    return server, port
