"""gRPC transport for the user service.

- ``protos/users.proto``: the ``users.v1`` contract.
- ``users_pb2.py``, ``users_pb2_grpc.py``: generated from the contract with
  ``python -m grpc_tools.protoc -Iuserhub/grpc_api=userhub/grpc_api/protos
  --python_out=. --grpc_python_out=. userhub/grpc_api/users.proto``
  (run from the repository root). Do not edit them by hand.
- ``servicer``: thin adapter mapping RPCs onto ``UserServicePort``.
- ``server``: ``grpc.aio`` bootstrap.
"""

from userhub.grpc_api import users_pb2, users_pb2_grpc

__all__ = ["users_pb2", "users_pb2_grpc"]
