# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: userhub/grpc_api/users.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x1cuserhub/grpc_api/users.proto\x12\x08users.v1\"W\n\x04User\x12\n\n\x02id\x18\x01 \x01(\t\x12\r\n\x05\x65mail\x18\x02 \x01(\t\x12\x0c\n\x04name\x18\x03 \x01(\t\x12\x12\n\ncreated_at\x18\x04 \x01(\t\x12\x12\n\nupdated_at\x18\x05 \x01(\t\"0\n\x11\x43reateUserRequest\x12\r\n\x05\x65mail\x18\x01 \x01(\t\x12\x0c\n\x04name\x18\x02 \x01(\t\"\x1c\n\x0eGetUserRequest\x12\n\n\x02id\x18\x01 \x01(\t\"1\n\x10ListUsersRequest\x12\r\n\x05limit\x18\x01 \x01(\x05\x12\x0e\n\x06offset\x18\x02 \x01(\x05\"Y\n\x11UpdateUserRequest\x12\n\n\x02id\x18\x01 \x01(\t\x12\x12\n\x05\x65mail\x18\x02 \x01(\tH\x00\x88\x01\x01\x12\x11\n\x04name\x18\x03 \x01(\tH\x01\x88\x01\x01\x42\x08\n\x06_emailB\x07\n\x05_name\"\x1f\n\x11\x44\x65leteUserRequest\x12\n\n\x02id\x18\x01 \x01(\t\",\n\x0cUserResponse\x12\x1c\n\x04user\x18\x01 \x01(\x0b\x32\x0e.users.v1.User\"2\n\x11ListUsersResponse\x12\x1d\n\x05users\x18\x01 \x03(\x0b\x32\x0e.users.v1.User\"%\n\x12\x44\x65leteUserResponse\x12\x0f\n\x07success\x18\x01 \x01(\x08\x32\xdf\x02\n\x0bUserService\x12\x41\n\nCreateUser\x12\x1b.users.v1.CreateUserRequest\x1a\x16.users.v1.UserResponse\x12;\n\x07GetUser\x12\x18.users.v1.GetUserRequest\x1a\x16.users.v1.UserResponse\x12\x44\n\tListUsers\x12\x1a.users.v1.ListUsersRequest\x1a\x1b.users.v1.ListUsersResponse\x12\x41\n\nUpdateUser\x12\x1b.users.v1.UpdateUserRequest\x1a\x16.users.v1.UserResponse\x12G\n\nDeleteUser\x12\x1b.users.v1.DeleteUserRequest\x1a\x1c.users.v1.DeleteUserResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'userhub.grpc_api.users_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _USER._serialized_start=42
  _USER._serialized_end=129
  _CREATEUSERREQUEST._serialized_start=131
  _CREATEUSERREQUEST._serialized_end=179
  _GETUSERREQUEST._serialized_start=181
  _GETUSERREQUEST._serialized_end=209
  _LISTUSERSREQUEST._serialized_start=211
  _LISTUSERSREQUEST._serialized_end=260
  _UPDATEUSERREQUEST._serialized_start=262
  _UPDATEUSERREQUEST._serialized_end=351
  _DELETEUSERREQUEST._serialized_start=353
  _DELETEUSERREQUEST._serialized_end=384
  _USERRESPONSE._serialized_start=386
  _USERRESPONSE._serialized_end=430
  _LISTUSERSRESPONSE._serialized_start=432
  _LISTUSERSRESPONSE._serialized_end=482
  _DELETEUSERRESPONSE._serialized_start=484
  _DELETEUSERRESPONSE._serialized_end=521
  _USERSERVICE._serialized_start=524
  _USERSERVICE._serialized_end=875
# @@protoc_insertion_point(module_scope)
