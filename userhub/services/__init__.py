# Services package.
#
#   user_service: use cases for the User aggregate (create / get / list /
#                 update / delete) over the repository and cache ports.
#
# Services depend only on ports, never on SQLAlchemy or Redis directly, so
# the protocol adapters and the tests can wire any implementation in.
