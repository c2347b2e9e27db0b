"""userhub: a user CRUD service exposed over gRPC and GraphQL."""

__version__ = "1.0.0"
