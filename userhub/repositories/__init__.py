from userhub.repositories.user_repository import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyUserRepository"]
