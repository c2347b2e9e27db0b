from urllib.parse import quote

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # Servers
    HTTP_PORT: int = 8080
    GRPC_PORT: int = 9090
    GRPC_SHUTDOWN_GRACE: float = 5.0

    # Database components; DATABASE_URL, when set, wins over all of them.
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "hexagonal_app"
    DB_SSLMODE: str = "disable"
    DATABASE_URL: str | None = None

    # Cache
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_PASSWORD: str = ""
    REDIS_DB: int = 0

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the configured store."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+asyncpg",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            # asyncpg understands libpq sslmode names through its ``ssl`` argument.
            query={"ssl": self.DB_SSLMODE},
        )
        return url.render_as_string(hide_password=False)

    @property
    def redis_url(self) -> str:
        auth = f":{quote(self.REDIS_PASSWORD, safe='')}@" if self.REDIS_PASSWORD else ""
        return f"redis://{auth}{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"


settings = Settings()
