from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    db_name: str = "nuber_eats"
    db_user: str = "postgres"
    db_password: str = ""
    db_host: str = "localhost"
    db_port: str = "5432"
    # Full async URL, overrides the db_* fields when set
    database_url: str = ""

    # Environment
    env: str = "local"
    debug: bool = True

    # Auth
    private_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    # 0 disables expiry of verification codes
    verification_code_ttl_minutes: int = 0

    # Promotions
    promotion_days: int = 7
    promotion_check_interval: int = 50

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def async_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        port = self.db_port if self.db_port and self.db_port != "None" else "5432"
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{port}/{self.db_name}"
        )

    @property
    def sync_database_url(self) -> str:
        """Driver-less URL for Alembic migrations."""
        return (
            self.async_database_url.replace("+asyncpg", "")
            .replace("+aiosqlite", "")
        )


settings = Settings()
