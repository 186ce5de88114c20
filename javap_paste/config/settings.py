from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "javap"
    db_username: str = "javap"
    db_password: str = "secret"
    db_pool_max_size: int = 10

    storage_backend: str = "postgres"

    processor_engine: str = "toolchain"
    sdk_root: Path = Path("/opt/sdk")
    java_home: Path = Path("/opt/sdk/jdk-21")
    procyon_jar: Path = Path("/opt/procyon/procyon-decompiler.jar")
    max_concurrent_compilations: int = 2
