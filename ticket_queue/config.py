from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///./ticket_queue.db"
    database_busy_timeout: float = 30.0
    # Empty means server-local time decides the day.
    queue_timezone: str = ""
    allocation_max_retries: int = 5
    allocation_retry_delay: float = 0.05
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_prefix="")


settings = Settings()
