from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )

    PROJECT_NAME: str = "Rerank Proxy"

    # TEI backend
    TEI_ENDPOINT: str = "http://localhost:4000"
    TEI_TIMEOUT: float = 30.0

    # Listener
    TEI_PROXY_HOST: str = "0.0.0.0"
    TEI_PROXY_PORT: int = 8000

    MAX_CLIENT_BATCH_SIZE: int = Field(default=1000, ge=1)

    LOG_LEVEL: str = "INFO"


settings = Settings()
