from pathlib import Path
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"
LOGGING_CONFIG_PATH = BASE_DIR / "logging.ini"


class Settings(BaseSettings):

    DB_USER: str
    DB_PASSWORD: str
    DB_HOST: str = "localhost"  # 기본값 설정 (없으면 로컬로 간주)
    DB_PORT: int = 5432
    DB_NAME: str = "chefsphere"

    # 커넥션 풀은 기동 시 한 번 크기가 정해짐
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: int = 30
    DB_ECHO: bool = False

    REDIS_URL: str = "redis://localhost:6379/0"

    JWT_SECRET_KEY: SecretStr
    JWT_EXPIRE_DAYS: int = 1

    VIEW_COOLDOWN_HOURS: int = 24

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    LOG_SAMPLE_RATE: float = 1.0

    @property
    def POSTGRES_DATABASE_URL(self) -> str:
        return f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",  # 정의되지 않은 변수는 무시
        case_sensitive=True,
    )


settings = Settings()  # 유효성 체크
