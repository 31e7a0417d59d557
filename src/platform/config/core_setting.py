import json
from pathlib import Path
from typing import Annotated, List, Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticketmaster Booking Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return json.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'ticketmaster'

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # asyncpg connection pool
    ASYNCPG_POOL_MIN_SIZE: int = 2
    ASYNCPG_POOL_MAX_SIZE: int = 10
    ASYNCPG_POOL_COMMAND_TIMEOUT: float = 30.0  # Per-statement timeout (seconds)
    ASYNCPG_POOL_TIMEOUT: float = 10.0  # Connect timeout (seconds)
    ASYNCPG_POOL_MAX_INACTIVE_LIFETIME: float = 300.0
    ASYNCPG_POOL_MAX_QUERIES: int = 50000

    # Booking lifecycle
    # keep_seats: cancelled bookings keep their ShowSeats until purge
    # release_seats: seats are freed in the cancelling transaction
    POST_CANCELLATION_POLICY: Literal['keep_seats', 'release_seats'] = 'keep_seats'

    # Reservation exchange
    SEAT_SWAP_REQUIRE_EQUAL_PRICE: bool = True


settings = Settings()  # type: ignore
