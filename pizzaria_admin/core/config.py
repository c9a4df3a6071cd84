# pizzaria_admin/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from loguru import logger
from pathlib import Path
from typing import Optional, Tuple
import warnings

DEFAULT_SECRET_KEY = "!!!GENERATE_A_STRONG_SECRET_KEY_32_BYTES_HEX!!!"
ENV_FILENAMES = (".env", ".env.local")

def find_env_file(filename: str, start_dir: Optional[Path] = None) -> Optional[Path]:
    """Primeiro `filename` encontrado subindo a partir de `start_dir` (padrão: o pacote), depois no CWD."""
    start_dir = start_dir or Path(__file__).resolve().parent
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    candidate = Path.cwd() / filename
    return candidate if candidate.is_file() else None

def find_env_files(start_dir: Optional[Path] = None) -> Tuple[str, ...]:
    """Arquivos de ambiente existentes, na ordem de carga (.env.local sobrescreve .env)."""
    found = (find_env_file(name, start_dir) for name in ENV_FILENAMES)
    return tuple(str(path) for path in found if path is not None)

class Settings(BaseSettings):
    PROJECT_NAME: str = "Pizzaria Admin"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Key-value store
    REDIS_URL: str = Field(default="redis://localhost:6379/0")
    REDIS_MAX_CONNECTIONS: int = 20
    KV_KEY_PREFIX: str = Field(default="pizzaria", description="Namespace prepended to every stored key.")

    # CORS
    FRONTEND_ORIGIN: str = "*"

    # Security
    SECRET_KEY: str = DEFAULT_SECRET_KEY # For JWT
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    AUTH_REQUIRED: bool = False # Sem token = usuário anônimo de desenvolvimento
    ANON_KEY: str | None = None # Chave pública do dashboard, tratada como anônima

    DEFAULT_CURRENCY: str = "BRL"

    # Os arquivos .env são passados por get_settings(), só os que existem
    model_config = SettingsConfigDict(
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )

@lru_cache()
def get_settings() -> Settings:
    """Carrega e valida as configurações da aplicação."""
    logger.info("Loading application settings...")
    env_files = find_env_files()
    if env_files:
        logger.info(f"Loading environment variables from: {', '.join(env_files)}")
    else:
        logger.warning("No .env file found. Loading settings from system environment variables only.")

    try:
        settings_instance = Settings(_env_file=env_files or None)

        if settings_instance.SECRET_KEY == DEFAULT_SECRET_KEY:
            logger.warning("SECURITY WARNING: Using default SECRET_KEY. Generate a strong key (e.g., `openssl rand -hex 32`) and set it in your environment!")
            warnings.warn("SECURITY WARNING: Using default SECRET_KEY. Please generate and set a strong secret key!")

        if not settings_instance.AUTH_REQUIRED:
            logger.warning("AUTH_REQUIRED is disabled: requests without a bearer token run as the anonymous user.")

        logger.info("Settings loaded and validated successfully.")
        return settings_instance
    except ValueError as val_err:
        logger.critical(f"CRITICAL ERROR in settings validation: {val_err}")
        raise SystemExit(f"Settings validation failed: {val_err}")

settings = get_settings()
