from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings): # load all key=value pairs from .env
    """ Load server and solver settings"""
    LISTEN_IP: str = "127.0.0.1"
    LISTEN_PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app_errors.log"

    MAX_GRID_SIZE: int = 64 # shortest path
    MAX_ESCAPE_GRID_SIZE: int = 5 # all paths: 8512 on an open 5x5, 1262816 on 6x6
    MAX_RING_COUNT: int = 16 # BFS over 2^n states

    model_config = SettingsConfigDict(
        env_file = BASE_DIR/".env",
        env_file_encoding = "utf-8",
        extra = "ignore",
    )

settings = Settings()
