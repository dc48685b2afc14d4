from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///switcher_data.db"
    SOURCE_CSV_PATH: str = "assets/data.csv"
    # Windows game path; on any other platform this must be set through the environment or .env
    INSTALL_TARGET_PATH: str = r"C:\FC 26 Live Editor\mods\root\Legacy\data\ui\game\overlays\Generic\overlay_9002.BIG"
    LOG_LEVEL: str = "INFO"

    # Go up two levels from core/config.py → project root
    model_config = SettingsConfigDict(env_file=str(Path(__file__).resolve().parents[2] / ".env"))

settings = Settings()
