import os
from pathlib import Path

from dotenv import load_dotenv

basedir = Path(__file__).resolve().parent
load_dotenv(basedir.parent / ".env")


class Config:
    """Configuracion leida del entorno (.env en la raiz del proyecto)."""

    def __init__(self):
        self.DATABASE_URL = os.environ.get("DATABASE_URL") or "sqlite:///./match_tracker.db"
        self.EVENT_FILE = os.environ.get("EVENT_FILE") or str(basedir / "data" / "san_dimas.json")

        # Servidor (python -m match_tracker)
        self.HOST = os.environ.get("HOST", "127.0.0.1")
        self.PORT = int(os.environ.get("PORT") or 8000)

        # Logging
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
        self.LOG_TO_FILE = os.environ.get("LOG_TO_FILE", "False").lower() in ["true", "on", "1"]
        self.LOG_DIR = os.environ.get("LOG_DIR", "logs")


settings = Config()
