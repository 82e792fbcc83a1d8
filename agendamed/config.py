# agendamed/config.py
import os
from dotenv import load_dotenv

load_dotenv()


def env_flag(name: str, default: str = "1") -> bool:
    """Desliga com 0, false, no ou off, em qualquer caixa."""
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off", "")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-change-me")

    # arquivo SQLite (criado no primeiro init_db)
    DATABASE_PATH = os.getenv("DATABASE_PATH", "./agendamed.db")
    SEED_DOCTORS = env_flag("SEED_DOCTORS")

    # consulta de CEP
    VIACEP_URL = os.getenv("VIACEP_URL", "https://viacep.com.br/ws").rstrip("/")
    VIACEP_TIMEOUT = float(os.getenv("VIACEP_TIMEOUT", "10"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
