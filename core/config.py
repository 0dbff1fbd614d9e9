# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# 0) .env 로드
load_dotenv()

# 1) 경로
BASE_DIR = Path(__file__).resolve().parent.parent


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


# 2) DB
DB = os.getenv("DB", "postgresql")
DB_USER = os.getenv("DB_USER", "")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_SERVER = os.getenv("DB_SERVER", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "")
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"{DB}://{DB_USER}:{DB_PASSWORD}@{DB_SERVER}:{DB_PORT}/{DB_NAME}",
)
DB_ECHO = _flag("DB_ECHO")

# 3) 서버
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5002"))
RELOAD = _flag("RELOAD")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# 4) API 문서 / 미들웨어
API_TITLE = os.getenv("API_TITLE", "Customer API")
API_VERSION = os.getenv("API_VERSION", "v1")
ENABLE_DOCS = _flag("ENABLE_DOCS", "1")
FORCE_HTTPS = _flag("FORCE_HTTPS")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# 5) 페이지네이션 기본값
DEFAULT_PAGE = int(os.getenv("DEFAULT_PAGE", "1"))
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
