# config.py
import os
from dotenv import load_dotenv

# 0) .env
load_dotenv()

# 1) DB
DB = os.getenv("DB", "postgresql")
DB_USER = os.getenv("DB_USER", "")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_SERVER = os.getenv("DB_SERVER", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "")
SQL_ECHO = bool(int(os.getenv("SQL_ECHO", "0")))

# 2) Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
RELOAD = bool(int(os.getenv("RELOAD", "0")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 3) CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
CORS_METHODS = ["GET", "POST"]
