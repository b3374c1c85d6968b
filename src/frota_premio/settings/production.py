import os

from ..core.constants import META_FIXA as DEFAULT_META_FIXA

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "frota_premio"),
}

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "/var/lib/frota_premio/uploads")

META_FIXA = float(os.getenv("META_FIXA", str(DEFAULT_META_FIXA)))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_CREATE_ADMIN = bool(int(os.getenv("AUTO_CREATE_ADMIN", "0")))
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "")
