import os

from dotenv import load_dotenv

load_dotenv()

# Render provides DATABASE_URL starting with "postgres://...", SQLAlchemy 2.x wants "postgresql://..."
_raw_db_url = os.getenv("DATABASE_URL", "sqlite:///./medifinder.db")
DATABASE_URL = _raw_db_url.replace("postgres://", "postgresql://", 1)

SECRET_KEY = os.getenv("SECRET_KEY", "medifinder-dev-secret-key-change-in-production")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if o.strip()
]

# Prescription uploads
UPLOADS_DIR = os.getenv("UPLOADS_DIR", os.path.join(os.path.dirname(__file__), "uploads"))
MAX_PRESCRIPTION_BYTES = int(os.getenv("MAX_PRESCRIPTION_BYTES", str(5 * 1024 * 1024)))
PRESCRIPTION_EXTENSIONS = {".pdf", ".png", ".jpg", ".jpeg"}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Default password handed to generated pharmacy accounts
PHARMACY_DEFAULT_PASSWORD = os.getenv("PHARMACY_DEFAULT_PASSWORD", "pharmacy123")

# Server-side failures are also written to <LOGS_DIR>/errors.log
LOGS_DIR = os.getenv("LOGS_DIR", os.path.join(os.path.dirname(__file__), "logs"))
