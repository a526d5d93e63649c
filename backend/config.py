import os
from dotenv import load_dotenv

load_dotenv(override=False)

SQLALCHEMY_DATABASE_URL = os.getenv("SQLALCHEMY_DATABASE_URL", "sqlite:///./diet_planner.db")
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")  # Use a strong random string
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 7 * 24 * 60))  # 7 days

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated, "*" allows everything
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
