import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# development | production (production adds HSTS)
ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()
IS_PRODUCTION = ENVIRONMENT == "production"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./weekly_scheduler.db")

# Firebase Configuration
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")
# Seconds to wait for Google's signing certificates
PUBLIC_KEYS_TIMEOUT = float(os.getenv("PUBLIC_KEYS_TIMEOUT", "10"))

# Public schedule subdomains: {username}.{ROOT_DOMAIN}
ROOT_DOMAIN = os.getenv("ROOT_DOMAIN", "weeklyscheduler.vercel.app").lower()
APP_SUBDOMAIN = os.getenv("APP_SUBDOMAIN", "weeklyscheduler").lower()
RESERVED_SUBDOMAINS = frozenset(
    s.strip().lower()
    for s in os.getenv(
        "RESERVED_SUBDOMAINS",
        "www,app,api,admin,mail,ftp,blog,shop,store,dev,staging,test",
    ).split(",")
    if s.strip()
)
