import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", "")

STAFF_TOKEN_HOURS = float(os.getenv("STAFF_TOKEN_HOURS", "24"))
PORTAL_TOKEN_HOURS = float(os.getenv("PORTAL_TOKEN_HOURS", "1"))
DUPLICATE_WINDOW_MINUTES = int(os.getenv("DUPLICATE_WINDOW_MINUTES", "5"))

ENFORCE_STAFF_MATCH = bool(int(os.getenv("ENFORCE_STAFF_MATCH", "1")))

FACEBOOK_APP_SECRET = os.getenv("FACEBOOK_APP_SECRET", "")
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:5000")
CLIENT_URL = os.getenv("CLIENT_URL", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
