import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
JWT_SECRET = os.getenv("JWT_SECRET", "dev-jwt-secret-change-me-0123456789abcdef")

STAFF_TOKEN_HOURS = float(os.getenv("STAFF_TOKEN_HOURS", "24"))
PORTAL_TOKEN_HOURS = float(os.getenv("PORTAL_TOKEN_HOURS", "1"))
DUPLICATE_WINDOW_MINUTES = int(os.getenv("DUPLICATE_WINDOW_MINUTES", "5"))

# Reject marking attendance for a staffId other than the token's own.
ENFORCE_STAFF_MATCH = bool(int(os.getenv("ENFORCE_STAFF_MATCH", "0")))

FACEBOOK_APP_SECRET = os.getenv("FACEBOOK_APP_SECRET", "")
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:5000")
CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:3000")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE") or None

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
