SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret-0123456789abcdef0123456789"

STAFF_TOKEN_HOURS = 24
PORTAL_TOKEN_HOURS = 1
DUPLICATE_WINDOW_MINUTES = 5

ENFORCE_STAFF_MATCH = False

FACEBOOK_APP_SECRET = "test-facebook-app-secret"
BACKEND_URL = "http://localhost:5000"
CLIENT_URL = "http://localhost:3000"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_FILE = None

SEED_DEMO_DATA = True
