REQUEST_ID_HEADER = "X-Request-ID"

API_TITLE = "Feed API"
API_DESCRIPTION = "Multi-user content feed with live post notifications"
API_VERSION = "1.0.0"

CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]
CORS_HEADERS = ["Content-Type", "Authorization"]
