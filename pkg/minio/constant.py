# Only these uploads are accepted as post images
ALLOWED_MIME_TYPES = frozenset({"image/png", "image/jpg", "image/jpeg"})

# Prefix of every path handed out to callers; the rest is the object name
PUBLIC_PATH_PREFIX = "images/"

DEFAULT_BUCKET = "feed-images"
DEFAULT_CONTENT_TYPE = "application/octet-stream"
MAX_FILENAME_LENGTH = 120

# Error Messages
ERROR_ENDPOINT_EMPTY = "endpoint cannot be empty"
ERROR_ACCESS_KEY_EMPTY = "access_key cannot be empty"
ERROR_SECRET_KEY_EMPTY = "secret_key cannot be empty"
ERROR_BUCKET_EMPTY = "bucket cannot be empty"
ERROR_UNSUPPORTED_MEDIA_TYPE = "unsupported media type: {content_type}"
ERROR_INVALID_PATH = "not an image path: {path}"
