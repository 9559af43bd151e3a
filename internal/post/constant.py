from typing import Final

# Pagination
DEFAULT_PER_PAGE: Final[int] = 2

# Validation
TITLE_MIN_LENGTH: Final[int] = 4
CONTENT_MIN_LENGTH: Final[int] = 4

MSG_TITLE_INVALID: Final[str] = "Title is invalid."
MSG_CONTENT_INVALID: Final[str] = "Content is invalid."
MSG_NO_IMAGE: Final[str] = "No file picked."
MSG_POST_NOT_FOUND: Final[str] = "Could not find post."
MSG_NOT_OWNER: Final[str] = "Not authorized!"

# Background work
BLOB_REMOVAL_TASK_PREFIX: Final[str] = "post-image-remove"
