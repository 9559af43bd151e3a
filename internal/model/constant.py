from typing import Final

# Logger configuration
LOGGER_SERVICE_NAME: Final[str] = "feed-srv"
LOGGER_ENABLE_CONSOLE: Final[bool] = True
LOGGER_COLORIZE: Final[bool] = True

# User defaults
DEFAULT_USER_STATUS: Final[str] = "I am new!"

# Column sizes
EMAIL_MAX_LENGTH: Final[int] = 255
NAME_MAX_LENGTH: Final[int] = 255
TITLE_MAX_LENGTH: Final[int] = 255
IMAGE_URL_MAX_LENGTH: Final[int] = 1024

# Notifier
NOTIFIER_CHANNEL: Final[str] = "posts"
NOTIFIER_REDIS_CHANNEL: Final[str] = "feed.posts"
