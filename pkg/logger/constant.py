from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


DEFAULT_SERVICE_NAME = "feed-srv"
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENABLE_CONSOLE = True
DEFAULT_COLORIZE = True

LOG_FORMAT_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss}</green>"
LOG_FORMAT_LEVEL = "<level>{level: <7}</level>"
LOG_FORMAT_REQUEST = "<cyan>{extra[request_id]: <36}</cyan>"
LOG_FORMAT_LOCATION = "<cyan>{name}</cyan>:<cyan>{line}</cyan>"
LOG_FORMAT_MESSAGE = "<level>{message}</level>"

REQUEST_ID_KEY = "request_id"
SERVICE_KEY = "service"

# Accepted spellings that map onto LogLevel members
LEVEL_ALIASES = {
    "WARN": LogLevel.WARNING,
}
