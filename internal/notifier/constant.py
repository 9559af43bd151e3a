from typing import Final

DEFAULT_QUEUE_SIZE: Final[int] = 64

FIELD_CHANNEL: Final[str] = "channel"
FIELD_ACTION: Final[str] = "action"
FIELD_POST: Final[str] = "post"

# Redis listener reconnect backoff, in seconds
RECONNECT_DELAY_MIN: Final[float] = 0.5
RECONNECT_DELAY_MAX: Final[float] = 30.0
