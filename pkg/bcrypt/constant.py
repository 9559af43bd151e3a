DEFAULT_ROUNDS = 12
MIN_ROUNDS = 4
MAX_ROUNDS = 31

ENCODING = "utf-8"

# Errors
ERROR_INVALID_ROUNDS = "rounds must be between 4 and 31, got {rounds}"
