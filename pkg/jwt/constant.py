DEFAULT_ALGORITHM = "HS256"
DEFAULT_EXPIRES_IN = 3600  # seconds
SUPPORTED_ALGORITHMS = ("HS256", "HS384", "HS512")

CLAIM_EXPIRES_AT = "exp"
CLAIM_ISSUED_AT = "iat"

# Errors
ERROR_SECRET_EMPTY = "secret cannot be empty"
ERROR_UNSUPPORTED_ALGORITHM = "algorithm must be one of {algorithms}, got {algorithm}"
ERROR_EXPIRES_IN_POSITIVE = "expires_in must be > 0"
