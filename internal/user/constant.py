PASSWORD_MIN_LENGTH = 5
NAME_MIN_LENGTH = 1

MSG_EMAIL_INVALID = "E-mail is invalid."
MSG_PASSWORD_TOO_SHORT = "Password is too short."
MSG_NAME_EMPTY = "Name is empty."
MSG_EMAIL_EXISTS = "E-mail address already exists."
MSG_INVALID_CREDENTIALS = "Invalid e-mail or password."
MSG_USER_NOT_FOUND = "User not found."

CLAIM_USER_ID = "userId"
CLAIM_EMAIL = "email"
