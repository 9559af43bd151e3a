from typing import List

from core.errors import ErrInternal, ErrValidationFailed
from core.validation import FieldError, check_email, check_min_length
from ..constant import (
    MSG_EMAIL_INVALID,
    MSG_NAME_EMPTY,
    MSG_PASSWORD_TOO_SHORT,
    NAME_MIN_LENGTH,
    PASSWORD_MIN_LENGTH,
)
from ..errors import ErrEmailExists
from ..type import SignupInput
from ..repository.errors import ErrDuplicateEmail, RepositoryError
from ..repository.option import GetOneOptions, SaveOptions


def validate_signup(input_data: SignupInput) -> List[FieldError]:
    errors: List[FieldError] = []
    check_email(errors, "email", (input_data.email or "").strip(), MSG_EMAIL_INVALID)
    check_min_length(
        errors, "password", (input_data.password or "").strip(), PASSWORD_MIN_LENGTH, MSG_PASSWORD_TOO_SHORT
    )
    check_min_length(errors, "name", (input_data.name or "").strip(), NAME_MIN_LENGTH, MSG_NAME_EMPTY)
    return errors


async def signup(self, input_data: SignupInput) -> str:
    errors = validate_signup(input_data)
    if errors:
        raise ErrValidationFailed(errors)

    try:
        existing = await self.repository.get_one(GetOneOptions(email=input_data.email))
        if existing:
            raise ErrEmailExists()

        hashed = await self.hasher.hash(input_data.password)
        user = await self.repository.save(
            SaveOptions(
                email=input_data.email,
                name=input_data.name.strip(),
                password=hashed,
            )
        )
    except ErrDuplicateEmail as e:
        # Lost a race with a concurrent signup for the same address
        raise ErrEmailExists() from e
    except RepositoryError as e:
        self.logger.error(f"internal.user.usecase.signup: {e}")
        raise ErrInternal() from e

    self.logger.info(f"internal.user.usecase.signup: created user {user.id}")
    return str(user.id)
