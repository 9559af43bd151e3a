"""Tests for the permissive authenticator."""

import uuid

import jwt
import pytest

from core.errors import ErrUnauthenticated
from internal.auth import require_authenticated
from internal.auth.type import AuthContext
from internal.auth.usecase.authenticate import token_from_header


class TestAuthenticate:
    def test_valid_token_authenticates(self, auth_usecase, token_service):
        user_id = uuid.uuid4()
        token = token_service.sign({"userId": str(user_id), "email": "a@b.io"})

        auth = auth_usecase.authenticate(token)

        assert auth == AuthContext.authenticated(user_id)

    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
    def test_absent_or_malformed_token_is_anonymous(self, auth_usecase, token):
        assert auth_usecase.authenticate(token) == AuthContext.anonymous()

    def test_expired_token_is_anonymous(self, auth_usecase, token_service):
        token = token_service.sign({"userId": str(uuid.uuid4())}, expires_in=-60)

        assert not auth_usecase.authenticate(token).is_authenticated

    def test_foreign_signature_is_anonymous(self, auth_usecase):
        token = jwt.encode({"userId": str(uuid.uuid4()), "exp": 9999999999}, "other-key", algorithm="HS256")

        assert not auth_usecase.authenticate(token).is_authenticated

    def test_token_without_uuid_claim_is_anonymous(self, auth_usecase, token_service):
        token = token_service.sign({"userId": "42"})

        assert not auth_usecase.authenticate(token).is_authenticated

    def test_header_authentication(self, auth_usecase, token_service):
        user_id = uuid.uuid4()
        token = token_service.sign({"userId": str(user_id)})

        assert auth_usecase.authenticate_header(f"Bearer {token}").user_id == user_id
        assert not auth_usecase.authenticate_header(token).is_authenticated


class TestHelpers:
    @pytest.mark.parametrize(
        "header, expected",
        [
            (None, None),
            ("", None),
            ("Bearer abc", "abc"),
            ("bearer abc", "abc"),
            ("Basic abc", None),
            ("Bearer", None),
            ("Bearer a b", None),
        ],
    )
    def test_token_from_header(self, header, expected):
        assert token_from_header(header) == expected

    def test_require_authenticated(self):
        user_id = uuid.uuid4()

        assert require_authenticated(AuthContext.authenticated(user_id)) == user_id
        with pytest.raises(ErrUnauthenticated):
            require_authenticated(AuthContext.anonymous())
