"""
Tests for token issuing, password hashing and random codes.
"""

import string
from datetime import timedelta

import pytest
from jose import jwt

from core.auth import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from core.auth_context import ActorType
from core.codes import CODE_ALPHABET, generate_code
from core.config import settings


class TestAccessTokens:

    def test_round_trip(self):
        token = create_access_token(42, ActorType.CUSTOMER)

        assert decode_access_token(token, ActorType.CUSTOMER) == 42

    def test_actor_type_must_match(self):
        token = create_access_token(42, ActorType.CUSTOMER)

        assert decode_access_token(token, ActorType.MANAGER) is None

    def test_expired_token(self):
        token = create_access_token(42, ActorType.MANAGER, expires_delta=timedelta(seconds=-1))

        assert decode_access_token(token, ActorType.MANAGER) is None

    def test_foreign_signature(self):
        token = jwt.encode({"sub": "42", "type": "customer"}, "not-our-secret", algorithm="HS256")

        assert decode_access_token(token, ActorType.CUSTOMER) is None

    def test_non_numeric_subject(self):
        token = jwt.encode(
            {"sub": "someone", "type": "customer"},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        assert decode_access_token(token, ActorType.CUSTOMER) is None

    def test_garbage(self):
        assert decode_access_token("not.a.jwt", ActorType.CUSTOMER) is None


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = get_password_hash("correct horse")

        assert hashed != "correct horse"
        assert verify_password("correct horse", hashed)
        assert not verify_password("battery staple", hashed)


class TestCodes:

    def test_alphabet(self):
        assert CODE_ALPHABET == string.ascii_uppercase + string.digits

    @pytest.mark.parametrize("length", [1, 8, 10])
    def test_length_and_characters(self, length):
        code = generate_code(length)

        assert len(code) == length
        assert set(code) <= set(CODE_ALPHABET)

    def test_codes_vary(self):
        assert len({generate_code(8) for _ in range(50)}) > 1

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            generate_code(0)
