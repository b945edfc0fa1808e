"""Error hierarchy — each error kind maps to its own class, code and HTTP status."""

import pytest

from conduit.core.errors import (
    AlreadyFavoritedError, AlreadyFollowingError, ConduitError, CredentialError,
    DuplicateEmailError, DuplicateUsernameError, ErrorCategory, ExpiredTokenError,
    InvalidCredentialsError, InvalidTokenError, NotFoundError, PoolTimeoutError,
    SelfFollowError, StorageError, TokenError, TokenSigningError,
)


@pytest.mark.parametrize("error, code, status", [
    (NotFoundError("User", "x"), "NOT_FOUND", 404),
    (DuplicateEmailError("a@b.c"), "DUPLICATE_EMAIL", 409),
    (DuplicateUsernameError("a"), "DUPLICATE_USERNAME", 409),
    (InvalidCredentialsError(), "INVALID_CREDENTIALS", 401),
    (AlreadyFollowingError(), "ALREADY_FOLLOWING", 409),
    (AlreadyFavoritedError(), "ALREADY_FAVORITED", 409),
    (SelfFollowError(), "SELF_FOLLOW", 400),
    (CredentialError("empty"), "CREDENTIAL_ERROR", 400),
    (InvalidTokenError(), "INVALID_TOKEN", 401),
    (ExpiredTokenError(), "EXPIRED_TOKEN", 401),
    (TokenSigningError(), "TOKEN_SIGNING_UNAVAILABLE", 500),
    (StorageError("boom", "query"), "STORAGE_ERROR", 503),
    (PoolTimeoutError(2.5), "POOL_TIMEOUT", 503),
])
def test_error_code_and_status(error, code, status):
    assert isinstance(error, ConduitError)
    assert error.code == code
    assert error.http_status == status


def test_token_errors_share_a_base():
    for error in (InvalidTokenError(), ExpiredTokenError(), TokenSigningError()):
        assert isinstance(error, TokenError)


def test_pool_timeout_is_not_a_storage_error():
    assert not isinstance(PoolTimeoutError(), StorageError)
    assert PoolTimeoutError().category == ErrorCategory.TIMEOUT


def test_pool_timeout_reports_retry_hint():
    assert PoolTimeoutError(2.5).context.retry_after_ms == 2500


def test_invalid_credentials_message_does_not_name_the_cause():
    message = InvalidCredentialsError().message.lower()
    assert "not found" not in message
    assert "wrong password" not in message


def test_not_found_response_envelope():
    body = NotFoundError("Article", "missing-slug").to_response()["error"]
    assert body["code"] == "NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["message"] == "Article 'missing-slug' not found"
    assert body["context"]["resource"] == "Article"
    assert "timestamp" in body
