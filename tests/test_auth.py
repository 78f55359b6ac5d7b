"""
Tests for password hashing and the authentication service.

This test suite covers:
- PasswordHasher: salted hashing, verification, malformed hash handling
- AuthService.register: validation, uniqueness, sanitized output
- AuthService.login: generic failure message for every cause, session TTLs
- AuthService.logout / resolve_identity / require_authenticated
"""

import pytest
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from sqlalchemy.orm import Session

from test_fixtures import (
    STRONG_PASSWORD,
    auth_service,
    database,
    db_session,
    hasher,
    make_user,
    session_store,
    test_settings,
)
from adapters import PasswordHasher
from app.exceptions import ConflictError, ServiceValidationError, UnauthorizedError
from domain.models import User, utc_now
from domain.schemas.auth_schemas import UserResponse
from services.auth_service import INVALID_CREDENTIALS, NOT_AUTHENTICATED, AuthService


def _register_alice(auth_service: AuthService, db: Session, **overrides):
    data = {
        "username": "alice",
        "email": "alice@x.com",
        "password": STRONG_PASSWORD,
    }
    data.update(overrides)
    return auth_service.register(db, data)


# =============================================================================
# PASSWORD HASHER
# =============================================================================


def test_hash_is_salted_and_verifies(hasher: PasswordHasher):
    """
    Verifies:
    - Two hashes of the same password differ (fresh salt)
    - Both verify against the original password
    - Neither contains the plaintext
    """
    first = hasher.hash("Passw0rd!")
    second = hasher.hash("Passw0rd!")

    assert first != second
    assert hasher.verify("Passw0rd!", first)
    assert hasher.verify("Passw0rd!", second)
    assert "Passw0rd!" not in first
    assert hasher.is_well_formed(first)


def test_verify_rejects_wrong_password(hasher: PasswordHasher):
    hashed = hasher.hash("Passw0rd!")
    assert hasher.verify("passw0rd!", hashed) is False
    assert hasher.verify("", hashed) is False


@pytest.mark.parametrize("stored", [None, "", "plaintext", "$2b$04$short"])
def test_verify_returns_false_for_malformed_hash(hasher: PasswordHasher, stored):
    """A missing or corrupt stored hash never raises and never matches"""
    assert hasher.verify("Passw0rd!", stored) is False
    assert hasher.is_well_formed(stored) is False


def test_hasher_uses_configured_work_factor():
    hashed = PasswordHasher(rounds=5).hash("Passw0rd!")
    assert hashed.startswith("$2b$05$")


def test_hasher_is_safe_to_share_between_threads(hasher: PasswordHasher):
    passwords = [f"Passw0rd!{i}" for i in range(16)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        hashes = list(pool.map(hasher.hash, passwords))
        checks = list(pool.map(hasher.verify, passwords, hashes))

    assert all(checks)
    assert len(set(hashes)) == len(passwords)
    assert not hasher.verify(passwords[0], hashes[1])


# =============================================================================
# REGISTER
# =============================================================================


def test_register_returns_sanitized_user(auth_service: AuthService, db_session: Session):
    """
    Verifies:
    - Returned user has exactly id, username, email
    - A session is issued with the default TTL
    - The stored hash verifies and is not the plaintext
    """
    user, issued = _register_alice(auth_service, db_session)

    assert isinstance(user, UserResponse)
    assert set(user.model_dump().keys()) == {"id", "username", "email"}
    assert user.username == "alice"
    assert user.email == "alice@x.com"
    assert issued.max_age == auth_service.session_ttl_seconds

    stored = db_session.query(User).filter(User.username == "alice").one()
    assert stored.hashed_password != STRONG_PASSWORD
    assert auth_service.hasher.verify(STRONG_PASSWORD, stored.hashed_password)


def test_register_logs_the_user_in(auth_service: AuthService, db_session: Session):
    user, issued = _register_alice(auth_service, db_session)

    identity = auth_service.resolve_identity(db_session, issued.sid)
    assert identity == user


def test_register_remember_me_uses_long_ttl(
    auth_service: AuthService, db_session: Session
):
    _, issued = _register_alice(auth_service, db_session, rememberMe=True)
    assert issued.max_age == auth_service.remember_ttl_seconds


def test_register_duplicate_username_is_conflict(
    auth_service: AuthService, db_session: Session
):
    """
    Verifies:
    - Second registration with the same username raises ConflictError
    - No second row is written
    """
    _register_alice(auth_service, db_session)

    with pytest.raises(ConflictError) as exc_info:
        _register_alice(auth_service, db_session, email="other@x.com")

    assert exc_info.value.message == "Username already exists"
    assert db_session.query(User).count() == 1


def test_register_duplicate_email_is_conflict(
    auth_service: AuthService, db_session: Session
):
    _register_alice(auth_service, db_session)

    with pytest.raises(ConflictError) as exc_info:
        _register_alice(auth_service, db_session, username="alice2")

    assert exc_info.value.message == "Email already exists"
    assert db_session.query(User).count() == 1


def test_usernames_are_case_sensitive(auth_service: AuthService, db_session: Session):
    _register_alice(auth_service, db_session)
    user, _ = _register_alice(auth_service, db_session, username="Alice", email="A@x.com")
    assert user.username == "Alice"


@pytest.mark.parametrize(
    "overrides,field",
    [
        ({"username": "al"}, "username"),
        ({"username": "a" * 31}, "username"),
        ({"email": "not-an-email"}, "email"),
        ({"password": "Sh0rt!"}, "password"),
        ({"password": "alllowercase1!"}, "password"),
        ({"password": "NoDigitsHere!"}, "password"),
        ({"password": "NoSymbols123"}, "password"),
    ],
)
def test_register_rejects_invalid_input(
    auth_service: AuthService, db_session: Session, overrides, field
):
    """
    Verifies:
    - Each field rule violation raises ServiceValidationError
    - Details name the offending field
    - Nothing is stored
    """
    with pytest.raises(ServiceValidationError) as exc_info:
        _register_alice(auth_service, db_session, **overrides)

    assert field in [d["field"] for d in exc_info.value.details]
    assert db_session.query(User).count() == 0


def test_register_rejects_password_over_bcrypt_limit(
    auth_service: AuthService, db_session: Session
):
    with pytest.raises(ServiceValidationError):
        _register_alice(auth_service, db_session, password="Aa1!" + "x" * 69)


# =============================================================================
# LOGIN
# =============================================================================


def test_login_success_issues_new_session(
    auth_service: AuthService, db_session: Session
):
    make_user(db_session, username="alice", email="alice@x.com")

    user, issued = auth_service.login(
        db_session, {"username": "alice", "password": STRONG_PASSWORD}
    )

    assert user.username == "alice"
    assert auth_service.resolve_identity(db_session, issued.sid) == user


def test_login_remember_me_extends_session(
    auth_service: AuthService, db_session: Session
):
    make_user(db_session, username="alice")

    _, issued = auth_service.login(
        db_session,
        {"username": "alice", "password": STRONG_PASSWORD, "rememberMe": True},
    )

    assert issued.max_age == 30 * 24 * 60 * 60
    assert issued.expires_at > utc_now() + timedelta(days=29)


@pytest.mark.parametrize(
    "username,password",
    [
        ("alice", "wrong"),
        ("nobody", STRONG_PASSWORD),
        ("ALICE", STRONG_PASSWORD),
    ],
)
def test_login_failures_share_one_message(
    auth_service: AuthService, db_session: Session, username, password
):
    """
    Verifies:
    - Wrong password, unknown user and wrong-case username all raise
      UnauthorizedError with the same message
    """
    make_user(db_session, username="alice")

    with pytest.raises(UnauthorizedError) as exc_info:
        auth_service.login(db_session, {"username": username, "password": password})

    assert exc_info.value.message == INVALID_CREDENTIALS


def test_login_with_corrupt_stored_hash_is_generic_failure(
    auth_service: AuthService, db_session: Session
):
    make_user(db_session, username="alice", hashed_password="not-a-bcrypt-hash")

    with pytest.raises(UnauthorizedError) as exc_info:
        auth_service.login(
            db_session, {"username": "alice", "password": STRONG_PASSWORD}
        )

    assert exc_info.value.message == INVALID_CREDENTIALS


def test_login_with_empty_fields_is_validation_error(
    auth_service: AuthService, db_session: Session
):
    with pytest.raises(ServiceValidationError):
        auth_service.login(db_session, {"username": "", "password": ""})


def test_login_destroys_previous_session(
    auth_service: AuthService, db_session: Session, session_store
):
    make_user(db_session, username="alice")
    credentials = {"username": "alice", "password": STRONG_PASSWORD}

    _, first = auth_service.login(db_session, credentials)
    _, second = auth_service.login(db_session, credentials, previous_sid=first.sid)

    assert first.sid != second.sid
    assert session_store.get(first.sid) is None
    assert session_store.get(second.sid) is not None


def test_login_after_identity_lookup_in_same_session(
    auth_service: AuthService, db_session: Session
):
    """The credential lookup still sees the hash after a sanitized load"""
    user, issued = _register_alice(auth_service, db_session)
    db_session.expunge_all()
    assert auth_service.resolve_identity(db_session, issued.sid) == user

    logged_in, _ = auth_service.login(
        db_session, {"username": "alice", "password": STRONG_PASSWORD}
    )
    assert logged_in == user


# =============================================================================
# LOGOUT / IDENTITY
# =============================================================================


def test_logout_is_idempotent(auth_service: AuthService, db_session: Session):
    _, issued = _register_alice(auth_service, db_session)

    auth_service.logout(issued.sid)
    auth_service.logout(issued.sid)
    auth_service.logout(None)

    assert auth_service.resolve_identity(db_session, issued.sid) is None


def test_resolve_identity_without_session(auth_service: AuthService, db_session: Session):
    assert auth_service.resolve_identity(db_session, None) is None
    assert auth_service.resolve_identity(db_session, "") is None
    assert auth_service.resolve_identity(db_session, "unknown-sid") is None


def test_resolve_identity_expired_session(
    auth_service: AuthService, db_session: Session, session_store
):
    user = make_user(db_session)
    session_store.save(
        "expired-sid", {"user_id": user.id}, utc_now() - timedelta(seconds=1)
    )

    assert auth_service.resolve_identity(db_session, "expired-sid") is None


def test_resolve_identity_for_deleted_user_destroys_session(
    auth_service: AuthService, db_session: Session, session_store
):
    """
    Verifies:
    - A session whose user no longer exists resolves to anonymous
    - The dangling session is removed from the store
    """
    user, issued = _register_alice(auth_service, db_session)

    db_session.query(User).filter(User.id == user.id).delete()
    db_session.commit()

    assert auth_service.resolve_identity(db_session, issued.sid) is None
    assert session_store.get(issued.sid) is None


@pytest.mark.parametrize("payload", [{}, {"user_id": "1"}, {"user_id": True}])
def test_resolve_identity_with_bad_payload(
    auth_service: AuthService, db_session: Session, session_store, payload
):
    session_store.save("odd-sid", payload, utc_now() + timedelta(hours=1))

    assert auth_service.resolve_identity(db_session, "odd-sid") is None
    assert session_store.get("odd-sid") is None


def test_resolve_identity_never_exposes_hash(
    auth_service: AuthService, db_session: Session
):
    _, issued = _register_alice(auth_service, db_session)

    identity = auth_service.resolve_identity(db_session, issued.sid)
    dumped = identity.model_dump(by_alias=True)

    assert "hashedPassword" not in dumped
    assert "password" not in dumped


def test_session_payload_holds_only_user_reference(
    auth_service: AuthService, db_session: Session, session_store
):
    user, issued = _register_alice(auth_service, db_session)

    payload = session_store.get(issued.sid).payload
    assert payload["user_id"] == user.id
    assert STRONG_PASSWORD not in str(payload)
    assert "$2b$" not in str(payload)


def test_require_authenticated():
    identity = UserResponse(id=1, username="alice", email="alice@x.com")
    assert AuthService.require_authenticated(identity) is identity

    with pytest.raises(UnauthorizedError) as exc_info:
        AuthService.require_authenticated(None)
    assert exc_info.value.message == NOT_AUTHENTICATED
    assert exc_info.value.http_status == 401
