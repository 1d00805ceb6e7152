# credvault/core/credentials.py

import logging

from credvault.core.errors import AuthenticationError, DuplicateAccountError, NotFoundError
from credvault.core.logging import LOGGER_NAME
from credvault.core.security import PasswordHasher
from credvault.core.validation import PasswordPolicy, validate_login, validate_signup
from credvault.models.user import User
from credvault.store import CredentialStore


logger = logging.getLogger(LOGGER_NAME)


def register_user(
    store: CredentialStore,
    hasher: PasswordHasher,
    policy: PasswordPolicy,
    username: str,
    email: str,
    password: str,
) -> User:
    """
    Validate, reject known emails, hash, insert.
    Raises ValidationError, DuplicateAccountError or StoreError.
    """
    username = username.strip()
    email = email.strip()
    validate_signup(username, email, password, policy)

    if store.find_by_email(email) is not None:
        logger.info("signup.duplicate")
        raise DuplicateAccountError("Email already registered")

    user = store.insert(username, email, hasher.hash(password))
    logger.info("signup.created", extra={"user_id": user.id})
    return user


def authenticate_user(
    store: CredentialStore,
    hasher: PasswordHasher,
    email: str,
    password: str,
) -> User:
    email = email.strip()
    validate_login(email, password)

    user = store.find_by_email(email)
    if user is None:
        logger.info("login.failed reason=unknown_email")
        raise NotFoundError("Email not registered")

    if not hasher.verify(password, user.password_hash):
        logger.info("login.failed reason=bad_password", extra={"user_id": user.id})
        raise AuthenticationError("Incorrect password")

    logger.info("login.success", extra={"user_id": user.id})
    return user
