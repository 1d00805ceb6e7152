# credvault/store.py

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from credvault.core.errors import DuplicateAccountError, StoreError
from credvault.core.logging import LOGGER_NAME
from credvault.models.user import User


logger = logging.getLogger(LOGGER_NAME)


class CredentialStore:
    """
    User records keyed by email. Exact-match lookup and insert only.

    Driver failures surface as StoreError. An insert that trips the unique
    email index surfaces as DuplicateAccountError, which covers two signups
    racing past the lookup.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            raise StoreError("User lookup failed") from e

    def insert(self, username: str, email: str, password_hash: str) -> User:
        user = User(username=username, email=email, password_hash=password_hash)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("store.duplicate_insert")
            raise DuplicateAccountError("Email already registered") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("User insert failed") from e
        return user
