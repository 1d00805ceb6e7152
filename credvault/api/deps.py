# credvault/api/deps.py

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from credvault.core.security import PasswordHasher
from credvault.core.validation import PasswordPolicy
from credvault.database import get_db
from credvault.store import CredentialStore


def get_store(db: Session = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_password_policy(request: Request) -> PasswordPolicy:
    return request.app.state.password_policy
