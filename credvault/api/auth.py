# credvault/api/auth.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status

from credvault.api.deps import get_hasher, get_password_policy, get_store
from credvault.core.credentials import authenticate_user, register_user
from credvault.core.security import PasswordHasher
from credvault.core.validation import PasswordPolicy
from credvault.store import CredentialStore


router = APIRouter()


# Missing fields default to "" so they are reported by the field rules.
class SignupRequest(BaseModel):
    username: str = ""
    email: str = ""
    password: str = ""


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    store: CredentialStore = Depends(get_store),
    hasher: PasswordHasher = Depends(get_hasher),
    policy: PasswordPolicy = Depends(get_password_policy),
):
    user = register_user(store, hasher, policy, body.username, body.email, body.password)
    return {"message": "User created successfully", "user": user.to_public_dict()}


@router.post("/login")
def login(
    body: LoginRequest,
    store: CredentialStore = Depends(get_store),
    hasher: PasswordHasher = Depends(get_hasher),
):
    authenticate_user(store, hasher, body.email, body.password)
    return {"message": "Login successful"}
