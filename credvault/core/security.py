# credvault/core/security.py

from passlib.context import CryptContext


DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only reads this many bytes of a password.
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    Salted adaptive hashing for stored passwords.
    Every hash carries its own random salt; verification is constant time.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        # Unknown or corrupt hash formats count as a mismatch.
        try:
            # A longer password would match on its first 72 bytes alone.
            if len(plain_password.encode("utf-8")) > BCRYPT_MAX_BYTES:
                return False
            return self.pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False
