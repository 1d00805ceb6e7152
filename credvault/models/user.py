# credvault/models/user.py

from sqlalchemy import Column, Integer, String
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Registered account.
    The unique index on email makes the store itself reject a second record
    for the same address.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    def to_public_dict(self) -> dict:
        return {"id": self.id, "username": self.username, "email": self.email}
