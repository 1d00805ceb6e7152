# credvault/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()

from .user import User  # noqa: E402,F401
