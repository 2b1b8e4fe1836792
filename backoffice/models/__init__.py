"""SQLAlchemy models package."""

from .base import Base
from .user import User
from .payment import Payment
from .skill import Skill
from .translation import Translation

__all__ = [
    "Base",
    "User",
    "Payment",
    "Skill",
    "Translation",
]
