"""
User Model

Represents a blog author. Users are provisioned outside the API (seed
script or direct inserts); the GraphQL API only reads them and attaches
new posts to them by email.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.database import Base

if TYPE_CHECKING:
    from blog_api.models.post import Post


class User(Base):
    """
    User model.

    Table: users

    Relationships:
    - posts: One-to-Many, every Post authored by this user

    Indexes:
    - Primary key on id (automatic)
    - email: Unique index, the lookup key used by every query and mutation

    Example:
        user = User(email="alice@example.com", name="Alice")
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Email address, unique per user"
    )

    name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Display name"
    )

    posts: Mapped[List["Post"]] = relationship(
        "Post",
        back_populates="author",
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}')"
