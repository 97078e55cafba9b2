"""
Post Model

A post written by exactly one User. The author is fixed when the post is
created. Categories are attached to the post as part of the same write.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.database import Base

if TYPE_CHECKING:
    from blog_api.models.category import Category
    from blog_api.models.user import User


class Post(Base):
    """
    Post model.

    Table: posts

    Fields:
    - title: Post title (required)
    - description: Post body (required)
    - author_id: Foreign key to users.id (required)

    Relationships:
    - author: Many-to-One, the user who wrote the post
    - categories: One-to-Many, categories created for this post
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Post title"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post body"
    )

    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    # Relationships
    author: Mapped["User"] = relationship("User", back_populates="posts")
    categories: Mapped[List["Category"]] = relationship(
        "Category",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author_id={self.author_id}, title='{self.title}')>"
