"""
Category Model

A label attached to one post. Categories are only ever created together
with their post, so there is no detached state. Names are not unique: two
posts tagged "python" each own their own "python" category row.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.database import Base

if TYPE_CHECKING:
    from blog_api.models.post import Post


class Category(Base):
    """
    Category model.

    Table: categories

    Indexes:
    - name: Non-unique index for exact-name lookups
    - post_id: Index for resolving a post's categories
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Category name (not unique across posts)"
    )

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    post: Mapped["Post"] = relationship("Post", back_populates="categories")

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name='{self.name}', post_id={self.post_id})"
