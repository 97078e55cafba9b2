"""
Blog Repository

All reads and writes the GraphQL layer performs go through BlogRepository.
One repository wraps one SQLAlchemy session and is built per request by the
GraphQL context, so resolvers never reach for a module-level client and
tests can hand them any session (or a mock).

Reads are exact-match lookups with no pagination and no caching: every call
re-queries the store.

Writes:
    create_post() is the only write. The post and all of its categories are
    added to the session and committed together, so either everything is
    persisted or nothing is. It returns after the commit, which means a
    caller that reads the post's categories afterwards sees all of them.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_api.models import Category, Post, User
from blog_api.services.exceptions import UserNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class BlogRepository:
    """
    Persistence access for users, posts and categories.

    Args:
        db: Database session owned by the caller (closed by get_db)
    """

    def __init__(self, db: Session):
        self.db = db

    # =========================================================================
    # Users
    # =========================================================================

    def list_users(self) -> list[User]:
        """Return every user, in id order."""
        stmt = select(User).order_by(User.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_user_by_email(self, email: str) -> User | None:
        """Return the user with exactly this email, or None."""
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_user(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    # =========================================================================
    # Posts
    # =========================================================================

    def list_posts_by_author_email(self, email: str) -> list[Post]:
        """
        Return every post whose author has exactly this email.

        An unknown email is not an error; it simply matches no posts.
        """
        stmt = (
            select(Post)
            .join(Post.author)
            .where(User.email == email)
            .order_by(Post.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_posts_by_author(self, user_id: int) -> list[Post]:
        stmt = select(Post).where(Post.author_id == user_id).order_by(Post.id)
        return list(self.db.execute(stmt).scalars().all())

    # =========================================================================
    # Categories
    # =========================================================================

    def list_categories(self, name: str | None = None) -> list[Category]:
        """
        Return all categories, or only those named exactly `name`.

        Names are not unique, so a name can match categories of many posts.
        An empty name is treated like no name.
        """
        stmt = select(Category)
        if name:
            stmt = stmt.where(Category.name == name)
        stmt = stmt.order_by(Category.id)
        return list(self.db.execute(stmt).scalars().all())

    def list_categories_for_post(self, post_id: int) -> list[Category]:
        stmt = (
            select(Category)
            .where(Category.post_id == post_id)
            .order_by(Category.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_post_for_category(self, category_id: int) -> Post | None:
        """Return the post the category belongs to, or None for an unknown id."""
        stmt = (
            select(Post)
            .join(Post.categories)
            .where(Category.id == category_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    # =========================================================================
    # Writes
    # =========================================================================

    def create_post(
        self,
        email: str,
        title: str,
        description: str,
        categories: Sequence[str | None] | None = None,
    ) -> Post:
        """
        Create a post for the user with `email` and attach one category per name.

        Args:
            email: Author's email (must match an existing user exactly)
            title: Post title
            description: Post body
            categories: Category names; None is treated as no categories

        Returns:
            The committed Post

        Raises:
            UserNotFoundError: No user has this email; nothing is written
            ValidationError: A category name is null; nothing is written
            SQLAlchemyError: The store rejected the write; it is rolled back
        """
        author = self.get_user_by_email(email)
        if author is None:
            raise UserNotFoundError(email)

        names = list(categories or [])
        if any(name is None for name in names):
            raise ValidationError("Category names must not be null")

        post = Post(title=title, description=description, author=author)
        post.categories = [Category(name=name) for name in names]
        self.db.add(post)

        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Failed to create post for {email}", exc_info=True)
            raise

        self.db.refresh(post)
        logger.info(
            f"Created post {post.id} for user {author.id} "
            f"with {len(names)} categories"
        )
        return post
