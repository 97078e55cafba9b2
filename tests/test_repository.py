"""
BlogRepository Tests

Tests for persistence access without going through GraphQL:
- User, post and category lookups
- createPost semantics (author resolution, categories, atomicity)
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.models import Category, Post, User
from blog_api.services.exceptions import (
    NotFoundError,
    UserNotFoundError,
    ValidationError,
)
from blog_api.services.repository import BlogRepository


def count_rows(db: Session, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


# =============================================================================
# Read Tests
# =============================================================================


class TestUserLookups:
    """Tests for user reads."""

    def test_list_users_empty(self, repository: BlogRepository):
        assert repository.list_users() == []

    def test_list_users_returns_every_user_once(
        self,
        repository: BlogRepository,
        sample_user: User,
        second_user: User,
    ):
        users = repository.list_users()

        assert [u.id for u in users] == sorted({sample_user.id, second_user.id})

    def test_get_user_by_email(self, repository: BlogRepository, sample_user: User):
        assert repository.get_user_by_email("user@example.com").id == sample_user.id

    def test_get_user_by_email_is_exact_match(
        self,
        repository: BlogRepository,
        sample_user: User,
    ):
        assert repository.get_user_by_email("USER@example.com") is None
        assert repository.get_user_by_email("user@example") is None

    def test_get_user_by_unknown_email(self, repository: BlogRepository):
        assert repository.get_user_by_email("nobody@example.com") is None


class TestPostLookups:
    """Tests for post reads."""

    def test_posts_by_author_email(
        self,
        repository: BlogRepository,
        multiple_posts: list[Post],
    ):
        posts = repository.list_posts_by_author_email("user@example.com")

        assert {p.id for p in posts} == {p.id for p in multiple_posts}

    def test_posts_for_user_without_posts(
        self,
        repository: BlogRepository,
        second_user: User,
        sample_post: Post,
    ):
        assert repository.list_posts_by_author_email(second_user.email) == []

    def test_posts_for_unknown_author(self, repository: BlogRepository, sample_post: Post):
        assert repository.list_posts_by_author_email("ghost@example.com") == []

    def test_posts_by_author_id(
        self,
        repository: BlogRepository,
        sample_user: User,
        sample_post: Post,
    ):
        assert [p.id for p in repository.list_posts_by_author(sample_user.id)] == [
            sample_post.id
        ]


class TestCategoryLookups:
    """Tests for category reads."""

    def test_list_all_categories(self, repository: BlogRepository, sample_post: Post):
        names = {c.name for c in repository.list_categories()}

        assert names == {"python", "graphql"}

    def test_filter_by_name_spans_posts(
        self,
        repository: BlogRepository,
        multiple_posts: list[Post],
    ):
        categories = repository.list_categories("news")

        assert len(categories) == 3
        assert {c.post_id for c in categories} == {p.id for p in multiple_posts}

    def test_filter_by_unknown_name(self, repository: BlogRepository, sample_post: Post):
        assert repository.list_categories("cooking") == []

    def test_empty_name_lists_everything(
        self,
        repository: BlogRepository,
        sample_post: Post,
    ):
        assert {c.name for c in repository.list_categories("")} == {"python", "graphql"}

    def test_categories_for_post(
        self,
        repository: BlogRepository,
        multiple_posts: list[Post],
    ):
        post = multiple_posts[1]
        names = {c.name for c in repository.list_categories_for_post(post.id)}

        assert names == {"news", "topic-2"}

    def test_post_for_category(self, repository: BlogRepository, sample_post: Post):
        category = sample_post.categories[0]

        assert repository.get_post_for_category(category.id).id == sample_post.id

    def test_post_for_unknown_category(self, repository: BlogRepository):
        assert repository.get_post_for_category(9999) is None


# =============================================================================
# Write Tests
# =============================================================================


class TestCreatePost:
    """Tests for BlogRepository.create_post."""

    def test_create_post_with_categories(
        self,
        repository: BlogRepository,
        sample_user: User,
    ):
        post = repository.create_post(
            email="user@example.com",
            title="T",
            description="D",
            categories=["a", "b"],
        )

        assert post.id is not None
        assert post.author_id == sample_user.id
        assert post.created_at is not None
        assert post.updated_at is not None
        assert sorted(c.name for c in repository.list_categories_for_post(post.id)) == [
            "a",
            "b",
        ]

    def test_create_post_without_categories(
        self,
        repository: BlogRepository,
        sample_user: User,
    ):
        post = repository.create_post("user@example.com", "T", "D", [])

        assert repository.list_categories_for_post(post.id) == []

    def test_omitted_categories_mean_none(
        self,
        repository: BlogRepository,
        sample_user: User,
    ):
        post = repository.create_post("user@example.com", "T", "D", None)

        assert repository.list_categories_for_post(post.id) == []

    def test_duplicate_category_names_create_separate_rows(
        self,
        repository: BlogRepository,
        sample_user: User,
    ):
        post = repository.create_post("user@example.com", "T", "D", ["x", "x"])

        assert len(repository.list_categories_for_post(post.id)) == 2

    def test_unknown_author_writes_nothing(
        self,
        repository: BlogRepository,
        db_session: Session,
        sample_user: User,
    ):
        with pytest.raises(UserNotFoundError) as exc_info:
            repository.create_post("ghost@example.com", "T", "D", ["a"])

        assert exc_info.value.email == "ghost@example.com"
        assert "ghost@example.com" in str(exc_info.value)
        assert isinstance(exc_info.value, NotFoundError)
        assert count_rows(db_session, Post) == 0
        assert count_rows(db_session, Category) == 0

    def test_null_category_name_writes_nothing(
        self,
        repository: BlogRepository,
        db_session: Session,
        sample_user: User,
    ):
        with pytest.raises(ValidationError):
            repository.create_post("user@example.com", "T", "D", ["a", None])

        assert count_rows(db_session, Post) == 0
        assert count_rows(db_session, Category) == 0

    def test_store_failure_rolls_back_whole_post(
        self,
        repository: BlogRepository,
        db_session: Session,
        sample_user: User,
        failing_category_insert,
    ):
        """A category insert failure leaves neither the post nor any category."""
        with pytest.raises(IntegrityError):
            repository.create_post("user@example.com", "T", "D", ["a", "b"])

        assert count_rows(db_session, Post) == 0
        assert count_rows(db_session, Category) == 0
        # Rows committed before the failed write survive the rollback
        assert repository.get_user_by_email("user@example.com").id == sample_user.id

    def test_session_usable_after_failed_write(
        self,
        repository: BlogRepository,
        db_session: Session,
        sample_user: User,
        failing_category_insert,
    ):
        with pytest.raises(IntegrityError):
            repository.create_post("user@example.com", "T", "D", ["a"])

        post = repository.create_post("user@example.com", "T2", "D2", [])

        assert [p.id for p in repository.list_posts_by_author(sample_user.id)] == [post.id]
