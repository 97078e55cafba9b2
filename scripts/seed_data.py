#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample data for development.

The GraphQL API has no way to create users, so this script is how authors
get into a fresh database. It also writes a couple of posts through
BlogRepository.create_post, the same path the createPost mutation uses.

USAGE:
    python scripts/seed_data.py            # add sample data
    python scripts/seed_data.py --clear    # wipe existing rows first
    python scripts/seed_data.py --users-only
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from blog_api.config import get_settings
from blog_api.database import SessionLocal, create_tables
from blog_api.models import Category, Post, User
from blog_api.services.repository import BlogRepository


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Category))
    db.execute(delete(Post))
    db.execute(delete(User))
    db.commit()
    print("Data cleared.")


def create_users(db: Session) -> list[User]:
    """Create sample users, skipping emails that already exist."""
    print("Creating users...")
    users_data = [
        {"email": "alice@example.com", "name": "Alice"},
        {"email": "bob@example.com", "name": "Bob"},
        {"email": "carol@example.com", "name": None},
    ]

    users = []
    for data in users_data:
        stmt = select(User).where(User.email == data["email"])
        existing = db.execute(stmt).scalar_one_or_none()
        if existing is not None:
            users.append(existing)
            continue
        user = User(**data)
        db.add(user)
        users.append(user)

    db.commit()
    for user in users:
        db.refresh(user)

    print(f"Created {len(users)} users.")
    return users


def create_posts(db: Session) -> list[Post]:
    """Create sample posts with categories."""
    print("Creating posts...")
    posts_data = [
        {
            "email": "alice@example.com",
            "title": "Getting started with GraphQL",
            "description": "Queries, mutations, and why the schema comes first.",
            "categories": ["graphql", "tutorial"],
        },
        {
            "email": "alice@example.com",
            "title": "Notes on SQLAlchemy 2.0",
            "description": "Typed mappings with Mapped[] and mapped_column().",
            "categories": ["python", "databases"],
        },
        {
            "email": "bob@example.com",
            "title": "Hello",
            "description": "First post.",
            "categories": [],
        },
    ]

    repository = BlogRepository(db)
    posts = [repository.create_post(**data) for data in posts_data]

    print(f"Created {len(posts)} posts.")
    return posts


def seed_database(clear_existing: bool = False, users_only: bool = False) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
        users_only: If True, only users are created.
    """
    settings = get_settings()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    # Create tables if they don't exist
    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        users = create_users(db)
        posts = [] if users_only else create_posts(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Users: {len(users)}")
        print(f"  - Posts: {len(posts)}")
        print(f"\nGraphQL endpoint at http://localhost:{settings.port}/graphql")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Seed the blog database with sample users and posts"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete existing users, posts and categories first"
    )
    parser.add_argument(
        "--users-only",
        action="store_true",
        help="Only create users"
    )

    args = parser.parse_args()
    seed_database(clear_existing=args.clear, users_only=args.users_only)


if __name__ == "__main__":
    main()
