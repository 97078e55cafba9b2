"""
Test Suite for the Blog GraphQL API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_repository.py: BlogRepository reads and the createPost write
- test_graphql.py: Queries, mutations and relationship fields over /graphql
- test_config.py: Settings validation
- test_main.py: Health and root endpoints

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_graphql.py

    # Run with verbose output
    pytest -v
"""
