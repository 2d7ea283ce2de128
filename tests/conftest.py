"""
Shared fixtures for django-blog-cms tests.
"""
import pytest
from django.contrib.auth import get_user_model

from blog_cms.models import Category, Post

User = get_user_model()


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def auth_client(client, user):
    """Client logged in as the test user."""
    client.force_login(user)
    return client


@pytest.fixture
def category(db):
    """Create a test category."""
    return Category.objects.create(
        name="Test Category",
        slug="test-category",
    )


@pytest.fixture
def post(db, category):
    """Create a published test post in the test category."""
    post = Post.objects.create(
        title="Test Post",
        slug="test-post",
        body="This is a test post body.",
        excerpt="A test post.",
        author_name="Ada",
        status=Post.Status.PUBLISHED,
    )
    post.set_categories([category])
    return post


@pytest.fixture
def draft(db):
    """Create a draft post."""
    return Post.objects.create(
        title="Draft Post",
        slug="draft-post",
        body="Work in progress",
        excerpt="Not ready.",
        author_name="Ada",
    )
