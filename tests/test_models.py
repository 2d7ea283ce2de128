"""
Tests for django-blog-cms models.
"""
import pytest
from django.db import IntegrityError

from blog_cms.models import Category, Post, PostCategory


def make_post(**kwargs):
    fields = {
        "title": "Hello World",
        "slug": "hello-world",
        "body": "My first post!",
        "excerpt": "Hello.",
        "author_name": "Ada",
    }
    fields.update(kwargs)
    return Post.objects.create(**fields)


class TestCategory:
    """Tests for Category model."""

    def test_create_category(self, db):
        cat = Category.objects.create(name="My Category", slug="my-category")
        assert str(cat) == "My Category"
        assert cat.description == ""
        assert cat.created_at is not None

    def test_slug_is_unique(self, db, category):
        with pytest.raises(IntegrityError):
            Category.objects.create(name="Other", slug=category.slug)

    def test_ordered_by_name(self, db):
        Category.objects.create(name="Zeta", slug="zeta")
        Category.objects.create(name="Alpha", slug="alpha")
        assert [c.name for c in Category.objects.all()] == ["Alpha", "Zeta"]

    def test_post_count_ignores_drafts(self, db, category, post, draft):
        draft.set_categories([category])
        assert category.post_count == 1

    def test_delete_keeps_posts(self, db, category, post):
        category.delete()

        assert Post.objects.filter(pk=post.pk).exists()
        assert not PostCategory.objects.filter(post=post).exists()


class TestPost:
    """Tests for Post model."""

    def test_create_post_defaults_to_draft(self, db):
        post = make_post()
        assert post.status == Post.Status.DRAFT
        assert not post.is_published
        assert post.published_at is None

    def test_derived_fields_on_save(self, db):
        post = make_post(body="word " * 450)
        assert post.word_count == 450
        assert post.reading_time == 3

    def test_derived_fields_recomputed_on_update(self, db):
        post = make_post(body="short body")
        post.body = "word " * 201
        post.save()
        post.refresh_from_db()

        assert post.word_count == 201
        assert post.reading_time == 2

    def test_words_per_minute_setting(self, db, settings):
        settings.BLOG_CMS = {"WORDS_PER_MINUTE": 100}
        post = make_post(body="word " * 150)
        assert post.reading_time == 2

    def test_slug_is_unique(self, db):
        make_post()
        with pytest.raises(IntegrityError):
            make_post(title="Another")

    def test_published_at_stamped_and_kept(self, db):
        post = make_post(status=Post.Status.PUBLISHED)
        first = post.published_at
        assert first is not None

        post.title = "Edited"
        post.save()
        assert post.published_at == first

    def test_draft_clears_published_at(self, db):
        post = make_post(status=Post.Status.PUBLISHED)
        post.status = Post.Status.DRAFT
        post.save()
        post.refresh_from_db()

        assert post.published_at is None

    def test_publish_and_unpublish(self, db, draft):
        draft.publish()
        draft.refresh_from_db()
        assert draft.is_published
        assert draft.published_at is not None

        draft.unpublish()
        draft.refresh_from_db()
        assert not draft.is_published
        assert draft.published_at is None

    def test_get_absolute_url(self, db, post):
        assert post.get_absolute_url() == "/blog/test-post/"

    def test_delete_removes_links(self, db, category, post):
        post.delete()

        assert not PostCategory.objects.exists()
        assert Category.objects.filter(pk=category.pk).exists()


class TestCategoryLinks:
    """Tests for the post/category join."""

    def test_set_categories_replaces_links(self, db, post, category):
        other = Category.objects.create(name="Other", slug="other")
        post.set_categories([other])

        assert list(post.categories.all()) == [other]
        assert list(category.posts.all()) == []

    def test_set_categories_ignores_duplicates(self, db, post, category):
        post.set_categories([category, category])
        assert PostCategory.objects.filter(post=post).count() == 1

    def test_set_categories_empty(self, db, post):
        post.set_categories([])
        assert post.categories.count() == 0


class TestPostQuerySet:
    """Tests for the published and in_categories filters."""

    def test_published_excludes_drafts_newest_first(self, db, post, draft):
        newer = make_post(slug="newer", status=Post.Status.PUBLISHED)
        assert list(Post.objects.published()) == [newer, post]

    def test_in_categories_matches_any(self, db, post, category):
        other = Category.objects.create(name="Other", slug="other")
        unrelated = Category.objects.create(name="Unrelated", slug="unrelated")
        second = make_post(slug="second", status=Post.Status.PUBLISHED)
        second.set_categories([other, category])
        make_post(slug="third", status=Post.Status.PUBLISHED).set_categories([unrelated])

        found = Post.objects.published().in_categories([category.pk, other.pk])
        assert sorted(p.slug for p in found) == ["second", "test-post"]

    def test_in_categories_empty_selection(self, db, post, draft):
        assert Post.objects.in_categories([]).count() == 2
