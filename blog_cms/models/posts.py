"""
Post and Category models for django-blog-cms.
"""
import logging

from django.db import models, transaction
from django.urls import reverse
from django.utils import timezone

from ..text import count_words, estimate_reading_time

logger = logging.getLogger(__name__)


class Category(models.Model):
    """
    Flat grouping for posts.

    Posts link to categories through PostCategory. Deleting a category
    removes those links but never the posts themselves.
    """

    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("blog_cms:category_posts", kwargs={"slug": self.slug})

    @property
    def post_count(self):
        """Return count of published posts in this category."""
        return self.posts.filter(status=Post.Status.PUBLISHED).count()


class PostQuerySet(models.QuerySet):
    """Query helpers for the public and dashboard listings."""

    def published(self):
        """Published posts, most recently published first."""
        return self.filter(status=Post.Status.PUBLISHED).order_by("-published_at", "-created_at")

    def in_categories(self, category_ids):
        """
        Posts linked to any of the given categories.

        Each post appears once no matter how many of the categories it
        carries. An empty selection leaves the queryset unfiltered.
        """
        category_ids = list(category_ids)
        if not category_ids:
            return self
        linked = PostCategory.objects.filter(category_id__in=category_ids).values("post_id")
        return self.filter(pk__in=linked)

    def with_categories(self):
        """Prefetch categories for card and detail rendering."""
        return self.prefetch_related("categories")


class Post(models.Model):
    """
    Blog post / article.

    word_count and reading_time are derived from the body on every save.
    published_at is stamped the first time a post is saved as published
    and cleared when it goes back to draft.
    """

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        PUBLISHED = "published", "Published"

    # Content
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    body = models.TextField()
    excerpt = models.TextField(blank=True, help_text="Brief summary shown on post cards.")
    author_name = models.CharField(max_length=100)

    # Status
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )
    published_at = models.DateTimeField(
        null=True,
        blank=True,
        db_index=True,
        help_text="When post was published",
    )

    # Reading stats
    word_count = models.PositiveIntegerField(default=0, editable=False)
    reading_time = models.PositiveIntegerField(
        default=0,
        editable=False,
        help_text="Estimated reading time in minutes",
    )

    # Taxonomy
    categories = models.ManyToManyField(
        Category,
        through="PostCategory",
        related_name="posts",
        blank=True,
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "-published_at"]),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        self.word_count = count_words(self.body)
        self.reading_time = estimate_reading_time(self.word_count)

        if self.status == self.Status.PUBLISHED:
            if not self.published_at:
                self.published_at = timezone.now()
        else:
            self.published_at = None

        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = set(update_fields) | {"word_count", "reading_time"}

        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("blog_cms:post_detail", kwargs={"slug": self.slug})

    @property
    def is_published(self):
        return self.status == self.Status.PUBLISHED

    def publish(self):
        """Publish the post, keeping the original publish date if any."""
        self.status = self.Status.PUBLISHED
        self.save(update_fields=["status", "published_at", "updated_at"])

    def unpublish(self):
        """Move the post back to draft."""
        self.status = self.Status.DRAFT
        self.save(update_fields=["status", "published_at", "updated_at"])

    @transaction.atomic
    def set_categories(self, categories):
        """
        Replace this post's category links with the given categories.

        Old links are deleted and new ones inserted, so each link's
        created_at reflects the latest save.
        """
        unique = {category.pk: category for category in categories}
        PostCategory.objects.filter(post=self).delete()
        PostCategory.objects.bulk_create(
            [PostCategory(post=self, category=category) for category in unique.values()]
        )
        logger.debug("Post %s linked to %d categories", self.pk, len(unique))


class PostCategory(models.Model):
    """Join row linking a post to a category."""

    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name="post_categories")
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name="post_categories",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "Post categories"
        constraints = [
            models.UniqueConstraint(fields=["post", "category"], name="unique_post_category"),
        ]

    def __str__(self):
        return f"{self.post} in {self.category}"
