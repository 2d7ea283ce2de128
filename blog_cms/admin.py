"""
Django admin configuration for blog_cms.
"""
from django.contrib import admin

from .models import Category, Post, PostCategory


class PostCategoryInline(admin.TabularInline):
    """Inline for managing category links on posts."""

    model = PostCategory
    extra = 1
    fields = ["category"]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "post_count", "created_at"]
    search_fields = ["name", "slug", "description"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["created_at"]


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = [
        "title_preview",
        "author_name",
        "status",
        "reading_time",
        "published_at",
        "created_at",
    ]
    list_filter = ["status", "categories", "created_at"]
    search_fields = ["title", "body", "author_name"]
    date_hierarchy = "created_at"
    inlines = [PostCategoryInline]
    readonly_fields = [
        "word_count",
        "reading_time",
        "published_at",
        "created_at",
        "updated_at",
    ]
    prepopulated_fields = {"slug": ("title",)}

    fieldsets = (
        (None, {
            "fields": ("title", "slug", "excerpt", "body", "author_name")
        }),
        ("Status", {
            "fields": ("status", "published_at")
        }),
        ("Reading stats", {
            "fields": ("word_count", "reading_time"),
            "classes": ("collapse",),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_posts", "unpublish_posts"]

    @admin.display(description="Title")
    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    @admin.action(description="Publish selected posts")
    def publish_posts(self, request, queryset):
        for post in queryset:
            post.publish()
        self.message_user(request, f"{queryset.count()} posts published.")

    @admin.action(description="Move selected posts to draft")
    def unpublish_posts(self, request, queryset):
        for post in queryset:
            post.unpublish()
        self.message_user(request, f"{queryset.count()} posts moved to draft.")
