"""Django app configuration for blog_cms."""
from django.apps import AppConfig


class BlogCMSConfig(AppConfig):
    """Configuration for the blog CMS app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "blog_cms"
    verbose_name = "Blog CMS"

    def ready(self):
        """Validate settings when the app loads."""
        from .conf import blog_settings
        from .text import validate_words_per_minute

        validate_words_per_minute(blog_settings.WORDS_PER_MINUTE)
