"""
Configuration settings for django-blog-cms.

Override these in your Django settings.py:

    BLOG_CMS = {
        'WORDS_PER_MINUTE': 200,
        'POSTS_PER_PAGE': 12,
        'DASHBOARD_LOGIN_REQUIRED': True,
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Reading stats
    "WORDS_PER_MINUTE": 200,

    # Listing
    "POSTS_PER_PAGE": 12,
    "HOME_LATEST_POSTS": 3,

    # Slugs
    "SLUG_MAX_LENGTH": 100,

    # Management surface
    "DASHBOARD_LOGIN_REQUIRED": True,

    # Templates
    "SITE_NAME": "Blog",
}


class BlogCMSSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_cms.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_cms setting: {name}")

        user_settings = getattr(settings, "BLOG_CMS", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = BlogCMSSettings()
