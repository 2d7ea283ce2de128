"""
Text helpers for slugs and reading stats.
"""
import math
import re

from django.core.exceptions import ImproperlyConfigured

from .conf import blog_settings

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_EDGE_HYPHENS = re.compile(r"(^-|-$)")


def generate_slug(text, max_length=None):
    """
    Build a URL-safe slug from a title or name.

    Lowercases the text, collapses every run of characters outside
    [a-z0-9] into a single hyphen and trims hyphens from both ends.
    Non-ASCII letters are treated as separators ("Café" -> "caf").
    """
    if max_length is None:
        max_length = blog_settings.SLUG_MAX_LENGTH
    slug = _EDGE_HYPHENS.sub("", _NON_ALNUM.sub("-", text.lower()))
    return slug[:max_length].rstrip("-")


def count_words(text):
    """Return the number of whitespace-separated words in text."""
    return len(text.split())


def validate_words_per_minute(value):
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ImproperlyConfigured(
            f"BLOG_CMS['WORDS_PER_MINUTE'] must be a positive integer, got {value!r}"
        )
    return value


def estimate_reading_time(text_or_count, words_per_minute=None):
    """
    Estimate reading time in whole minutes, rounded up.

    Accepts either the body text or a precomputed word count.
    """
    if words_per_minute is None:
        words_per_minute = blog_settings.WORDS_PER_MINUTE
    validate_words_per_minute(words_per_minute)

    if isinstance(text_or_count, str):
        words = count_words(text_or_count)
    else:
        words = text_or_count
    return math.ceil(words / words_per_minute)
