"""Template context processors for blog_cms."""
from .conf import blog_settings


def site(request):
    """Expose the configured site name to templates as ``site_name``."""
    return {"site_name": blog_settings.SITE_NAME}
