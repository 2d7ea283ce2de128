"""
django-blog-cms - A small Django blogging front end.

Features:
- Public blog listing with category filtering
- Draft and published post lifecycle
- Word count and reading time derived on every save
- Dashboard for managing posts and categories
"""

__version__ = "0.1.0"
__author__ = "Nestor Wheelock"
