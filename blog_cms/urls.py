"""
URL configuration for django-blog-cms.

Include in your project urls.py:

    path('', include('blog_cms.urls')),
"""
from django.urls import path

from . import views

app_name = "blog_cms"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),

    # Public blog
    path("blog/", views.PostListView.as_view(), name="post_list"),
    path("blog/category/<slug:slug>/", views.CategoryPostListView.as_view(), name="category_posts"),
    path("blog/<slug:slug>/", views.PostDetailView.as_view(), name="post_detail"),

    # Post management
    path("dashboard/", views.DashboardView.as_view(), name="dashboard"),
    path("dashboard/posts/new/", views.PostCreateView.as_view(), name="post_create"),
    path("dashboard/posts/<int:pk>/edit/", views.PostUpdateView.as_view(), name="post_update"),
    path("dashboard/posts/<int:pk>/delete/", views.PostDeleteView.as_view(), name="post_delete"),

    # Category management
    path("categories/", views.CategoryListView.as_view(), name="category_list"),
    path("categories/new/", views.CategoryCreateView.as_view(), name="category_create"),
    path("categories/<int:pk>/edit/", views.CategoryUpdateView.as_view(), name="category_update"),
    path("categories/<int:pk>/delete/", views.CategoryDeleteView.as_view(), name="category_delete"),
]
