"""
Views for django-blog-cms.

Public views show published posts only. Dashboard views manage posts and
categories of any status.
"""
import logging
from urllib.parse import urlencode

from django.contrib import messages
from django.contrib.auth.mixins import AccessMixin
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.views.generic import (
    ListView,
    DetailView,
    CreateView,
    UpdateView,
    DeleteView,
    TemplateView,
)

from .conf import blog_settings
from .forms import CATEGORY_TAKEN, POST_SLUG_TAKEN, CategoryForm, PostForm, save_or_report
from .models import Post, Category

logger = logging.getLogger(__name__)


class HomeView(TemplateView):
    """Landing page with the latest published posts."""

    template_name = "blog_cms/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["latest_posts"] = (
            Post.objects.published().with_categories()[: blog_settings.HOME_LATEST_POSTS]
        )
        return context


class PostListView(ListView):
    """List published posts, optionally filtered by categories."""

    model = Post
    template_name = "blog_cms/post_list.html"
    context_object_name = "posts"

    def get_paginate_by(self, queryset):
        return blog_settings.POSTS_PER_PAGE

    def get_selected_categories(self):
        """Return ids of known categories named by ?category= parameters."""
        self.categories = list(Category.objects.all())
        requested = set(self.request.GET.getlist("category"))
        return [category.pk for category in self.categories if str(category.pk) in requested]

    def get_queryset(self):
        self.selected_categories = self.get_selected_categories()
        return (
            Post.objects.published()
            .in_categories(self.selected_categories)
            .with_categories()
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(self.get_filter_context())
        return context

    def get_filter_context(self):
        """Category badges with the query string that toggles each one."""
        selected = self.selected_categories
        return {
            "categories": self.categories,
            "selected_categories": selected,
            "category_filters": [
                {
                    "category": category,
                    "selected": category.pk in selected,
                    "query": self._toggle_query(selected, category.pk),
                }
                for category in self.categories
            ],
            "filter_query": urlencode([("category", pk) for pk in selected]),
        }

    @staticmethod
    def _toggle_query(selected, category_id):
        if category_id in selected:
            ids = [pk for pk in selected if pk != category_id]
        else:
            ids = selected + [category_id]
        return urlencode([("category", pk) for pk in ids])


class CategoryPostListView(PostListView):
    """List published posts in a single category."""

    template_name = "blog_cms/category_posts.html"

    def get_selected_categories(self):
        self.category = get_object_or_404(Category, slug=self.kwargs["slug"])
        return [self.category.pk]

    def get_filter_context(self):
        return {
            "category": self.category,
            "selected_categories": self.selected_categories,
            "filter_query": "",
        }


class PostDetailView(DetailView):
    """Display a single published post."""

    model = Post
    template_name = "blog_cms/post_detail.html"
    context_object_name = "post"

    def get_object(self, queryset=None):
        try:
            return Post.objects.published().with_categories().get(slug=self.kwargs["slug"])
        except Post.DoesNotExist:
            raise Http404("Post not found")


class DashboardAccessMixin(AccessMixin):
    """Require login for dashboard views unless DASHBOARD_LOGIN_REQUIRED is off."""

    def dispatch(self, request, *args, **kwargs):
        if blog_settings.DASHBOARD_LOGIN_REQUIRED and not request.user.is_authenticated:
            return self.handle_no_permission()
        return super().dispatch(request, *args, **kwargs)


class ModelFormSaveMixin:
    """
    Save the form, reporting database uniqueness failures as form errors.

    Subclasses name the field that carries the error and the success
    message to flash.
    """

    integrity_error_field = None
    integrity_error_message = ""
    success_message = ""

    def form_valid(self, form):
        obj = save_or_report(form, self.integrity_error_field, self.integrity_error_message)
        if obj is None:
            return self.form_invalid(form)

        self.object = obj
        logger.info("%s: %s %s", self.success_message, obj._meta.model_name, obj.pk)
        messages.success(self.request, self.success_message)
        return redirect(self.get_success_url())


class DeleteWithMessageMixin:
    """Hard-delete the object, then flash and log success_message."""

    success_message = ""

    def form_valid(self, form):
        pk = self.object.pk
        self.object.delete()
        logger.info("%s: %s %s", self.success_message, self.object._meta.model_name, pk)
        messages.success(self.request, self.success_message)
        return redirect(self.get_success_url())


class DashboardView(DashboardAccessMixin, ListView):
    """All posts regardless of status, newest first."""

    model = Post
    template_name = "blog_cms/dashboard/post_list.html"
    context_object_name = "posts"

    def get_queryset(self):
        return Post.objects.order_by("-created_at")


class PostCreateView(DashboardAccessMixin, ModelFormSaveMixin, CreateView):
    """Create a new post."""

    model = Post
    form_class = PostForm
    template_name = "blog_cms/dashboard/post_form.html"
    success_url = reverse_lazy("blog_cms:dashboard")
    success_message = "Post created successfully"
    integrity_error_field = "slug"
    integrity_error_message = POST_SLUG_TAKEN


class PostUpdateView(DashboardAccessMixin, ModelFormSaveMixin, UpdateView):
    """Edit an existing post."""

    model = Post
    form_class = PostForm
    template_name = "blog_cms/dashboard/post_form.html"
    success_url = reverse_lazy("blog_cms:dashboard")
    success_message = "Post updated successfully"
    integrity_error_field = "slug"
    integrity_error_message = POST_SLUG_TAKEN


class PostDeleteView(DashboardAccessMixin, DeleteWithMessageMixin, DeleteView):
    """Permanently delete a post."""

    model = Post
    template_name = "blog_cms/dashboard/post_confirm_delete.html"
    success_url = reverse_lazy("blog_cms:dashboard")
    success_message = "Post deleted successfully"


class CategoryListView(DashboardAccessMixin, ListView):
    """Manage categories."""

    model = Category
    template_name = "blog_cms/dashboard/category_list.html"
    context_object_name = "categories"


class CategoryCreateView(DashboardAccessMixin, ModelFormSaveMixin, CreateView):
    """Create a category."""

    model = Category
    form_class = CategoryForm
    template_name = "blog_cms/dashboard/category_form.html"
    success_url = reverse_lazy("blog_cms:category_list")
    success_message = "Category created successfully"
    integrity_error_message = CATEGORY_TAKEN


class CategoryUpdateView(DashboardAccessMixin, ModelFormSaveMixin, UpdateView):
    """Edit a category."""

    model = Category
    form_class = CategoryForm
    template_name = "blog_cms/dashboard/category_form.html"
    success_url = reverse_lazy("blog_cms:category_list")
    success_message = "Category updated successfully"
    integrity_error_message = CATEGORY_TAKEN


class CategoryDeleteView(DashboardAccessMixin, DeleteWithMessageMixin, DeleteView):
    """Delete a category. Posts keep existing, only their links go."""

    model = Category
    template_name = "blog_cms/dashboard/category_confirm_delete.html"
    success_url = reverse_lazy("blog_cms:category_list")
    success_message = "Category deleted successfully"
