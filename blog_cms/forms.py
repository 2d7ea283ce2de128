"""
Forms for managing posts and categories.
"""
import logging

from django import forms
from django.db import IntegrityError, transaction

from .models import Category, Post
from .text import count_words, estimate_reading_time, generate_slug

logger = logging.getLogger(__name__)

POST_SLUG_TAKEN = "A post with this slug already exists."
CATEGORY_TAKEN = "A category with this name or slug already exists."


class SlugFromFieldMixin:
    """
    Fill a blank slug from another field when creating an object.

    Existing objects keep their slug unless the user edits it, so
    published URLs do not move when a title changes.
    """

    slug_source_field = None

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance._state.adding:
            self.fields["slug"].required = False
            self.fields["slug"].help_text = (
                f"Leave blank to generate from the {self.slug_source_field}."
            )

    def clean_slug(self):
        slug = self.cleaned_data.get("slug", "")
        if slug or not self.instance._state.adding:
            return slug

        source = self.cleaned_data.get(self.slug_source_field, "")
        slug = generate_slug(source)
        if not slug:
            raise forms.ValidationError(
                f"Could not generate a slug from the {self.slug_source_field}; enter one."
            )
        return slug


class PostForm(SlugFromFieldMixin, forms.ModelForm):
    """Create or edit a post together with its category links."""

    slug_source_field = "title"

    categories = forms.ModelMultipleChoiceField(
        queryset=Category.objects.all(),
        widget=forms.CheckboxSelectMultiple,
        required=False,
    )

    class Meta:
        model = Post
        fields = ["title", "slug", "author_name", "status", "excerpt", "body"]
        widgets = {
            "excerpt": forms.Textarea(attrs={"rows": 3, "placeholder": "Brief summary of the post"}),
            "body": forms.Textarea(attrs={"rows": 16, "placeholder": "Write your post content..."}),
        }
        labels = {"author_name": "Author name"}
        # Unique pre-check message; the database constraint stays authoritative.
        error_messages = {
            "slug": {"unique": POST_SLUG_TAKEN},
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk:
            self.initial.setdefault("categories", list(self.instance.categories.all()))

    @property
    def reading_stats(self):
        """Return (word_count, reading_time) for the body being edited."""
        if self.is_bound:
            body = self.data.get(self.add_prefix("body"), "")
        else:
            body = self.instance.body or ""
        words = count_words(body)
        return words, estimate_reading_time(words)

    def save(self, commit=True):
        post = super().save(commit=False)
        if commit:
            with transaction.atomic():
                save_row(post)
                self._save_m2m()
        return post

    def _save_m2m(self):
        super()._save_m2m()
        self.instance.set_categories(self.cleaned_data["categories"])


class CategoryForm(SlugFromFieldMixin, forms.ModelForm):
    """Create or edit a category."""

    slug_source_field = "name"

    class Meta:
        model = Category
        fields = ["name", "slug", "description"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }
        error_messages = {
            "name": {"unique": CATEGORY_TAKEN},
            "slug": {"unique": CATEGORY_TAKEN},
        }

    def save(self, commit=True):
        category = super().save(commit=False)
        if commit:
            save_row(category)
        return category


class RowIntegrityError(IntegrityError):
    """The database rejected the form's own row, not a related write."""


def save_row(instance):
    """
    Save a single model row, tagging integrity failures as RowIntegrityError.

    The savepoint keeps the surrounding transaction usable after a
    rejected insert or update.
    """
    try:
        with transaction.atomic():
            instance.save()
    except IntegrityError as exc:
        raise RowIntegrityError(*exc.args) from exc
    return instance


def save_or_report(form, field, message):
    """
    Save a model form, turning a rejected row write into a form error.

    Returns the saved object, or None when the database rejected the
    form's row. Nothing is persisted in that case. Integrity failures
    from related writes, such as category links, propagate unchanged.
    """
    try:
        with transaction.atomic():
            return form.save()
    except RowIntegrityError:
        logger.warning(
            "Integrity error saving %s: %s",
            form._meta.model.__name__,
            message,
            exc_info=True,
        )
        form.add_error(field, message)
        return None
