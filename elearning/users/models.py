"""
E-Learning User Management Models

This module defines the user-related models for the exam backend,
extending Django's built-in User model with a role used by the
authorization layer.

Models:
- Profile: Role assignment for every user account

Features:
- Automatic profile creation for new users
- Role resolution with superuser fallback
- Display name helper used in reports

Author: Exam Backend Team
Version: 1.0.0
"""

from django.db import models
from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils.translation import gettext_lazy as _


class UserRole(models.TextChoices):
    USER = "user", _("User")
    ADMIN = "admin", _("Admin")
    SUPER_ADMIN = "super_admin", _("Super Admin")


class Profile(models.Model):
    """
    Extended user profile carrying the user's role.

    Attributes:
        user: One-to-one relationship with Django User model
        role: Role name looked up in the role permission table

    The profile is automatically created when a new user is registered
    and maintains a one-to-one relationship with the User model.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
        verbose_name=_("User"),
        help_text=_("Associated user account"),
    )

    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.USER,
        verbose_name=_("Role"),
        help_text=_("Role used for exam management and report permissions"),
    )

    class Meta:
        verbose_name = _("User Profile")
        verbose_name_plural = _("User Profiles")
        db_table = "elearning_profile"

    def __str__(self) -> str:
        return f"{self.user.username} Profile ({self.role})"

    def __repr__(self) -> str:
        return f"<Profile(user={self.user.username}, role={self.role})>"


def resolve_role(user) -> str:
    """
    Return the effective role of a user.

    Superusers always count as super admins. Users without a profile fall
    back to the plain user role.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        return UserRole.USER
    if getattr(user, "is_superuser", False):
        return UserRole.SUPER_ADMIN
    profile = getattr(user, "profile", None)
    if profile is None:
        return UserRole.USER
    return profile.role


def display_name(user) -> str:
    """Return "first last" for a user, or the username when both are empty."""
    full_name = f"{user.first_name} {user.last_name}".strip()
    return full_name or user.username


# --- Signal Handlers for Automatic Profile Management ---


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_profile(sender, instance, created: bool, **kwargs) -> None:
    """
    Automatically create a user profile when a new user is created.

    Args:
        sender: The User model class
        instance: The actual User instance that was saved
        created: Boolean indicating if this is a new instance
        **kwargs: Additional signal arguments
    """
    if created:
        Profile.objects.get_or_create(user=instance)
