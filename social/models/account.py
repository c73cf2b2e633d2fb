"""Custom account model with profile metadata and avatar helpers."""

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxLengthValidator, RegexValidator
from django.db import models
from libgravatar import Gravatar


class Account(AbstractUser):
    """Identity record for a member of the network."""

    ROLE_USER = "user"
    ROLE_ADMIN = "admin"

    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Admin"),
    ]

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    display_name = models.CharField(max_length=100, blank=True)
    avatar = models.CharField(max_length=500, blank=True, null=True)
    story = models.TextField(
        max_length=500,
        blank=True,
        help_text="short bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER)

    class Meta:
        """Default ordering for accounts."""
        db_table = "account"
        ordering = ['display_name', 'username']

    def __str__(self):
        return self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the account's email."""
        gravatar_object = Gravatar(self.email or self.username)
        return gravatar_object.get_image(size=size, default='mp')

    @property
    def avatar_url(self):
        """Stored avatar reference, or a gravatar fallback."""
        return self.avatar or self.gravatar()

    def summary(self):
        """Display fields attached to posts, comments and messages."""
        return {
            "id": self.id,
            "username": self.username,
            "display_name": self.display_name or None,
            "avatar": self.avatar or None,
        }
