"""
Post + PostImage models

Post:
- `author` links the post to the account that created it.
- `content_type` is one of text / image / video; the random feed serves one type.
- `mode` is the visibility policy as stored (public / friends / private). It is
  kept as free text and parsed by `social.services.privacy.PostMode` when read,
  so legacy variants such as "Friend" or "friends " still resolve.
- `heart_count` is a denormalized counter of PostLike rows. It is adjusted in
  the same transaction as the like row and can be rebuilt with the
  `reconcile_like_counts` management command.

PostImage:
- Ordered attachments (`position` 0, 1, 2, ...) stored as path references.
"""

from django.conf import settings
from django.db import models


class Post(models.Model):
    TYPE_TEXT = "text"
    TYPE_IMAGE = "image"
    TYPE_VIDEO = "video"

    TYPE_CHOICES = [
        (TYPE_TEXT, "Text"),
        (TYPE_IMAGE, "Image"),
        (TYPE_VIDEO, "Video"),
    ]

    MODE_PUBLIC = "public"
    MODE_FRIENDS = "friends"
    MODE_PRIVATE = "private"

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='posts',
        db_column='author_id'
    )
    content_type = models.CharField(max_length=10, choices=TYPE_CHOICES, default=TYPE_TEXT)
    mode = models.CharField(max_length=20, blank=True, default=MODE_PUBLIC)

    title = models.CharField(max_length=255, blank=True)
    content = models.TextField(blank=True)
    video = models.CharField(max_length=500, blank=True, null=True)
    topic = models.CharField(max_length=100, blank=True)
    sports = models.CharField(max_length=100, blank=True)

    heart_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'post'
        indexes = [
            models.Index(fields=["content_type"], name="post_content_type_idx"),
            models.Index(fields=["author"], name="post_author_idx"),
        ]

    def __str__(self):
        return self.title or f"Post {self.pk}"

    @property
    def image_paths(self):
        return [img.image for img in self.images.all()]


class PostImage(models.Model):
    post = models.ForeignKey(
        Post,
        related_name="images",
        on_delete=models.CASCADE,
    )
    image = models.CharField(max_length=500)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'post_image'
        ordering = ["position", "id"]

    def __str__(self):
        return f"Image for {self.post_id}"
