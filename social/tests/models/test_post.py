from django.db import IntegrityError, transaction
from django.test import TestCase

from social.models import CommentLike, Comment, PostImage, PostLike
from social.tests.helpers import make_account, make_post


class PostModelTestCase(TestCase):
    def setUp(self):
        self.author = make_account("author")
        self.post = make_post(author=self.author, title="Morning run")

    def test_defaults(self):
        post = make_post(author=self.author)
        self.assertEqual(post.heart_count, 0)
        self.assertEqual(post.mode, "public")

    def test_str_uses_title(self):
        self.assertEqual(str(self.post), "Morning run")

    def test_image_paths_follow_position(self):
        PostImage.objects.create(post=self.post, image="b.png", position=1)
        PostImage.objects.create(post=self.post, image="a.png", position=0)
        self.assertEqual(self.post.image_paths, ["a.png", "b.png"])

    def test_post_like_unique_per_user(self):
        PostLike.objects.create(post=self.post, user=self.author)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                PostLike.objects.create(post=self.post, user=self.author)

    def test_comment_like_unique_per_user(self):
        comment = Comment.objects.create(post=self.post, author=self.author, content="hi")
        CommentLike.objects.create(comment=comment, user=self.author)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                CommentLike.objects.create(comment=comment, user=self.author)

    def test_replies_related_name(self):
        parent = Comment.objects.create(post=self.post, author=self.author, content="top")
        Comment.objects.create(post=self.post, author=self.author, content="reply", parent=parent)
        self.assertEqual(parent.replies.count(), 1)
