from django.db import IntegrityError, transaction
from django.test import TestCase

from social.models import Block, Follow
from social.tests.helpers import make_account


class FollowModelTestCase(TestCase):
    def setUp(self):
        self.alice = make_account("alice")
        self.bob = make_account("bob")

    def test_follow_edge_is_directed(self):
        Follow.objects.create(follower=self.alice, following=self.bob)
        self.assertTrue(Follow.objects.filter(follower=self.alice, following=self.bob).exists())
        self.assertFalse(Follow.objects.filter(follower=self.bob, following=self.alice).exists())

    def test_duplicate_follow_rejected(self):
        Follow.objects.create(follower=self.alice, following=self.bob)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Follow.objects.create(follower=self.alice, following=self.bob)

    def test_self_follow_rejected(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Follow.objects.create(follower=self.alice, following=self.alice)

    def test_related_names(self):
        Follow.objects.create(follower=self.alice, following=self.bob)
        self.assertEqual(self.alice.following_edges.count(), 1)
        self.assertEqual(self.bob.follower_edges.count(), 1)


class BlockModelTestCase(TestCase):
    def setUp(self):
        self.alice = make_account("alice")
        self.bob = make_account("bob")

    def test_duplicate_block_rejected(self):
        Block.objects.create(blocker=self.alice, blocked=self.bob)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Block.objects.create(blocker=self.alice, blocked=self.bob)

    def test_self_block_rejected(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Block.objects.create(blocker=self.alice, blocked=self.alice)

    def test_deleting_account_removes_edges(self):
        Block.objects.create(blocker=self.alice, blocked=self.bob)
        self.bob.delete()
        self.assertFalse(Block.objects.exists())
