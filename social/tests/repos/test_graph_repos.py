from django.test import TestCase

from social.models import Follow
from social.repos import AccountRepo, BlockRepo, FollowRepo
from social.tests.helpers import make_account, make_block


class FollowRepoTests(TestCase):
    def setUp(self):
        self.repo = FollowRepo()
        self.viewer = make_account("viewer")
        self.a = make_account("aaa")
        self.b = make_account("bbb")
        Follow.objects.create(follower=self.viewer, following=self.a)
        Follow.objects.create(follower=self.b, following=self.viewer)

    def test_following_among(self):
        self.assertEqual(self.repo.following_among(self.viewer.id, [self.a.id, self.b.id]), {self.a.id})

    def test_followers_among(self):
        self.assertEqual(self.repo.followers_among(self.viewer.id, [self.a.id, self.b.id]), {self.b.id})

    def test_following_among_is_one_query(self):
        with self.assertNumQueries(1):
            self.repo.following_among(self.viewer.id, range(1, 500))

    def test_create_edge_is_idempotent(self):
        edge, created = self.repo.create_edge(self.viewer.id, self.a.id)
        self.assertFalse(created)
        self.assertEqual(Follow.objects.filter(follower=self.viewer, following=self.a).count(), 1)

    def test_delete_edge_returns_count(self):
        self.assertEqual(self.repo.delete_edge(self.viewer.id, self.a.id), 1)
        self.assertEqual(self.repo.delete_edge(self.viewer.id, self.a.id), 0)

    def test_counts(self):
        self.assertEqual(self.repo.followers_count(self.viewer.id), 1)
        self.assertEqual(self.repo.following_count(self.viewer.id), 1)


class BlockRepoTests(TestCase):
    def setUp(self):
        self.repo = BlockRepo()
        self.viewer = make_account("viewer")
        self.a = make_account("aaa")
        self.b = make_account("bbb")
        make_block(self.viewer, self.b)

    def test_blocked_among(self):
        self.assertEqual(self.repo.blocked_among(self.viewer.id, [self.a.id, self.b.id]), {self.b.id})

    def test_blocked_ids(self):
        self.assertEqual(self.repo.blocked_ids(self.viewer.id), [self.b.id])
        self.assertEqual(self.repo.blocked_ids(self.b.id), [])


class AccountRepoTests(TestCase):
    def setUp(self):
        self.repo = AccountRepo()
        self.anna = make_account("anna", display_name="Anna Runner")
        self.ben = make_account("ben", display_name="Ben Swimmer", email="ben@runners.org")

    def test_existing_ids(self):
        self.assertEqual(self.repo.existing_ids([self.ben.id, self.anna.id, 9999]), sorted([self.anna.id, self.ben.id]))

    def test_search_matches_display_name_username_and_email(self):
        self.assertEqual([a.id for a in self.repo.search("runner", 10)], [self.anna.id, self.ben.id])
        self.assertEqual([a.id for a in self.repo.search("BEN", 10)], [self.ben.id])

    def test_search_respects_limit(self):
        self.assertEqual(len(self.repo.search("n", 1)), 1)

    def test_followers_of_and_followed_by(self):
        Follow.objects.create(follower=self.ben, following=self.anna)
        self.assertEqual(list(self.repo.followers_of(self.anna.id)), [self.ben])
        self.assertEqual(list(self.repo.followed_by(self.ben.id)), [self.anna])
        self.assertEqual(list(self.repo.followed_by(self.anna.id)), [])

    def test_list_limit(self):
        self.assertEqual(len(self.repo.list(limit=1)), 1)
        self.assertEqual(len(self.repo.list(limit=0)), 0)
        self.assertEqual([a.id for a in self.repo.list()], [self.anna.id, self.ben.id])
