from django.urls import reverse

from social.models import Block, Follow
from social.tests.helpers import make_account, make_mutual
from social.tests.views.base import ApiTestCase


class FollowApiTests(ApiTestCase):
    def setUp(self):
        self.alice = make_account("alice")
        self.bob = make_account("bob")
        self.url = reverse("follow")

    def test_follow_created(self):
        resp = self.post_json(self.url, {"followerId": self.alice.id, "followingId": self.bob.id})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(self.data(resp)["following_id"], self.bob.id)

    def test_follow_again_returns_existing(self):
        first = self.post_json(self.url, {"followerId": self.alice.id, "followingId": self.bob.id})
        second = self.post_json(self.url, {"followerId": self.alice.id, "followingId": self.bob.id})
        self.assertEqual(second.status_code, 200)
        self.assertEqual(self.data(first)["id"], self.data(second)["id"])
        self.assertEqual(Follow.objects.count(), 1)

    def test_follow_accepts_string_ids(self):
        resp = self.post_json(self.url, {"followerId": str(self.alice.id), "followingId": str(self.bob.id)})
        self.assertEqual(resp.status_code, 201)

    def test_follow_self(self):
        resp = self.post_json(self.url, {"followerId": self.alice.id, "followingId": self.alice.id})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Cannot follow yourself.")

    def test_follow_missing_id(self):
        resp = self.post_json(self.url, {"followerId": self.alice.id})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("followingId", resp.json()["error"])

    def test_follow_oversized_id(self):
        resp = self.post_json(self.url, {"followerId": self.alice.id, "followingId": "99999999999999999999999"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("followingId", resp.json()["error"])
        self.assertFalse(Follow.objects.exists())

    def test_follow_unknown_user(self):
        resp = self.post_json(self.url, {"followerId": self.alice.id, "followingId": 9999})
        self.assertEqual(resp.status_code, 404)

    def test_unfollow(self):
        Follow.objects.create(follower=self.alice, following=self.bob)
        resp = self.client.delete(f"{self.url}?followerId={self.alice.id}&followingId={self.bob.id}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.data(resp), {"success": True, "deleted": True})

    def test_unfollow_without_edge(self):
        resp = self.client.delete(f"{self.url}?followerId={self.alice.id}&followingId={self.bob.id}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.data(resp), {"success": True, "deleted": False})

    def test_is_following(self):
        url = reverse("is_following")
        params = {"followerId": self.alice.id, "followingId": self.bob.id}
        self.assertEqual(self.data(self.client.get(url, params)), {"following": False})
        Follow.objects.create(follower=self.alice, following=self.bob)
        self.assertEqual(self.data(self.client.get(url, params)), {"following": True})

    def test_mutual_followings(self):
        make_mutual(self.alice, self.bob)
        resp = self.client.get(reverse("mutual_followings", args=[self.alice.id]))
        self.assertEqual([a["id"] for a in self.data(resp)], [self.bob.id])


class BlockApiTests(ApiTestCase):
    def setUp(self):
        self.alice = make_account("alice")
        self.bob = make_account("bob")
        self.url = reverse("block")

    def test_block_and_list(self):
        resp = self.post_json(self.url, {"userId": self.alice.id, "blockedId": self.bob.id})
        self.assertEqual(resp.status_code, 201)
        blocked = self.client.get(reverse("blocked_users", args=[self.alice.id]))
        self.assertEqual(self.data(blocked), [self.bob.id])

    def test_block_is_idempotent(self):
        self.post_json(self.url, {"userId": self.alice.id, "blockedId": self.bob.id})
        resp = self.post_json(self.url, {"userId": self.alice.id, "blockedId": self.bob.id})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(Block.objects.count(), 1)

    def test_block_self(self):
        resp = self.post_json(self.url, {"userId": self.alice.id, "blockedId": self.alice.id})
        self.assertEqual(resp.status_code, 400)

    def test_unblock(self):
        Block.objects.create(blocker=self.alice, blocked=self.bob)
        resp = self.client.delete(f"{self.url}?userId={self.alice.id}&blockedId={self.bob.id}")
        self.assertEqual(self.data(resp)["deleted"], True)
        self.assertFalse(Block.objects.exists())

    def test_is_blocking(self):
        url = reverse("is_blocking")
        params = {"userId": self.alice.id, "blockedId": self.bob.id}
        self.assertEqual(self.data(self.client.get(url, params)), {"blocking": False})
        Block.objects.create(blocker=self.alice, blocked=self.bob)
        self.assertEqual(self.data(self.client.get(url, params)), {"blocking": True})
        reverse_params = {"userId": self.bob.id, "blockedId": self.alice.id}
        self.assertEqual(self.data(self.client.get(url, reverse_params)), {"blocking": False})


class FollowListApiTests(ApiTestCase):
    def setUp(self):
        self.alice = make_account("alice", display_name="Alice")
        self.bob = make_account("bob", display_name="Bob")
        Follow.objects.create(follower=self.bob, following=self.alice)

    def test_followers(self):
        resp = self.client.get(reverse("followers", args=[self.alice.id]))
        self.assertEqual([a["username"] for a in self.data(resp)], ["bob"])

    def test_following(self):
        resp = self.client.get(reverse("following", args=[self.bob.id]))
        self.assertEqual([a["id"] for a in self.data(resp)], [self.alice.id])
        resp = self.client.get(reverse("following", args=[self.alice.id]))
        self.assertEqual(self.data(resp), [])

    def test_unknown_user(self):
        resp = self.client.get(reverse("followers", args=[9999]))
        self.assertEqual(resp.status_code, 404)
