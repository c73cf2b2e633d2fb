import random
from collections import Counter

from django.test import TestCase, override_settings

from social.exceptions import NotFound
from social.models import Comment, Follow, Post
from social.services import FeedService
from social.tests.helpers import make_account, make_block, make_mutual, make_post


class RecordingRandom:
    """Stands in for random.Random; always picks `index` and remembers the bound."""

    def __init__(self, index=0):
        self.index = index
        self.bounds = []

    def randrange(self, stop):
        self.bounds.append(stop)
        return self.index


class RandomFeedTests(TestCase):
    def setUp(self):
        self.viewer = make_account("viewer")
        self.friend = make_account("friend")
        self.stranger = make_account("stranger")
        make_mutual(self.viewer, self.friend)
        self.public = make_post(author=self.stranger, mode="public", title="public")
        self.friends_only = make_post(author=self.friend, mode="friends", title="friends")
        self.private = make_post(author=self.stranger, mode="private", title="private")
        self.text = make_post(author=self.stranger, content_type=Post.TYPE_TEXT, title="text")

    def test_returns_none_without_candidates(self):
        Post.objects.all().delete()
        self.assertIsNone(FeedService().pick_random_visible_post())

    def test_returns_none_when_everything_is_excluded(self):
        service = FeedService()
        excluded = [self.public.id, self.friends_only.id, self.private.id]
        self.assertIsNone(service.pick_random_visible_post(excluded, self.viewer.id))

    def test_returns_none_when_nothing_is_visible(self):
        self.assertIsNone(FeedService().pick_random_visible_post([self.public.id], None))

    def test_anonymous_viewer_only_gets_public(self):
        rng = RecordingRandom()
        item = FeedService(rng=rng).pick_random_visible_post([], None)
        self.assertEqual(item["id"], self.public.id)
        self.assertEqual(rng.bounds, [1])

    def test_draws_over_visible_posts_only(self):
        rng = RecordingRandom(index=1)
        item = FeedService(rng=rng).pick_random_visible_post([], self.viewer.id)
        self.assertEqual(rng.bounds, [2])
        self.assertEqual(item["id"], self.friends_only.id)

    def test_excluded_ids_never_returned(self):
        service = FeedService(rng=random.Random(3))
        for _ in range(20):
            item = service.pick_random_visible_post([self.public.id], self.viewer.id)
            self.assertEqual(item["id"], self.friends_only.id)

    def test_malformed_exclusions_are_ignored(self):
        service = FeedService(rng=RecordingRandom())
        item = service.pick_random_visible_post(["abc", -4, 0, str(self.public.id)], None)
        self.assertIsNone(item)

    def test_blocked_author_never_returned(self):
        make_block(self.viewer, self.stranger)
        service = FeedService(rng=random.Random(5))
        for _ in range(20):
            self.assertEqual(service.pick_random_visible_post([], self.viewer.id)["id"], self.friends_only.id)

    def test_selection_is_uniform_over_visible_posts(self):
        second_public = make_post(author=self.friend, mode="public", title="second public")
        service = FeedService(rng=random.Random(42))
        draws = 900
        counts = Counter(service.pick_random_visible_post([], self.viewer.id)["id"] for _ in range(draws))
        self.assertEqual(set(counts), {self.public.id, self.friends_only.id, second_public.id})
        for post_id, count in counts.items():
            with self.subTest(post_id=post_id):
                self.assertAlmostEqual(count / draws, 1 / 3, delta=0.06)

    def test_feed_item_fields(self):
        Comment.objects.create(post=self.public, author=self.viewer, content="nice")
        item = FeedService(rng=RecordingRandom()).pick_random_visible_post([], None)
        self.assertEqual(
            item,
            {
                "id": self.public.id,
                "user_id": self.stranger.id,
                "title": "public",
                "video": "videos/test.mp4",
                "content": "",
                "heart_count": 0,
                "display_name": "Stranger",
                "avatar": None,
                "comment_count": 1,
            },
        )

    @override_settings(SOCIAL_FEED_CONTENT_TYPE="text")
    def test_content_type_comes_from_settings(self):
        item = FeedService(rng=RecordingRandom()).pick_random_visible_post([], None)
        self.assertEqual(item["id"], self.text.id)

    def test_first_posts(self):
        ids = [p["id"] for p in FeedService().first_posts()]
        self.assertEqual(ids, [self.public.id, self.friends_only.id])


class SearchAndProfileTests(TestCase):
    def setUp(self):
        self.service = FeedService()
        self.viewer = make_account("viewer", display_name="Viewer")
        self.runner = make_account("runner", display_name="Road Runner")
        self.blocked = make_account("rival", display_name="Rival Runner")
        make_block(self.viewer, self.blocked)
        self.run = make_post(author=self.runner, title="Morning run", topic="running")
        self.rival_run = make_post(author=self.blocked, title="Rival run")

    def test_search_posts_blank_query(self):
        self.assertEqual(self.service.search_posts("   "), [])
        self.assertEqual(self.service.search_posts(None), [])

    def test_search_posts_hides_blocked_authors(self):
        ids = [p["id"] for p in self.service.search_posts("run", viewer_id=self.viewer.id)]
        self.assertEqual(ids, [self.run.id])

    def test_search_posts_anonymous_sees_all_matches(self):
        ids = {p["id"] for p in self.service.search_posts("run")}
        self.assertEqual(ids, {self.run.id, self.rival_run.id})

    def test_search_posts_adds_metadata(self):
        item = self.service.search_posts("morning")[0]
        self.assertEqual(item["topic"], "running")
        self.assertEqual(item["mode"], "public")
        self.assertIn("created_at", item)

    def test_search_users_hides_blocked(self):
        ids = [u["id"] for u in self.service.search_users("runner", viewer_id=self.viewer.id)]
        self.assertEqual(ids, [self.runner.id])

    def test_search_users_respects_limit(self):
        self.assertEqual(len(self.service.search_users("runner", limit=1)), 1)

    def test_profile_unknown_user(self):
        with self.assertRaises(NotFound):
            self.service.user_profile(9999, self.viewer.id)

    def test_profile_counts_and_follow_state(self):
        Follow.objects.create(follower=self.viewer, following=self.runner)
        profile = self.service.user_profile(self.runner.id, self.viewer.id)
        self.assertEqual(profile["user"]["username"], "runner")
        self.assertEqual(profile["followers_count"], 1)
        self.assertEqual(profile["following_count"], 0)
        self.assertTrue(profile["is_following"])

    def test_profile_only_lists_visible_videos(self):
        friends = make_post(author=self.runner, mode="friends")
        profile = self.service.user_profile(self.runner.id, self.viewer.id)
        self.assertEqual([v["id"] for v in profile["videos"]], [self.run.id])
        make_mutual(self.viewer, self.runner)
        profile = self.service.user_profile(self.runner.id, self.viewer.id)
        self.assertEqual([v["id"] for v in profile["videos"]], [friends.id, self.run.id])

    def test_profile_for_anonymous_viewer(self):
        profile = self.service.user_profile(self.runner.id)
        self.assertFalse(profile["is_following"])
