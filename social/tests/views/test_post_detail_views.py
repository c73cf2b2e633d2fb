from django.urls import reverse

from social.models import Comment, Post
from social.tests.helpers import make_account, make_mutual, make_post
from social.tests.views.base import ApiTestCase


class CreatePostApiTests(ApiTestCase):
    def setUp(self):
        self.author = make_account("author")
        self.url = reverse("posts")

    def test_create_image_post(self):
        resp = self.post_json(self.url, {
            "userId": self.author.id,
            "type": "image",
            "title": "Finish line",
            "mode": "friends",
            "imageUrls": ["images/1.jpg", "images/2.jpg"],
        })
        self.assertEqual(resp.status_code, 201)
        body = self.data(resp)
        self.assertEqual(body["author_id"], self.author.id)
        self.assertEqual(body["type"], "image")
        self.assertEqual(body["mode"], "friends")
        self.assertEqual(body["images"], ["images/1.jpg", "images/2.jpg"])
        self.assertEqual(Post.objects.get().title, "Finish line")

    def test_create_bad_type(self):
        resp = self.post_json(self.url, {"userId": self.author.id, "type": "poll"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("type", resp.json()["error"])

    def test_create_missing_user(self):
        resp = self.post_json(self.url, {"type": "text", "content": "hi"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("userId", resp.json()["error"])

    def test_create_unknown_user(self):
        resp = self.post_json(self.url, {"userId": 9999, "type": "text"})
        self.assertEqual(resp.status_code, 404)


class PostDetailApiTests(ApiTestCase):
    def setUp(self):
        self.author = make_account("author")
        self.friend = make_account("friend")
        self.stranger = make_account("stranger")
        make_mutual(self.author, self.friend)
        self.post = make_post(author=self.author, mode=Post.MODE_FRIENDS, title="for friends")
        self.url = reverse("post_detail", args=[self.post.id])

    def test_get_visible(self):
        resp = self.client.get(self.url, {"viewerId": self.friend.id})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.data(resp)["title"], "for friends")
        self.assertEqual(self.data(resp)["author"]["username"], "author")

    def test_get_hidden_is_404(self):
        for params in ({"viewerId": self.stranger.id}, {}):
            resp = self.client.get(self.url, params)
            self.assertEqual(resp.status_code, 404)
            self.assertEqual(resp.json()["message"], "Post not found")

    def test_put_by_author(self):
        resp = self.client.put(self.url, {"userId": self.author.id, "title": "now public", "mode": "public"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.data(resp)["mode"], "public")
        self.post.refresh_from_db()
        self.assertEqual(self.post.title, "now public")

    def test_put_by_someone_else_is_403(self):
        resp = self.client.put(self.url, {"userId": self.friend.id, "title": "hijack"}, format="json")
        self.assertEqual(resp.status_code, 403)
        self.post.refresh_from_db()
        self.assertEqual(self.post.title, "for friends")

    def test_delete(self):
        resp = self.client.delete(f"{self.url}?userId={self.friend.id}")
        self.assertEqual(resp.status_code, 403)
        resp = self.client.delete(f"{self.url}?userId={self.author.id}")
        self.assertEqual(self.data(resp), {"success": True})
        self.assertFalse(Post.objects.exists())

    def test_bad_post_id(self):
        resp = self.client.get(reverse("post_detail", args=["abc"]))
        self.assertEqual(resp.status_code, 400)


class UserPostsApiTests(ApiTestCase):
    def setUp(self):
        self.author = make_account("author")
        self.stranger = make_account("stranger")
        self.public = make_post(author=self.author, content_type=Post.TYPE_TEXT)
        self.private = make_post(author=self.author, mode=Post.MODE_PRIVATE)
        self.url = reverse("user_posts", args=[self.author.id])

    def test_stranger_sees_public_only(self):
        resp = self.client.get(self.url, {"viewerId": self.stranger.id})
        self.assertEqual([p["id"] for p in self.data(resp)], [self.public.id])

    def test_author_sees_everything(self):
        resp = self.client.get(self.url, {"viewerId": self.author.id})
        self.assertEqual({p["id"] for p in self.data(resp)}, {self.public.id, self.private.id})

    def test_unknown_user(self):
        resp = self.client.get(reverse("user_posts", args=[9999]))
        self.assertEqual(resp.status_code, 404)


class CommentDetailApiTests(ApiTestCase):
    def setUp(self):
        self.author = make_account("author")
        self.other = make_account("other")
        post = make_post(author=self.other)
        self.comment = Comment.objects.create(post=post, author=self.author, content="first")
        self.url = reverse("comment_detail", args=[self.comment.id])

    def test_edit(self):
        resp = self.client.put(self.url, {"userId": self.author.id, "content": "edited"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.data(resp)["content"], "edited")

    def test_edit_by_someone_else(self):
        resp = self.client.put(self.url, {"userId": self.other.id, "content": "edited"}, format="json")
        self.assertEqual(resp.status_code, 403)

    def test_delete(self):
        resp = self.client.delete(f"{self.url}?userId={self.author.id}")
        self.assertEqual(self.data(resp), {"success": True})
        self.assertFalse(Comment.objects.exists())

    def test_delete_unknown(self):
        resp = self.client.delete(f"{reverse('comment_detail', args=[9999])}?userId={self.author.id}")
        self.assertEqual(resp.status_code, 404)
