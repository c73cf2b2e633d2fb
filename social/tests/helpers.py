import uuid

from social.models import Account, Block, Follow, Post


def make_account(username=None, **kwargs):
    """Create an account; usernames default to a unique `user_xxxxxx`."""
    username = username or f"user_{uuid.uuid4().hex[:6]}"
    return Account.objects.create_user(
        username=username,
        email=kwargs.pop("email", f"{username}@example.org"),
        password=kwargs.pop("password", "Password123"),
        display_name=kwargs.pop("display_name", username.title()),
        **kwargs,
    )


def make_post(*, author=None, mode=Post.MODE_PUBLIC, content_type=Post.TYPE_VIDEO, **extra):
    """
    creates and returns a post. defaults to a public video so it is a feed candidate.
    """
    if author is None:
        author = make_account()
    extra.setdefault("title", "test post")
    extra.setdefault("video", "videos/test.mp4")
    return Post.objects.create(author=author, mode=mode, content_type=content_type, **extra)


def make_mutual(a, b):
    Follow.objects.create(follower=a, following=b)
    Follow.objects.create(follower=b, following=a)


def make_block(blocker, blocked):
    return Block.objects.create(blocker=blocker, blocked=blocked)
