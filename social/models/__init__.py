from .account import Account
from .post import Post, PostImage
from .comment import Comment
from .like import PostLike, CommentLike
from .follow import Follow
from .block import Block
from .message import Message
from .notification import Notification

__all__ = [
    "Account",
    "Post",
    "PostImage",
    "Comment",
    "PostLike",
    "CommentLike",
    "Follow",
    "Block",
    "Message",
    "Notification",
]
