from .privacy import PostMode, PrivacyService, UnknownPostMode, is_visible
from .feed import FeedService
from .posts import PostService
from .follow import SocialGraphService
from .accounts import ProfileService
from .likes import LikeService
from .comments import CommentService
from .notifications import NotificationService
from .messages import MessageService

__all__ = [
    "PostMode",
    "PrivacyService",
    "UnknownPostMode",
    "is_visible",
    "FeedService",
    "PostService",
    "SocialGraphService",
    "ProfileService",
    "LikeService",
    "CommentService",
    "NotificationService",
    "MessageService",
]
