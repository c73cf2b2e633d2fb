from .post_repo import PostRepo
from .follow_repo import FollowRepo
from .block_repo import BlockRepo
from .account_repo import AccountRepo

__all__ = ["PostRepo", "FollowRepo", "BlockRepo", "AccountRepo"]
