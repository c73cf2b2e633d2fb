from rest_framework import serializers

from social.models import Account, Block, Comment, CommentLike, Follow, Message, Notification, Post, PostLike


class AccountSummarySerializer(serializers.ModelSerializer):
    """Author fields shown next to content."""

    class Meta:
        model = Account
        fields = ["id", "username", "display_name", "avatar"]


class FollowSerializer(serializers.ModelSerializer):
    class Meta:
        model = Follow
        fields = ["id", "follower_id", "following_id", "created_at"]


class BlockSerializer(serializers.ModelSerializer):
    class Meta:
        model = Block
        fields = ["id", "blocker_id", "blocked_id", "created_at"]


class PostLikeSerializer(serializers.ModelSerializer):
    class Meta:
        model = PostLike
        fields = ["id", "post_id", "user_id", "created_at"]


class CommentLikeSerializer(serializers.ModelSerializer):
    comment_owner_id = serializers.SerializerMethodField()

    class Meta:
        model = CommentLike
        fields = ["id", "comment_id", "user_id", "created_at", "comment_owner_id"]

    def get_comment_owner_id(self, obj):
        return self.context.get("comment_owner_id")


class LikedCommentSerializer(serializers.ModelSerializer):
    """A comment like together with the liked comment's fields."""
    comment = serializers.SerializerMethodField()

    class Meta:
        model = CommentLike
        fields = ["id", "comment_id", "user_id", "comment"]

    def get_comment(self, obj):
        c = obj.comment
        return {"id": c.id, "content": c.content, "author_id": c.author_id, "post_id": c.post_id}


class CommentSerializer(serializers.ModelSerializer):
    author = AccountSummarySerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "post_id", "parent_id", "content", "like_count", "created_at", "author"]


class CommentTreeSerializer(CommentSerializer):
    """Comment with its nested replies (`children` is set by CommentService.comment_tree)."""
    replies = serializers.SerializerMethodField()

    class Meta(CommentSerializer.Meta):
        fields = CommentSerializer.Meta.fields + ["replies"]

    def get_replies(self, obj):
        return CommentTreeSerializer(getattr(obj, "children", []), many=True).data


class NotificationSerializer(serializers.ModelSerializer):
    actor = AccountSummarySerializer(read_only=True)

    class Meta:
        model = Notification
        fields = [
            "id",
            "recipient_id",
            "actor_id",
            "actor",
            "notification_type",
            "title",
            "post_id",
            "comment_id",
            "is_read",
            "created_at",
        ]


class MessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Message
        fields = ["id", "sender_id", "recipient_id", "content", "shared_post", "is_read", "created_at"]



class PostSerializer(serializers.ModelSerializer):
    """A post with its author, ordered image paths and comment count."""
    author = AccountSummarySerializer(read_only=True)
    type = serializers.CharField(source="content_type", read_only=True)
    images = serializers.SerializerMethodField()
    comment_count = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = [
            "id",
            "author_id",
            "author",
            "type",
            "mode",
            "title",
            "content",
            "video",
            "topic",
            "sports",
            "images",
            "heart_count",
            "comment_count",
            "created_at",
        ]

    def get_images(self, obj):
        return obj.image_paths

    def get_comment_count(self, obj):
        return getattr(obj, "comment_count", None) or obj.comments.count()


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = Account
        fields = ["id", "username", "display_name", "avatar", "story"]
