"""Service helpers for creating and reading comments."""

from social.exceptions import NotFound, PermissionDenied, ValidationError
from social.models import Account, Comment, Post


class CommentService:
    """Encapsulate comment creation and the reply tree for a post."""

    def create_comment(self, post_id, user_id, content, parent_id=None):
        """Create a comment, or a reply when parent_id names a comment on the same post."""
        content = (content or "").strip()
        if not content:
            raise ValidationError({"content": "Comment text is required."})
        if not Post.objects.filter(id=post_id).exists():
            raise NotFound("Post not found")
        if not Account.objects.filter(id=user_id).exists():
            raise NotFound("User not found")
        if parent_id is not None and not Comment.objects.filter(id=parent_id, post_id=post_id).exists():
            raise NotFound("Parent comment not found")
        return Comment.objects.create(
            post_id=post_id,
            author_id=user_id,
            parent_id=parent_id,
            content=content,
        )

    def update_comment(self, comment_id, user_id, content):
        """Replace the text of a comment; only its author may do this."""
        content = (content or "").strip()
        if not content:
            raise ValidationError({"content": "Comment text is required."})
        comment = self._owned_comment(comment_id, user_id)
        comment.content = content
        comment.save(update_fields=["content"])
        return comment

    def delete_comment(self, comment_id, user_id):
        """Delete a comment together with its replies and likes."""
        self._owned_comment(comment_id, user_id).delete()

    def _owned_comment(self, comment_id, user_id):
        comment = Comment.objects.select_related("author").filter(id=comment_id).first()
        if comment is None:
            raise NotFound("Comment not found")
        if comment.author_id != user_id:
            raise PermissionDenied("Only the author can change this comment.")
        return comment

    def comments_for_post(self, post_id):
        """All comments on a post, newest first, with their authors."""
        return list(
            Comment.objects.filter(post_id=post_id)
            .select_related("author")
            .order_by("-created_at", "-id")
        )

    def comment_tree(self, post_id):
        """
        Top-level comments (newest first) each carrying a `children` list of
        replies, nested to any depth, built from a single fetch.
        """
        comments = self.comments_for_post(post_id)
        by_id = {c.id: c for c in comments}
        for comment in comments:
            comment.children = []
        roots = []
        for comment in comments:
            parent = by_id.get(comment.parent_id)
            if parent is None:
                roots.append(comment)
            else:
                parent.children.append(comment)
        return roots
