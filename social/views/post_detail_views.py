from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from social.params import parse_id, parse_optional_id
from social.serializers import CommentSerializer, PostSerializer
from social.services import CommentService, PostService

__all__ = ["PostsApi", "PostDetailApi", "CommentDetailApi", "user_posts"]

post_service = PostService()
comment_service = CommentService()


def _image_paths(data):
    paths = data.get("imageUrls")
    if paths is None:
        return None
    if not isinstance(paths, list):
        paths = [paths]
    return [str(p) for p in paths]


class PostsApi(APIView):
    """POST creates a post from userId, type, title, content, mode and optional media fields."""

    def post(self, request):
        user_id = parse_id(request.data.get("userId"), "userId")
        post = post_service.create_post(
            user_id,
            content_type=request.data.get("type"),
            title=request.data.get("title"),
            content=request.data.get("content"),
            mode=request.data.get("mode"),
            video=request.data.get("video"),
            topic=request.data.get("topic"),
            sports=request.data.get("sports"),
            image_paths=_image_paths(request.data),
        )
        return Response({"data": PostSerializer(post).data}, status=status.HTTP_201_CREATED)


class PostDetailApi(APIView):
    """
    GET a single post as seen by viewerId (hidden posts are 404).
    PUT edits and DELETE removes it; both need the author's userId.
    """

    def get(self, request, post_id):
        post_id = parse_id(post_id, "postId")
        viewer_id = parse_optional_id(request.query_params.get("viewerId"), "viewerId")
        post = post_service.get_post(post_id, viewer_id)
        return Response({"data": PostSerializer(post).data})

    def put(self, request, post_id):
        post_id = parse_id(post_id, "postId")
        user_id = parse_id(request.data.get("userId"), "userId")
        post = post_service.update_post(
            post_id,
            user_id,
            image_paths=_image_paths(request.data),
            **{field: request.data.get(field) for field in ("title", "content", "video", "mode", "topic", "sports")},
        )
        return Response({"data": PostSerializer(post).data})

    def delete(self, request, post_id):
        post_id = parse_id(post_id, "postId")
        user_id = parse_id(request.query_params.get("userId"), "userId")
        post_service.delete_post(post_id, user_id)
        return Response({"data": {"success": True}})


class CommentDetailApi(APIView):
    """PUT replaces a comment's text; DELETE removes it with its replies. Author only."""

    def put(self, request, comment_id):
        comment_id = parse_id(comment_id, "commentId")
        user_id = parse_id(request.data.get("userId"), "userId")
        comment = comment_service.update_comment(comment_id, user_id, request.data.get("content"))
        return Response({"data": CommentSerializer(comment).data})

    def delete(self, request, comment_id):
        comment_id = parse_id(comment_id, "commentId")
        user_id = parse_id(request.query_params.get("userId"), "userId")
        comment_service.delete_comment(comment_id, user_id)
        return Response({"data": {"success": True}})


@api_view(["GET"])
def user_posts(request, user_id):
    """Every post by the user, of any type, that viewerId may see."""
    author_id = parse_id(user_id, "userId")
    viewer_id = parse_optional_id(request.query_params.get("viewerId"), "viewerId")
    posts = post_service.posts_by_user(author_id, viewer_id)
    return Response({"data": PostSerializer(posts, many=True).data})
