from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from social.params import parse_id, parse_optional_id
from social.serializers import (
    CommentLikeSerializer,
    CommentSerializer,
    CommentTreeSerializer,
    LikedCommentSerializer,
    PostLikeSerializer,
)
from social.services import CommentService, LikeService

__all__ = ["PostLikeApi", "CommentLikeApi", "CommentsApi", "post_liked", "liked_comments"]

like_service = LikeService()
comment_service = CommentService()


class PostLikeApi(APIView):

    def post(self, request, post_id):
        post_id = parse_id(post_id, "postId")
        user_id = parse_id(request.data.get("userId"), "userId")
        like, created = like_service.like_post(post_id, user_id)
        return Response(
            {"data": PostLikeSerializer(like).data},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    def delete(self, request, post_id):
        post_id = parse_id(post_id, "postId")
        user_id = parse_id(request.query_params.get("userId"), "userId")
        deleted = like_service.unlike_post(post_id, user_id)
        return Response({"data": {"success": True, "deleted": deleted}})


class CommentLikeApi(APIView):

    def post(self, request, comment_id):
        comment_id = parse_id(comment_id, "commentId")
        user_id = parse_id(request.data.get("userId"), "userId")
        like, created, owner_id = like_service.like_comment(comment_id, user_id)
        data = CommentLikeSerializer(like, context={"comment_owner_id": owner_id}).data
        return Response(
            {"data": data},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    def delete(self, request, comment_id):
        comment_id = parse_id(comment_id, "commentId")
        user_id = parse_id(request.query_params.get("userId"), "userId")
        deleted = like_service.unlike_comment(comment_id, user_id)
        return Response({"data": {"success": True, "deleted": deleted}})


class CommentsApi(APIView):
    """GET lists a post's comments (`?tree=1` nests replies); POST adds one."""

    def get(self, request, post_id):
        post_id = parse_id(post_id, "postId")
        if request.query_params.get("tree") in ("1", "true"):
            roots = comment_service.comment_tree(post_id)
            return Response({"data": CommentTreeSerializer(roots, many=True).data})
        comments = comment_service.comments_for_post(post_id)
        return Response({"data": CommentSerializer(comments, many=True).data})

    def post(self, request, post_id):
        post_id = parse_id(post_id, "postId")
        user_id = parse_id(request.data.get("userId"), "userId")
        parent_id = parse_optional_id(request.data.get("parentId"), "parentId")
        comment = comment_service.create_comment(
            post_id, user_id, request.data.get("content"), parent_id
        )
        return Response({"data": CommentSerializer(comment).data}, status=status.HTTP_201_CREATED)


@api_view(["GET"])
def post_liked(request, post_id):
    post_id = parse_id(post_id, "postId")
    user_id = parse_id(request.query_params.get("userId"), "userId")
    return Response({"data": {"liked": like_service.is_post_liked(post_id, user_id)}})


@api_view(["GET"])
def liked_comments(request, post_id):
    post_id = parse_id(post_id, "postId")
    user_id = parse_id(request.query_params.get("userId"), "userId")
    likes = like_service.liked_comments_for_post(post_id, user_id)
    return Response({"data": LikedCommentSerializer(likes, many=True).data})
