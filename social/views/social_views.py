from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from social.params import clamp_limit, parse_id
from social.serializers import AccountSummarySerializer, BlockSerializer, FollowSerializer
from social.services import SocialGraphService

__all__ = [
    "FollowApi",
    "BlockApi",
    "is_following",
    "is_blocking",
    "blocked_users",
    "mutual_followings",
    "followers",
    "following",
]

graph_service = SocialGraphService()


class FollowApi(APIView):
    """POST creates follower → following (idempotent); DELETE removes it (no-op if absent)."""

    def post(self, request):
        follower_id = parse_id(request.data.get("followerId"), "followerId")
        following_id = parse_id(request.data.get("followingId"), "followingId")
        edge, created = graph_service.follow(follower_id, following_id)
        return Response(
            {"data": FollowSerializer(edge).data},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    def delete(self, request):
        follower_id = parse_id(request.query_params.get("followerId"), "followerId")
        following_id = parse_id(request.query_params.get("followingId"), "followingId")
        deleted = graph_service.unfollow(follower_id, following_id)
        return Response({"data": {"success": True, "deleted": bool(deleted)}})


class BlockApi(APIView):
    """POST creates user → blocked (idempotent); DELETE removes it (no-op if absent)."""

    def post(self, request):
        user_id = parse_id(request.data.get("userId"), "userId")
        blocked_id = parse_id(request.data.get("blockedId"), "blockedId")
        edge, created = graph_service.block(user_id, blocked_id)
        return Response(
            {"data": BlockSerializer(edge).data},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    def delete(self, request):
        user_id = parse_id(request.query_params.get("userId"), "userId")
        blocked_id = parse_id(request.query_params.get("blockedId"), "blockedId")
        deleted = graph_service.unblock(user_id, blocked_id)
        return Response({"data": {"success": True, "deleted": bool(deleted)}})


@api_view(["GET"])
def is_following(request):
    follower_id = parse_id(request.query_params.get("followerId"), "followerId")
    following_id = parse_id(request.query_params.get("followingId"), "followingId")
    return Response({"data": {"following": graph_service.is_following(follower_id, following_id)}})


@api_view(["GET"])
def is_blocking(request):
    user_id = parse_id(request.query_params.get("userId"), "userId")
    blocked_id = parse_id(request.query_params.get("blockedId"), "blockedId")
    return Response({"data": {"blocking": graph_service.is_blocking(user_id, blocked_id)}})


@api_view(["GET"])
def blocked_users(request, user_id):
    user_id = parse_id(user_id, "userId")
    return Response({"data": graph_service.blocked_user_ids(user_id)})


@api_view(["GET"])
def mutual_followings(request, user_id):
    user_id = parse_id(user_id, "userId")
    accounts = graph_service.mutual_followings(user_id)
    return Response({"data": AccountSummarySerializer(accounts, many=True).data})


@api_view(["GET"])
def followers(request, user_id):
    user_id = parse_id(user_id, "userId")
    limit = clamp_limit(request.query_params.get("limit"))
    accounts = graph_service.followers(user_id, limit=limit)
    return Response({"data": AccountSummarySerializer(accounts, many=True).data})


@api_view(["GET"])
def following(request, user_id):
    user_id = parse_id(user_id, "userId")
    limit = clamp_limit(request.query_params.get("limit"))
    accounts = graph_service.following(user_id, limit=limit)
    return Response({"data": AccountSummarySerializer(accounts, many=True).data})
