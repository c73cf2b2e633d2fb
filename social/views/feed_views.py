from rest_framework.decorators import api_view
from rest_framework.response import Response

from social.params import clamp_limit, parse_id, parse_id_list, parse_optional_id
from social.serializers import ProfileSerializer
from social.services import FeedService, ProfileService

__all__ = ["random_post", "first_posts", "search_posts", "search_users", "user_profile"]

feed_service = FeedService()
profile_service = ProfileService()


@api_view(["GET"])
def random_post(request):
    """
    One random visible post of the feed content type.

    `exclude` is a comma-separated id list (repeatable); unparseable entries are
    ignored. `viewerId` is optional; without it only public posts qualify.
    """
    exclude = parse_id_list(request.query_params.getlist("exclude"))
    viewer_id = parse_optional_id(request.query_params.get("viewerId"), "viewerId")
    post = feed_service.pick_random_visible_post(exclude, viewer_id)
    return Response({"data": post})


@api_view(["GET"])
def first_posts(request):
    return Response({"data": feed_service.first_posts()})


@api_view(["GET"])
def search_posts(request):
    """Search feed posts by title, content, topic or sports."""
    limit = clamp_limit(request.query_params.get("limit"))
    viewer_id = parse_optional_id(request.query_params.get("viewerId"), "viewerId")
    results = feed_service.search_posts(request.query_params.get("q"), limit, viewer_id)
    return Response({"data": results})


@api_view(["GET"])
def search_users(request):
    """Search accounts by display name, username or email."""
    limit = clamp_limit(request.query_params.get("limit"))
    viewer_id = parse_optional_id(request.query_params.get("viewerId"), "viewerId")
    results = feed_service.search_users(request.query_params.get("q"), limit, viewer_id)
    return Response({"data": results})


@api_view(["GET", "PATCH"])
def user_profile(request, user_id):
    """GET the profile as seen by viewerId; PATCH edits display_name, story or avatar."""
    target_id = parse_id(user_id, "userId")
    if request.method == "PATCH":
        account = profile_service.update_profile(
            target_id,
            display_name=request.data.get("displayName"),
            story=request.data.get("story"),
            avatar=request.data.get("avatar"),
        )
        return Response({"data": ProfileSerializer(account).data})
    viewer_id = parse_optional_id(request.query_params.get("viewerId"), "viewerId")
    return Response({"data": feed_service.user_profile(target_id, viewer_id)})
