from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from social.params import clamp_limit, parse_id, parse_optional_id
from social.serializers import NotificationSerializer
from social.services import NotificationService

__all__ = ["NotificationsApi", "mark_notifications_read", "unread_notification_count"]

notification_service = NotificationService()


class NotificationsApi(APIView):

    def get(self, request):
        user_id = parse_id(request.query_params.get("userId"), "userId")
        limit = clamp_limit(request.query_params.get("limit"))
        unread_only = request.query_params.get("unread") in ("1", "true")
        notifs = notification_service.for_user(user_id, limit, unread_only)
        return Response({"data": NotificationSerializer(notifs, many=True).data})

    def post(self, request):
        user_id = parse_id(request.data.get("userId"), "userId")
        actor_id = parse_optional_id(request.data.get("actorId"), "actorId")
        notif = notification_service.create(user_id, request.data.get("title"), actor_id)
        return Response({"data": NotificationSerializer(notif).data}, status=status.HTTP_201_CREATED)

    def delete(self, request):
        user_id = parse_id(request.query_params.get("userId"), "userId")
        notification_id = parse_id(request.query_params.get("notificationId"), "notificationId")
        notification_service.delete(user_id, notification_id)
        return Response({"data": {"success": True}})


@api_view(["POST"])
def mark_notifications_read(request):
    """Mark all unread notifications for userId as read."""
    user_id = parse_id(request.data.get("userId"), "userId")
    updated = notification_service.mark_all_read(user_id)
    return Response({"data": {"updated": updated}})


@api_view(["GET"])
def unread_notification_count(request):
    user_id = parse_id(request.query_params.get("userId"), "userId")
    return Response({"data": {"unread": notification_service.unread_count(user_id)}})
