from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from social.params import clamp_limit, parse_id, parse_optional_id
from social.serializers import MessageSerializer
from social.services import MessageService

__all__ = ["MessagesApi", "inbox", "mark_messages_read"]

message_service = MessageService()


class MessagesApi(APIView):
    """GET a conversation between userId and otherId; POST sends text or shares a post."""

    def get(self, request):
        user_id = parse_id(request.query_params.get("userId"), "userId")
        other_id = parse_id(request.query_params.get("otherId"), "otherId")
        limit = clamp_limit(request.query_params.get("limit"))
        messages = message_service.conversation(user_id, other_id, limit)
        return Response({"data": MessageSerializer(messages, many=True).data})

    def post(self, request):
        sender_id = parse_id(request.data.get("senderId"), "senderId")
        recipient_id = parse_id(request.data.get("recipientId"), "recipientId")
        post_id = parse_optional_id(request.data.get("postId"), "postId")
        content = request.data.get("content")
        if post_id is not None:
            message = message_service.share_post(sender_id, recipient_id, post_id, content)
        else:
            message = message_service.send(sender_id, recipient_id, content)
        return Response({"data": MessageSerializer(message).data}, status=status.HTTP_201_CREATED)


@api_view(["GET"])
def inbox(request):
    """Every message userId sent or received, oldest first."""
    user_id = parse_id(request.query_params.get("userId"), "userId")
    limit = clamp_limit(request.query_params.get("limit"))
    messages = message_service.inbox(user_id, limit)
    return Response({"data": MessageSerializer(messages, many=True).data})


@api_view(["POST"])
def mark_messages_read(request):
    """Mark everything otherId sent to userId as read."""
    user_id = parse_id(request.data.get("userId"), "userId")
    other_id = parse_id(request.data.get("otherId"), "otherId")
    updated = message_service.mark_read(user_id, other_id)
    return Response({"data": {"updated": updated}})
