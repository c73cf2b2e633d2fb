from django.urls import path

from social import views

urlpatterns = [
    path('feed/random', views.random_post, name='feed_random'),
    path('feed/first', views.first_posts, name='feed_first'),
    path('feed/search/posts', views.search_posts, name='search_posts'),
    path('feed/search/users', views.search_users, name='search_users'),
    path('users/<str:user_id>/profile', views.user_profile, name='user_profile'),
    path('users/<str:user_id>/posts', views.user_posts, name='user_posts'),
    path('users/<str:user_id>/followers', views.followers, name='followers'),
    path('users/<str:user_id>/following', views.following, name='following'),
    path('users/<str:user_id>/blocked', views.blocked_users, name='blocked_users'),
    path('users/<str:user_id>/mutual', views.mutual_followings, name='mutual_followings'),
    path('social/follow', views.FollowApi.as_view(), name='follow'),
    path('social/following', views.is_following, name='is_following'),
    path('social/block', views.BlockApi.as_view(), name='block'),
    path('social/blocking', views.is_blocking, name='is_blocking'),
    path('posts', views.PostsApi.as_view(), name='posts'),
    path('posts/<str:post_id>', views.PostDetailApi.as_view(), name='post_detail'),
    path('posts/<str:post_id>/like', views.PostLikeApi.as_view(), name='post_like'),
    path('posts/<str:post_id>/liked', views.post_liked, name='post_liked'),
    path('posts/<str:post_id>/liked-comments', views.liked_comments, name='liked_comments'),
    path('posts/<str:post_id>/comments', views.CommentsApi.as_view(), name='post_comments'),
    path('comments/<str:comment_id>', views.CommentDetailApi.as_view(), name='comment_detail'),
    path('comments/<str:comment_id>/like', views.CommentLikeApi.as_view(), name='comment_like'),
    path('notifications', views.NotificationsApi.as_view(), name='notifications'),
    path('notifications/read', views.mark_notifications_read, name='notifications_read'),
    path('notifications/unread-count', views.unread_notification_count, name='notifications_unread_count'),
    path('messages', views.MessagesApi.as_view(), name='messages'),
    path('messages/inbox', views.inbox, name='messages_inbox'),
    path('messages/read', views.mark_messages_read, name='messages_read'),
]
