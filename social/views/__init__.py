from .feed_views import *
from .social_views import *
from .post_views import *
from .notification_views import *
from .message_views import *
from .post_detail_views import *
