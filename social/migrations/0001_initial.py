import django.contrib.auth.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("username", models.CharField(max_length=30, unique=True, validators=[django.core.validators.RegexValidator(message="Username must consist of at least three alphanumericals", regex="^\\w{3,}$")])),
                ("display_name", models.CharField(blank=True, max_length=100)),
                ("avatar", models.CharField(blank=True, max_length=500, null=True)),
                ("story", models.TextField(blank=True, help_text="short bio shown on profile", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("role", models.CharField(choices=[("user", "User"), ("admin", "Admin")], default="user", max_length=20)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "db_table": "account",
                "ordering": ["display_name", "username"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content_type", models.CharField(choices=[("text", "Text"), ("image", "Image"), ("video", "Video")], default="text", max_length=10)),
                ("mode", models.CharField(blank=True, default="public", max_length=20)),
                ("title", models.CharField(blank=True, max_length=255)),
                ("content", models.TextField(blank=True)),
                ("video", models.CharField(blank=True, max_length=500, null=True)),
                ("topic", models.CharField(blank=True, max_length=100)),
                ("sports", models.CharField(blank=True, max_length=100)),
                ("heart_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="posts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "post",
                "indexes": [
                    models.Index(fields=["content_type"], name="post_content_type_idx"),
                    models.Index(fields=["author"], name="post_author_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="PostImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("image", models.CharField(max_length=500)),
                ("position", models.PositiveIntegerField(default=0)),
                ("post", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="images", to="social.post")),
            ],
            options={
                "db_table": "post_image",
                "ordering": ["position", "id"],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField(max_length=2000)),
                ("like_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to=settings.AUTH_USER_MODEL)),
                ("parent", models.ForeignKey(blank=True, db_column="parent_id", null=True, on_delete=django.db.models.deletion.CASCADE, related_name="replies", to="social.comment")),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="social.post")),
            ],
            options={
                "db_table": "comment",
            },
        ),
        migrations.CreateModel(
            name="PostLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="social.post")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="post_likes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "post_like",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "post"), name="uniq_post_like_user_post"),
                ],
            },
        ),
        migrations.CreateModel(
            name="CommentLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("comment", models.ForeignKey(db_column="comment_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="social.comment")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="comment_likes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "comment_like",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "comment"), name="uniq_comment_like_user_comment"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Follow",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.CASCADE, related_name="following_edges", to=settings.AUTH_USER_MODEL)),
                ("following", models.ForeignKey(db_column="following_id", on_delete=django.db.models.deletion.CASCADE, related_name="follower_edges", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "follow",
                "indexes": [
                    models.Index(fields=["follower"], name="follow_follower_idx"),
                    models.Index(fields=["following"], name="follow_following_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("follower", "following"), name="uniq_follow_follower_following"),
                    models.CheckConstraint(condition=models.Q(("follower", models.F("following")), _negated=True), name="chk_follow_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Block",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("blocked", models.ForeignKey(db_column="blocked_id", on_delete=django.db.models.deletion.CASCADE, related_name="blocks_received", to=settings.AUTH_USER_MODEL)),
                ("blocker", models.ForeignKey(db_column="blocker_id", on_delete=django.db.models.deletion.CASCADE, related_name="blocks_created", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "block",
                "indexes": [
                    models.Index(fields=["blocker"], name="block_blocker_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("blocker", "blocked"), name="uniq_block_blocker_blocked"),
                    models.CheckConstraint(condition=models.Q(("blocker", models.F("blocked")), _negated=True), name="chk_block_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Message",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField(blank=True)),
                ("shared_post", models.JSONField(blank=True, null=True)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("recipient", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="received_messages", to=settings.AUTH_USER_MODEL)),
                ("sender", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sent_messages", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "message",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["sender", "recipient"], name="message_sender_recipient_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("notification_type", models.CharField(choices=[("like_post", "Like post"), ("comment_post", "Comment post"), ("like_comment", "Like comment"), ("reply_comment", "Reply comment"), ("follow", "Follow"), ("system", "System")], default="system", max_length=20)),
                ("title", models.CharField(blank=True, max_length=255)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("actor", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="sent_notifications", to=settings.AUTH_USER_MODEL)),
                ("comment", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, to="social.comment")),
                ("post", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, to="social.post")),
                ("recipient", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "notification",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
