from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from social.models import Account, Block, Comment, Follow, Message, Notification, Post, PostImage


class PostImageInline(admin.TabularInline):
    model = PostImage
    extra = 0


@admin.register(Account)
class AccountAdmin(UserAdmin):
    """Account admin with the profile fields added to the stock user screens."""
    list_display = ('username', 'display_name', 'email', 'role', 'is_staff')
    search_fields = ('username', 'display_name', 'email')
    fieldsets = UserAdmin.fieldsets + (
        ('Profile', {'fields': ('display_name', 'avatar', 'story', 'role')}),
    )


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ('title', 'author', 'content_type', 'mode', 'heart_count', 'created_at')
    list_filter = ('content_type', 'mode', 'created_at')
    search_fields = ('title', 'content', 'topic', 'sports', 'author__username')
    readonly_fields = ('heart_count',)
    inlines = [PostImageInline]

    @admin.action(description='Make selected posts private')
    def make_private(self, request, queryset):
        """Switch selected posts to private mode."""
        queryset.update(mode=Post.MODE_PRIVATE)

    actions = ['make_private']


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ('author', 'post', 'parent', 'like_count', 'created_at')
    search_fields = ('content', 'author__username')
    readonly_fields = ('like_count',)


@admin.register(Follow, Block)
class EdgeAdmin(admin.ModelAdmin):
    list_display = ('__str__', 'created_at')


admin.site.register(Message)
admin.site.register(Notification)
