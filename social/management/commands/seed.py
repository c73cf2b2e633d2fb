"""Management command to seed the database with sample accounts, posts and social edges."""

import random

from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction
from faker import Faker

from social.models import Account, Comment, Follow, Post
from social.services import LikeService

MODES = [Post.MODE_PUBLIC, Post.MODE_PUBLIC, Post.MODE_FRIENDS, Post.MODE_PRIVATE]
TOPICS = ["running", "cycling", "climbing", "swimming", "football", "yoga"]


class Command(BaseCommand):
    """Seed sample data for local development."""
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample accounts, posts, follows, likes and comments'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=50, help="Target number of accounts.")
        parser.add_argument("--posts-per-user", type=int, default=3)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.rng = random.Random()

    def handle(self, *args, **options):
        self.create_accounts(options["users"])
        ids = list(Account.objects.filter(is_staff=False).values_list("id", flat=True))
        self.seed_follows(ids, per_user=5)
        post_ids = self.seed_posts(ids, options["posts_per_user"])
        self.seed_likes(ids, post_ids, max_per_post=10)
        self.seed_comments(ids, post_ids, max_per_post=4)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_accounts(self, target):
        count = Account.objects.count()
        while count < target:
            first, last = self.faker.first_name(), self.faker.last_name()
            username = f"{first}{last}{self.rng.randint(10, 999)}".lower()
            try:
                with transaction.atomic():
                    Account.objects.create_user(
                        username=username,
                        email=f"{username}@example.org",
                        password=self.DEFAULT_PASSWORD,
                        first_name=first,
                        last_name=last,
                        display_name=f"{first} {last}",
                        story=self.faker.sentence(nb_words=10),
                    )
            except IntegrityError:
                # username collision; draw another
                continue
            count += 1

    def seed_follows(self, ids, per_user):
        """Random follow edges; roughly a third are made mutual."""
        if len(ids) < 2:
            return
        edges = set()
        for follower in ids:
            pool = [x for x in ids if x != follower]
            for following in self.rng.sample(pool, min(per_user, len(pool))):
                edges.add((follower, following))
                if self.rng.random() < 0.33:
                    edges.add((following, follower))
        Follow.objects.bulk_create(
            [Follow(follower_id=a, following_id=b) for a, b in edges],
            ignore_conflicts=True,
            batch_size=1000,
        )

    def seed_posts(self, ids, per_user):
        posts = []
        for author_id in ids:
            for _ in range(per_user):
                content_type = self.rng.choice([Post.TYPE_VIDEO, Post.TYPE_VIDEO, Post.TYPE_IMAGE, Post.TYPE_TEXT])
                posts.append(Post(
                    author_id=author_id,
                    content_type=content_type,
                    mode=self.rng.choice(MODES),
                    title=self.faker.sentence(nb_words=4).rstrip("."),
                    content=self.faker.paragraph(nb_sentences=2),
                    video=f"videos/{self.faker.uuid4()}.mp4" if content_type == Post.TYPE_VIDEO else None,
                    topic=self.rng.choice(TOPICS),
                    sports=self.rng.choice(TOPICS),
                ))
        Post.objects.bulk_create(posts, batch_size=500)
        return list(Post.objects.values_list("id", flat=True))

    def seed_likes(self, ids, post_ids, max_per_post):
        likes = LikeService()
        for post_id in post_ids:
            for user_id in self.rng.sample(ids, self.rng.randint(0, min(max_per_post, len(ids)))):
                likes.like_post(post_id, user_id)

    def seed_comments(self, ids, post_ids, max_per_post):
        rows = [
            Comment(post_id=post_id, author_id=self.rng.choice(ids), content=self.faker.sentence())
            for post_id in post_ids
            for _ in range(self.rng.randint(0, max_per_post))
        ]
        Comment.objects.bulk_create(rows, batch_size=500)
