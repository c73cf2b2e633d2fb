"""Profile edits for an account."""

import logging

from social.exceptions import NotFound, ValidationError
from social.repos import AccountRepo

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("display_name", "story", "avatar")
STORY_MAX_LENGTH = 500


class ProfileService:
    """Update the self-described parts of an account."""

    def __init__(self, account_repo=None):
        self.account_repo = account_repo or AccountRepo()

    def update_profile(self, user_id, **changes):
        """
        Apply a partial profile edit.

        Args:
            user_id: the account being edited.
            **changes: any of display_name, story and avatar. Other keys and
                None values are ignored; an empty avatar clears it.

        Returns:
            The refreshed account.
        """
        account = self.account_repo.first(id=user_id)
        if account is None:
            raise NotFound("User not found")

        updates = {k: str(v) for k, v in changes.items() if k in PROFILE_FIELDS and v is not None}
        if "display_name" in updates:
            updates["display_name"] = updates["display_name"].strip()
            if len(updates["display_name"]) > 100:
                raise ValidationError({"display_name": "Display name is limited to 100 characters."})
        if len(updates.get("story", "")) > STORY_MAX_LENGTH:
            raise ValidationError({"story": f"Story is limited to {STORY_MAX_LENGTH} characters."})
        if "avatar" in updates:
            updates["avatar"] = updates["avatar"] or None

        if updates:
            self.account_repo.update({"id": user_id}, **updates)
            logger.info("Account %s updated %s", user_id, ", ".join(sorted(updates)))
            account.refresh_from_db()
        return account
