import logging
from typing import List, Optional

from ..domain.errors import InvalidDraftError
from ..domain.models import Profile, Vocabulary
from .draft import ProfileDraft
from .store import ProfileStore

logger = logging.getLogger(__name__)


class ProfileManager:
    """session controller: hands out drafts and commits them to the store."""

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        store: Optional[ProfileStore] = None,
        require_email: bool = True,
    ):
        self.vocabulary = vocabulary or Vocabulary()
        self.store = store or ProfileStore()
        self.require_email = require_email

    def begin_create(self) -> ProfileDraft:
        """empty draft for a new profile."""
        return ProfileDraft(self.vocabulary)

    def begin_edit(self, profile_id: str) -> ProfileDraft:
        """
        draft pre-filled from an existing profile.

        raises:
            NotFoundError: if profile not found
        """
        return ProfileDraft(self.vocabulary, self.store.get(profile_id))

    def submit(self, draft: ProfileDraft) -> Profile:
        """
        validate a draft and add or update it.

        returns:
            the saved profile

        raises:
            InvalidDraftError: if the draft does not validate; the store is untouched
            NotFoundError: if an edited profile was deleted meanwhile
        """
        try:
            fields = draft.validate(require_email=self.require_email)
        except InvalidDraftError as e:
            logger.info(f"draft rejected: {e}")
            raise

        if draft.is_edit:
            return self.store.update(draft.profile_id, fields)
        return self.store.add(fields)

    def delete(self, profile_id: str) -> bool:
        """remove a profile; unknown ids are ignored."""
        return self.store.delete(profile_id)

    def toggle_favorite(self, profile_id: str) -> bool:
        """flip the favorite flag, returning the new value."""
        return self.store.toggle_favorite(profile_id)

    def get(self, profile_id: str) -> Profile:
        return self.store.get(profile_id)

    def list_profiles(self) -> List[Profile]:
        """all profiles in display order."""
        return list(self.store.snapshot())

    def favorites(self) -> List[Profile]:
        """favorite profiles in display order."""
        return [p for p in self.store.snapshot() if p.is_favorite]
