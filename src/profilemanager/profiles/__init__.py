"""in-memory profile management for one session."""
from .manager import ProfileManager
from .store import ProfileStore, StoreEvent
from .draft import ProfileDraft, parse_age
from ..domain.models import Profile, ProfileFields, Vocabulary
from ..domain.errors import NotFoundError, InvalidDraftError

__all__ = [
    "ProfileManager",
    "ProfileStore",
    "StoreEvent",
    "ProfileDraft",
    "parse_age",
    "Profile",
    "ProfileFields",
    "Vocabulary",
    "NotFoundError",
    "InvalidDraftError",
]
