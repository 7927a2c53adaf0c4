import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..domain.errors import NotFoundError
from ..domain.models import Profile, ProfileFields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreEvent:
    """change notification sent to store listeners."""
    kind: str  # added, updated, deleted or favorite_toggled
    profile_id: str
    snapshot: Tuple[Profile, ...]


Listener = Callable[[StoreEvent], None]


class ProfileStore:
    """
    holds the ordered, in-memory profile collection for one session.

    all mutation goes through add, update, delete and toggle_favorite.
    each one runs under a single lock so snapshot never sees a partial change.
    """

    def __init__(self):
        self._records: List[Profile] = []
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, profile_id: object) -> bool:
        with self._lock:
            return self._index_of(profile_id) is not None

    def _index_of(self, profile_id):
        for i, record in enumerate(self._records):
            if record.id == profile_id:
                return i
        return None

    def _new_id(self) -> str:
        while True:
            profile_id = str(uuid.uuid4())
            if self._index_of(profile_id) is None:
                return profile_id

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        register a listener called after every successful mutation.

        returns:
            a callable that removes the listener again
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, kind: str, profile_id: str, snapshot: Tuple[Profile, ...]):
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(StoreEvent(kind=kind, profile_id=profile_id, snapshot=snapshot))

    def snapshot(self) -> Tuple[Profile, ...]:
        """current records in order, as an immutable view."""
        with self._lock:
            return tuple(self._records)

    def get(self, profile_id: str) -> Profile:
        """
        look up one record.

        raises:
            NotFoundError: if no record has this id
        """
        with self._lock:
            index = self._index_of(profile_id)
            if index is None:
                raise NotFoundError(profile_id)
            return self._records[index]

    def add(self, fields: ProfileFields) -> Profile:
        """append a new record with a freshly generated id."""
        with self._lock:
            profile = Profile(id=self._new_id(), **fields.model_dump())
            self._records.append(profile)
            snapshot = tuple(self._records)

        logger.debug(f"added profile {profile.id} ({profile.name})")
        self._notify("added", profile.id, snapshot)
        return profile

    def update(self, profile_id: str, fields: ProfileFields) -> Profile:
        """
        replace a record in place, keeping its id and position.

        is_favorite is taken from fields, so callers that are not changing it
        should pass the current value back.

        raises:
            NotFoundError: if no record has this id; nothing is changed
        """
        with self._lock:
            index = self._index_of(profile_id)
            if index is None:
                logger.warning(f"update of unknown profile {profile_id} ignored")
                raise NotFoundError(profile_id)

            profile = Profile(id=profile_id, **fields.model_dump())
            self._records[index] = profile
            snapshot = tuple(self._records)

        logger.debug(f"updated profile {profile_id}")
        self._notify("updated", profile_id, snapshot)
        return profile

    def delete(self, profile_id: str) -> bool:
        """
        remove a record. deleting an unknown id is a no-op.

        returns:
            True if a record was removed
        """
        with self._lock:
            index = self._index_of(profile_id)
            if index is None:
                logger.debug(f"delete of unknown profile {profile_id}, nothing to do")
                return False
            del self._records[index]
            snapshot = tuple(self._records)

        logger.debug(f"deleted profile {profile_id}")
        self._notify("deleted", profile_id, snapshot)
        return True

    def toggle_favorite(self, profile_id: str) -> bool:
        """
        flip is_favorite on one record, leaving everything else untouched.

        returns:
            the new is_favorite value

        raises:
            NotFoundError: if no record has this id; nothing is changed
        """
        with self._lock:
            index = self._index_of(profile_id)
            if index is None:
                logger.warning(f"favorite toggle of unknown profile {profile_id} ignored")
                raise NotFoundError(profile_id)

            current = self._records[index]
            profile = current.model_copy(update={"is_favorite": not current.is_favorite})
            self._records[index] = profile
            snapshot = tuple(self._records)

        logger.debug(f"profile {profile_id} favorite set to {profile.is_favorite}")
        self._notify("favorite_toggled", profile_id, snapshot)
        return profile.is_favorite
