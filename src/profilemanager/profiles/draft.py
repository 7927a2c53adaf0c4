"""editable draft of a profile, validated before it reaches the store."""
import re
from typing import List, Optional

from ..domain.errors import InvalidDraftError
from ..domain.models import Profile, ProfileFields, Vocabulary

# optional sign then digits, nothing else (no whitespace, no underscores)
_WHOLE_NUMBER = re.compile(r"^[+-]?[0-9]+$")


def parse_age(text: str) -> Optional[int]:
    """parse a whole number, returning None when text is not one."""
    if not _WHOLE_NUMBER.match(text):
        return None
    return int(text)


class ProfileDraft:
    """
    candidate field values for a new or edited profile.

    text inputs are kept as typed; nothing is checked until validate().
    """

    def __init__(self, vocabulary: Vocabulary, profile: Optional[Profile] = None):
        self.vocabulary = vocabulary
        self.profile_id: Optional[str] = None
        self.name = ""
        self.email = ""
        self.phone = ""
        self.age = ""
        self.gender = vocabulary.default_gender
        self.hobbies: List[str] = []
        self.notifications_enabled = False
        self.is_favorite = False

        if profile is not None:
            self.profile_id = profile.id
            self.name = profile.name
            self.email = profile.email
            self.phone = profile.phone
            self.age = str(profile.age)
            self.gender = profile.gender
            self.hobbies = list(profile.hobbies)
            self.notifications_enabled = profile.notifications_enabled
            # echoed back so an edit keeps the favorite flag
            self.is_favorite = profile.is_favorite

    @property
    def is_edit(self) -> bool:
        return self.profile_id is not None

    def set_hobby(self, hobby: str, checked: bool):
        """check or uncheck one hobby from the vocabulary."""
        if hobby not in self.vocabulary.hobbies:
            raise InvalidDraftError(
                "hobbies",
                f"'{hobby}' is not one of: {', '.join(self.vocabulary.hobbies)}"
            )
        if checked and hobby not in self.hobbies:
            self.hobbies.append(hobby)
        elif not checked and hobby in self.hobbies:
            self.hobbies.remove(hobby)

    def validate(self, require_email: bool = True) -> ProfileFields:
        """
        turn the draft into profile fields.

        args:
            require_email: reject an empty email as well as an empty name

        raises:
            InvalidDraftError: naming the first field that failed
        """
        age = parse_age(self.age)
        if age is None:
            raise InvalidDraftError("age", f"'{self.age}' is not a whole number")

        if not self.name.strip():
            raise InvalidDraftError("name", "name cannot be empty")

        if require_email and not self.email.strip():
            raise InvalidDraftError("email", "email cannot be empty")

        if not self.gender.strip():
            raise InvalidDraftError("gender", "gender cannot be empty")

        unknown = [h for h in self.hobbies if h not in self.vocabulary.hobbies]
        if unknown:
            raise InvalidDraftError("hobbies", f"unknown hobbies: {', '.join(unknown)}")

        return ProfileFields(
            name=self.name,
            email=self.email,
            phone=self.phone,
            age=age,
            gender=self.gender,
            hobbies=tuple(self.hobbies),
            notifications_enabled=self.notifications_enabled,
            is_favorite=self.is_favorite,
        )
