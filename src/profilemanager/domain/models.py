from pydantic import BaseModel, ConfigDict, Field
from typing import List, Tuple

class ProfileFields(BaseModel):
    """every mutable attribute of a profile, i.e. everything except the id."""
    model_config = ConfigDict(frozen=True)

    name: str
    email: str = ""
    phone: str = ""
    age: int
    gender: str
    hobbies: Tuple[str, ...] = ()
    notifications_enabled: bool = False
    is_favorite: bool = False

class Profile(ProfileFields):
    """a profile record as held by the store."""
    id: str

    @property
    def fields(self) -> ProfileFields:
        return ProfileFields(**self.model_dump(exclude={"id"}))

class Vocabulary(BaseModel):
    """option sets offered by the draft editor."""
    genders: List[str] = Field(default_factory=lambda: ["Male", "Female", "Other"])
    hobbies: List[str] = Field(default_factory=lambda: ["Reading", "Traveling", "Coding"])

    @property
    def default_gender(self) -> str:
        return self.genders[0] if self.genders else ""
