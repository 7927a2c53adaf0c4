class ProfileManagerError(Exception):
    """base class for exceptions in profilemanager."""
    pass

class NotFoundError(ProfileManagerError):
    """raised when a profile id does not exist in the store."""
    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__(f"Profile '{profile_id}' not found")

class InvalidDraftError(ProfileManagerError):
    """raised when a draft cannot be turned into profile fields."""
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

class ConfigError(ProfileManagerError):
    """raised when the config file cannot be written."""
    pass
