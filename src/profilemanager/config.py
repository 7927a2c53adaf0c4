import os
from pathlib import Path
from typing import Dict, List, Optional

from .domain.errors import ConfigError
from .domain.models import Vocabulary

CONFIG_DIR = Path(os.environ.get("PROFILEMANAGER_HOME", Path.home() / ".profilemanager"))
CONFIG_FILE = CONFIG_DIR / "config"

GENDERS_KEY = "PROFILEMANAGER_GENDERS"
HOBBIES_KEY = "PROFILEMANAGER_HOBBIES"
REQUIRE_EMAIL_KEY = "PROFILEMANAGER_REQUIRE_EMAIL"


def read_config(config_file: Optional[Path] = None) -> Dict[str, str]:
    """read KEY=VALUE pairs from the config file, empty if missing or unreadable."""
    config_file = config_file or CONFIG_FILE
    config = {}
    if not config_file.exists():
        return config

    try:
        with open(config_file, "r") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" in line:
                    key, value = line.split("=", 1)
                    config[key.strip()] = value.strip()
    except (IOError, PermissionError, OSError):
        # if we can't read the file, treat as not configured
        return {}
    return config


def write_config_value(key: str, value: str, config_file: Optional[Path] = None):
    """set one value in the config file, preserving other config values."""
    config_file = config_file or CONFIG_FILE
    config = read_config(config_file)
    config[key] = value

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            for k, v in config.items():
                f.write(f"{k}={v}\n")
    except (IOError, PermissionError, OSError) as e:
        raise ConfigError(f"failed to write config file: {e}") from e


def _split_list(value: str) -> List[str]:
    items = []
    for item in value.split(","):
        item = item.strip()
        if item and item not in items:
            items.append(item)
    return items


def get_vocabulary(config_file: Optional[Path] = None) -> Vocabulary:
    """
    get the gender and hobby option sets.

    unset or empty entries fall back to the built-in defaults.
    """
    config = read_config(config_file)
    vocabulary = Vocabulary()

    genders = _split_list(config.get(GENDERS_KEY, ""))
    if genders:
        vocabulary.genders = genders

    hobbies = _split_list(config.get(HOBBIES_KEY, ""))
    if hobbies:
        vocabulary.hobbies = hobbies

    return vocabulary


def set_vocabulary_option(key: str, values: List[str], config_file: Optional[Path] = None):
    """store a comma separated option list under key."""
    cleaned = _split_list(",".join(values))
    if not cleaned:
        raise ConfigError("at least one option is required")
    write_config_value(key, ",".join(cleaned), config_file)


def get_require_email(config_file: Optional[Path] = None) -> bool:
    """whether drafts must carry a non-empty email (on unless set to false)."""
    value = read_config(config_file).get(REQUIRE_EMAIL_KEY, "true")
    return value.lower() not in ("false", "0", "no", "off")
