"""
Configuration management with XDG-compliant persistent settings.

Stores the user's preferred defaults following OS conventions:
- Linux/Unix: XDG_CONFIG_HOME (~/.config/ppwd/)
- macOS: ~/Library/Application Support/ppwd/
- Windows: %APPDATA%/ppwd/
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from platformdirs import user_config_dir

from .constants import APP_NAME, HOME_MARKER, SETTINGS_FILE_NAME


@dataclass
class AppSettings:
    """Defaults applied when the command line does not say otherwise."""

    # LENGTH used when none is given: an int, a percentage string like "50%",
    # or None to never compress
    default_length: int | str | None = None

    # Home directory substitution
    use_home: bool = True
    home_marker: str = HOME_MARKER

    # Directory lookup
    physical: bool = True

    # Reject malformed lengths instead of treating them as 0
    strict: bool = True


class SettingsManager:
    """Loads and saves application settings."""

    APP_NAME = APP_NAME
    CONFIG_FILE = SETTINGS_FILE_NAME

    def __init__(self):
        """Initialize settings manager."""
        self.config_dir = Path(user_config_dir(self.APP_NAME))
        self.config_file = self.config_dir / self.CONFIG_FILE
        self.settings = AppSettings()

    def load(self) -> AppSettings:
        """
        Load settings from disk.

        Returns:
            Loaded settings (or defaults if file doesn't exist)
        """
        if not self.config_file.exists():
            self.settings = AppSettings()
            return self.settings

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)

            # Ignore keys written by other versions
            known = {field.name for field in fields(AppSettings)}
            self.settings = AppSettings(
                **{key: value for key, value in data.items() if key in known}
            )
            self._validate()
            return self.settings

        except (json.JSONDecodeError, AttributeError, TypeError, ValueError):
            # If config is corrupted, start fresh with defaults
            self.settings = AppSettings()
            return self.settings

    def save(self, settings: AppSettings | None = None) -> None:
        """
        Save settings to disk.

        Args:
            settings: Settings to save (uses current if None)
        """
        if settings is not None:
            self.settings = settings

        # Ensure config directory exists
        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(asdict(self.settings), f, indent=2)

    def _validate(self) -> None:
        """Raise ValueError if loaded values have the wrong types."""
        s = self.settings
        if s.default_length is not None and (
            isinstance(s.default_length, bool)
            or not isinstance(s.default_length, (int, str))
        ):
            raise ValueError("default_length must be an integer, string or null")
        if not isinstance(s.home_marker, str):
            raise ValueError("home_marker must be a string")
        for name in ("use_home", "physical", "strict"):
            if not isinstance(getattr(s, name), bool):
                raise ValueError(f"{name} must be a boolean")
