"""Tests for settings persistence and management."""

import json

import pytest

from ppwd.config.settings import AppSettings, SettingsManager


@pytest.fixture
def settings_manager(temp_config_dir):
    """Create settings manager with temporary config directory."""
    return SettingsManager()


@pytest.mark.unit
class TestAppSettings:
    """Test AppSettings dataclass."""

    def test_default_initialization(self):
        """Test default settings initialization."""
        settings = AppSettings()
        assert settings.default_length is None
        assert settings.use_home is True
        assert settings.home_marker == "~"
        assert settings.physical is True
        assert settings.strict is True

    def test_custom_initialization(self):
        """Test custom settings initialization."""
        settings = AppSettings(default_length=30, home_marker="@", physical=False)
        assert settings.default_length == 30
        assert settings.home_marker == "@"
        assert settings.physical is False


@pytest.mark.unit
class TestSettingsManager:
    """Test loading and saving settings."""

    def test_config_file_location(self, settings_manager, temp_config_dir):
        """Test the config file lives in the platform config dir."""
        assert settings_manager.config_dir == temp_config_dir
        assert settings_manager.config_file == temp_config_dir / "settings.json"

    def test_load_without_file_gives_defaults(self, settings_manager):
        """Test loading when no file exists."""
        assert settings_manager.load() == AppSettings()

    def test_save_creates_directory(self, settings_manager, temp_config_dir):
        """Test saving creates the config directory."""
        assert not temp_config_dir.exists()
        settings_manager.save(AppSettings(default_length=40))
        assert (temp_config_dir / "settings.json").exists()

    def test_save_and_load_round_trip(self, settings_manager):
        """Test saved settings are loaded back."""
        settings = AppSettings(
            default_length=-25, use_home=False, home_marker="H", strict=False
        )
        settings_manager.save(settings)

        loaded = SettingsManager().load()
        assert loaded == settings

    def test_percentage_default_round_trip(self, settings_manager):
        """Test a percentage default is stored as text."""
        settings_manager.save(AppSettings(default_length="-40%"))
        assert SettingsManager().load().default_length == "-40%"

    def test_saved_file_is_json(self, settings_manager, temp_config_dir):
        """Test the file format is plain JSON."""
        settings_manager.save(AppSettings(default_length=12))
        with open(temp_config_dir / "settings.json", encoding="utf-8") as f:
            data = json.load(f)
        assert data["default_length"] == 12
        assert data["home_marker"] == "~"

    def test_save_current_settings(self, settings_manager):
        """Test save() without arguments writes the current settings."""
        settings_manager.settings.default_length = 5
        settings_manager.save()
        assert SettingsManager().load().default_length == 5

    def test_unknown_keys_ignored(self, settings_manager, temp_config_dir):
        """Test keys from other versions are dropped."""
        temp_config_dir.mkdir(parents=True)
        (temp_config_dir / "settings.json").write_text(
            json.dumps({"default_length": 20, "colour": "red"}), encoding="utf-8"
        )
        loaded = settings_manager.load()
        assert loaded.default_length == 20

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "[1, 2, 3]",
            '{"default_length": 2.5}',
            '{"default_length": true}',
            '{"physical": "yes"}',
            '{"home_marker": 7}',
        ],
    )
    def test_corrupt_file_gives_defaults(
        self, settings_manager, temp_config_dir, content
    ):
        """Test corrupt or mistyped content falls back to defaults."""
        temp_config_dir.mkdir(parents=True)
        (temp_config_dir / "settings.json").write_text(content, encoding="utf-8")
        assert settings_manager.load() == AppSettings()
