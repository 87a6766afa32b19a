"""Tests for persistence safety features (backups, atomic writes, corruption handling)."""

import json
from pathlib import Path

import pytest

from colorstate.exceptions import ConfigFileInvalidError, ConfigValidationError, ConfigWriteError
from colorstate.model_manager.persistence import PydanticPersistence
from colorstate.models import ColorBounds, PickerConfig


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        initial = PickerConfig(alpha_enabled=False)
        PydanticPersistence.save_json(initial, config_path, backup=False)

        modified = PickerConfig(bounds=ColorBounds(max_hue=90))
        PydanticPersistence.save_json(modified, config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, PickerConfig) == initial

        assert PydanticPersistence.load_json(config_path, PickerConfig) == modified

    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(PickerConfig(), config_path, backup=False)
        PydanticPersistence.save_json(PickerConfig(alpha_enabled=False), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        """Test that temporary file is cleaned up after successful write."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(PickerConfig(), config_path)

        assert not config_path.with_suffix(".json.tmp").exists()
        assert PydanticPersistence.load_json(config_path, PickerConfig) == PickerConfig()

    def test_save_creates_parent_directories(self, tmp_path: Path):
        """Test that missing parent directories are created."""
        config_path = tmp_path / "nested" / "dir" / "config.json"

        PydanticPersistence.save_json(PickerConfig(), config_path)

        assert config_path.exists()

    def test_saved_json_is_readable(self, tmp_path: Path):
        """Test the on-disk layout of a saved config."""
        config_path = tmp_path / "config.json"
        PickerConfig(bounds=ColorBounds(min_value=20)).save(config_path)

        data = json.loads(config_path.read_text(encoding="utf-8"))
        assert data["bounds"]["min_value"] == 20
        assert data["color_mode"] == "rgb"

    def test_load_json_missing_file(self, tmp_path: Path):
        """Test that load_json raises FileNotFoundError for missing files."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", PickerConfig)

    def test_load_json_or_default_missing_file(self, tmp_path: Path):
        """Test load_json_or_default with missing file."""
        config_path = tmp_path / "missing.json"

        result = PydanticPersistence.load_json_or_default(config_path, PickerConfig)

        assert result == PickerConfig()
        assert not config_path.exists()

    def test_load_json_or_default_with_factory(self, tmp_path: Path):
        """Test custom default factory."""
        custom = PickerConfig(alpha_enabled=False)

        result = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json", PickerConfig, default_factory=lambda: custom
        )

        assert result is custom

    def test_load_json_or_default_corrupted_file_raises(self, tmp_path: Path):
        """Test that load_json_or_default raises on corrupted files."""
        config_path = tmp_path / "corrupted.json"
        config_path.write_text("{ invalid }", encoding="utf-8")
        original_content = config_path.read_text()

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json_or_default(config_path, PickerConfig)

        assert config_path.read_text() == original_content

    def test_empty_file_raises(self, tmp_path: Path):
        """Test that an empty file is reported as invalid."""
        config_path = tmp_path / "empty.json"
        config_path.write_text("   \n", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, PickerConfig)

        assert "File is empty" in exc_info.value.technical_message

    def test_multiple_validation_errors(self, tmp_path: Path):
        """Test that several bad fields are reported together."""
        config_path = tmp_path / "config.json"
        config_path.write_text(
            json.dumps({"alpha_enabled": "maybe", "color_mode": "cmyk"}), encoding="utf-8"
        )

        with pytest.raises(ConfigValidationError) as exc_info:
            PydanticPersistence.load_json(config_path, PickerConfig)

        assert exc_info.value.field == "multiple fields"
        assert "2 validation errors" in exc_info.value.user_message

    def test_validate_json(self, tmp_path: Path):
        """Test validate_json for valid, invalid and missing files."""
        good = tmp_path / "good.json"
        PickerConfig().save(good)
        assert PydanticPersistence.validate_json(good, PickerConfig) == (True, None)

        bad = tmp_path / "bad.json"
        bad.write_text('{"bounds": {"min_hue": 50, "max_hue": 10}}', encoding="utf-8")
        is_valid, error = PydanticPersistence.validate_json(bad, PickerConfig)
        assert is_valid is False
        assert "bounds" in error

        is_valid, error = PydanticPersistence.validate_json(tmp_path / "nope.json", PickerConfig)
        assert is_valid is False
        assert "File not found" in error

    def test_save_failure_raises_config_write_error(self, tmp_path: Path):
        """Test that I/O failures while saving surface as ConfigWriteError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        config_path = blocker / "config.json"

        with pytest.raises(ConfigWriteError) as exc_info:
            PydanticPersistence.save_json(PickerConfig(), config_path)

        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.file_path == str(config_path)
        assert exc_info.value.recoverable
        assert blocker.read_text() == "not a directory"
