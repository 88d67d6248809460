"""Unit tests for VidscribeConfig."""

import pytest
from pathlib import Path

from vidscribe.config import VidscribeConfig, DEFAULT_CONFIG


@pytest.mark.unit
class TestVidscribeConfig:
    """Test cases for VidscribeConfig."""

    def test_defaults_without_file(self):
        config = VidscribeConfig()
        assert config.config_file is None
        assert config.get('recognition.language') == "en-US"
        assert config.get('recognition.continuous') is True
        assert config.get('media.default_mime_type') == "video/webm"
        assert config.get('export.base_filename') == "recording"

    def test_defaults_are_not_shared(self):
        config = VidscribeConfig()
        config.set('recognition.language', "de-DE")
        assert DEFAULT_CONFIG['recognition']['language'] == "en-US"

    def test_missing_file(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            VidscribeConfig(str(Path(temp_data_dir) / "missing.yaml"))

    def test_partial_file_merges_over_defaults(self, config_file):
        config = VidscribeConfig(config_file(
            "recognition:\n"
            "  language: fr-FR\n"
        ))
        assert config.get('recognition.language') == "fr-FR"
        assert config.get('recognition.interim_results') is True
        assert config.get('export.base_filename') == "recording"

    def test_relative_paths_resolved_against_config_dir(self, config_file, temp_data_dir):
        config = VidscribeConfig(config_file(
            "export:\n"
            "  directory: out\n"
            "logging:\n"
            "  file_path: logs/app.log\n"
        ))
        assert config.get('export.directory') == str(Path(temp_data_dir) / "out")
        assert config.get('logging.file_path') == str(Path(temp_data_dir) / "logs" / "app.log")
        assert config.get_export_directory() == str((Path(temp_data_dir) / "out").absolute())

    def test_absolute_paths_kept(self, config_file, temp_data_dir):
        absolute = str(Path(temp_data_dir).absolute() / "elsewhere")
        config = VidscribeConfig(config_file(f"export:\n  directory: {absolute}\n"))
        assert config.get('export.directory') == absolute

    @pytest.mark.parametrize("content", ["", "recognition: [unclosed\n", "- just\n- a list\n"])
    def test_invalid_files(self, config_file, content):
        with pytest.raises(ValueError):
            VidscribeConfig(config_file(content))

    def test_get_missing_key_returns_default(self):
        config = VidscribeConfig()
        assert config.get('recognition.missing', 'fallback') == 'fallback'
        assert config.get('recognition.language.deeper') is None

    def test_set_creates_intermediate_sections(self):
        config = VidscribeConfig()
        config.set('playback.autoplay', False)
        assert config.get('playback.autoplay') is False

    def test_set_through_scalar_is_rejected(self):
        config = VidscribeConfig()
        with pytest.raises(ValueError):
            config.set('recognition.language.region', "GB")
        assert config.get('recognition.language') == "en-US"
