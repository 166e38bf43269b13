"""
Unit tests for services.dependencies module and settings wiring.
"""
import pytest
from config.settings import Settings
from services.batch_service import BatchService
from services.crop_service import GraphicsMagickCropper, PillowCropper
from services.dependencies import (
    get_batch_service,
    get_cropper,
    get_extraction_service,
    get_lexicon,
)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test built-in defaults."""
        monkeypatch.delenv("DEBUG", raising=False)
        settings = Settings(_env_file=None)

        assert settings.cropper_backend == "graphicsmagick"
        assert settings.skip_list == ["0230_038", "0230_042", "0230_048"]
        assert settings.dictionary_path == "/usr/share/dict/words"
        assert "stardust" in settings.extra_words

    def test_env_override(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("DATA_DIR", "/labels")
        monkeypatch.setenv("SKIP_LIST", '["a", "b"]')
        monkeypatch.setenv("MAX_WORKERS", "3")

        settings = Settings(_env_file=None)

        assert settings.data_dir == "/labels"
        assert settings.skip_list == ["a", "b"]
        assert settings.max_workers == 3

    @pytest.mark.parametrize("value", ["", "x", "1", "true", "yes"])
    def test_debug_set_to_anything_enables(self, monkeypatch, value):
        """Test DEBUG works as a presence flag."""
        monkeypatch.setenv("DEBUG", value)

        assert Settings(_env_file=None).debug is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_debug_explicitly_disabled(self, monkeypatch, value):
        """Test conventional false values keep DEBUG off."""
        monkeypatch.setenv("DEBUG", value)

        assert Settings(_env_file=None).debug is False

    def test_debug_forces_debug_level(self):
        """Test DEBUG raises verbosity regardless of log_level."""
        assert Settings(_env_file=None, debug=True, log_level="warning").get_effective_log_level() == "DEBUG"
        assert Settings(_env_file=None, debug=False, log_level="warning").get_effective_log_level() == "WARNING"


class TestDependencies:
    """Tests for service builders."""

    def test_get_lexicon(self, words_file):
        """Test the lexicon is configured but not loaded."""
        lexicon = get_lexicon(Settings(_env_file=None, dictionary_path=words_file))

        assert lexicon.words_path == words_file
        assert not lexicon.is_loaded

    def test_get_cropper(self):
        """Test backend selection from settings."""
        assert isinstance(get_cropper(Settings(_env_file=None)), GraphicsMagickCropper)
        assert isinstance(get_cropper(Settings(_env_file=None, cropper_backend="pillow")), PillowCropper)

    def test_get_extraction_service(self, data_dir, output_dir, recording_cropper, lexicon):
        """Test the extraction service uses the configured directories."""
        settings = Settings(_env_file=None, data_dir=str(data_dir), output_dir=str(output_dir))

        service = get_extraction_service(settings, cropper=recording_cropper, lexicon=lexicon)

        assert service.cropper is recording_cropper
        assert service.repository.data_dir == str(data_dir)
        assert service.output_dir == str(output_dir)

    def test_get_batch_service(self, data_dir, recording_cropper, lexicon):
        """Test the batch service picks up the skip list and pool size."""
        settings = Settings(_env_file=None, data_dir=str(data_dir), skip_list=["x"], max_workers=2)
        extraction = get_extraction_service(settings, cropper=recording_cropper, lexicon=lexicon)

        service = get_batch_service(settings, extraction_service=extraction)

        assert isinstance(service, BatchService)
        assert service.skip_list == frozenset({"x"})
        assert service.max_workers == 2
