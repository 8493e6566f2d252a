"""
Configuration Tests
===================
"""

import pytest

from chunkstream.config import Settings, load_config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test from an empty directory with no chunkstream env vars."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "CHUNKSTREAM_CAPTURE_PATH",
        "CHUNKSTREAM_OUTPUT_DIR",
        "CHUNKSTREAM_LOG_LEVEL",
        "CHUNKSTREAM_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Defaults, YAML and environment precedence."""

    def test_defaults(self):
        settings = load_config()
        assert settings.capture.path == "./video.pcapng"
        assert settings.output.directory == "."
        assert settings.output.filename_prefix == "frame_"
        assert settings.output.extension == ".jpg"
        assert settings.logging.level == "INFO"

    def test_yaml_file(self, tmp_path):
        config = tmp_path / "custom.yaml"
        config.write_text(
            "capture:\n"
            "  path: /data/cam.pcap\n"
            "output:\n"
            "  directory: /data/frames\n"
            "  extension: .jpeg\n"
        )
        settings = load_config(str(config))
        assert settings.capture.path == "/data/cam.pcap"
        assert settings.output.directory == "/data/frames"
        assert settings.output.extension == ".jpeg"
        assert settings.output.filename_prefix == "frame_"

    def test_discovers_default_file(self, tmp_path):
        (tmp_path / "chunkstream.yaml").write_text("logging:\n  level: DEBUG\n")
        assert load_config().logging.level == "DEBUG"

    def test_empty_yaml(self, tmp_path):
        (tmp_path / "chunkstream.yaml").write_text("")
        assert load_config() == Settings()

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        config = tmp_path / "chunkstream.yaml"
        config.write_text("output:\n  directory: from-yaml\n")
        monkeypatch.setenv("CHUNKSTREAM_OUTPUT_DIR", "from-env")
        monkeypatch.setenv("CHUNKSTREAM_CAPTURE_PATH", "env.pcapng")
        monkeypatch.setenv("CHUNKSTREAM_LOG_FORMAT", "json")

        settings = load_config(str(config))
        assert settings.output.directory == "from-env"
        assert settings.capture.path == "env.pcapng"
        assert settings.logging.format == "json"
