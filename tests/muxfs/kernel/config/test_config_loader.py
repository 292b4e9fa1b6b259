"""Tests for the config loader.

Covers kind: Config YAML manifests, flat TOML files and pyproject.toml
[tool.muxfs] discovery.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from loguru import logger

from muxfs.kernel.config import ConfigLoader, MuxFSConfig, get_default_config, load_config
from muxfs.kernel.config.loader import _parse_bool_env
from muxfs.kernel.config.models import LoggingConfig
from muxfs.kernel.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

_ENV_VARS = (
    "MUXFS_CONFIG_PATH",
    "MUXFS_LOG_LEVEL",
    "MUXFS_LOG_FORMAT",
    "MUXFS_LOG_FILE",
    "MUXFS_LOG_COLOR",
    "MUXFS_LOG_TIMESTAMP",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate every test from the caller's environment and working directory."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


class TestParseBoolEnv:
    """Tests for _parse_bool_env function."""

    def test_truthy_values(self) -> None:
        for value in ["true", "True", "1", "yes", "ON", "enabled"]:
            assert _parse_bool_env(value) is True

    def test_falsy_values(self) -> None:
        for value in ["false", "FALSE", "0", "no", "off", "disabled"]:
            assert _parse_bool_env(value) is False

    def test_whitespace_handling(self) -> None:
        assert _parse_bool_env("  true  ") is True

    def test_invalid_value_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid boolean value"):
            _parse_bool_env("maybe")


class TestEnvSubstitution:
    """Tests for ${VAR} substitution."""

    def test_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SNAP_ROOT", "/srv/snap")
        loader = ConfigLoader()
        assert loader._substitute_env_vars("${SNAP_ROOT}/one") == "/srv/snap/one"

    def test_missing_keeps_placeholder(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MUXFS_TEST_MISSING", raising=False)
        loader = ConfigLoader()
        assert loader._substitute_env_vars("${MUXFS_TEST_MISSING}") == "${MUXFS_TEST_MISSING}"

    def test_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SNAP_ROOT", "/srv")
        loader = ConfigLoader()
        data = {"mounts": {"a": "${SNAP_ROOT}/a"}, "list": ["${SNAP_ROOT}", 3]}
        assert loader._substitute_env_vars(data) == {
            "mounts": {"a": "/srv/a"},
            "list": ["/srv", 3],
        }


class TestYamlConfig:
    """Tests for kind: Config YAML manifests."""

    def test_loads_mounts_and_logging(self, tmp_path: Path) -> None:
        path = tmp_path / "muxfs.yaml"
        path.write_text(
            "kind: Config\n"
            "metadata:\n"
            "  name: snapshots\n"
            "spec:\n"
            "  mounts:\n"
            "    one: /srv/one\n"
            "    two: /srv/two\n"
            "  logging:\n"
            "    level: DEBUG\n"
            "    format: json\n"
        )

        config = load_config(path)

        assert config.mounts == {"one": "/srv/one", "two": "/srv/two"}
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"

    def test_substitutes_env_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SNAPSHOT_DIR", "/data")
        path = tmp_path / "muxfs.yml"
        path.write_text("kind: Config\nspec:\n  mounts:\n    latest: ${SNAPSHOT_DIR}/latest\n")

        assert load_config(path).mounts == {"latest": "/data/latest"}

    def test_wrong_kind(self, tmp_path: Path) -> None:
        path = tmp_path / "pipeline.yaml"
        path.write_text("kind: Pipeline\nspec: {}\n")

        with pytest.raises(ConfigurationError, match="kind: Config"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n")

        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config(path)

    def test_empty_spec(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("kind: Config\n")

        config = load_config(path)
        assert config.mounts == {}
        assert config.logging == LoggingConfig()

    def test_mounts_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("kind: Config\nspec:\n  mounts:\n    - /srv/one\n")

        with pytest.raises(ConfigurationError, match="mounts"):
            load_config(path)

    def test_mount_directory_must_be_string(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("kind: Config\nspec:\n  mounts:\n    one: 42\n")

        with pytest.raises(ConfigurationError, match="'one'"):
            load_config(path)


class TestTomlConfig:
    """Tests for TOML configuration."""

    def test_flat_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "muxfs.toml"
        path.write_text('[mounts]\none = "/srv/one"\n\n[logging]\nlevel = "WARNING"\n')

        config = load_config(path)

        assert config.mounts == {"one": "/srv/one"}
        assert config.logging.level == "WARNING"

    def test_pyproject_section(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.muxfs.mounts]\nsnap = "/srv/snap"\n')

        assert load_config(path).mounts == {"snap": "/srv/snap"}

    def test_pyproject_without_section_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n')

        assert load_config(path) == get_default_config()


class TestDiscovery:
    """Tests for config file discovery."""

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_defaults_when_nothing_found(self) -> None:
        config = load_config()
        assert isinstance(config, MuxFSConfig)
        assert config.mounts == {}

    def test_discovery_is_silent_at_info(self, tmp_path: Path) -> None:
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="INFO", format="{message}")
        try:
            load_config()
            path = tmp_path / "muxfs.yaml"
            path.write_text("kind: Config\n")
            load_config(path)
        finally:
            logger.remove(handler_id)
        assert messages == []

    def test_env_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "env.yaml"
        path.write_text("kind: Config\nspec:\n  mounts:\n    env: /srv/env\n")
        monkeypatch.setenv("MUXFS_CONFIG_PATH", str(path))

        assert load_config().mounts == {"env": "/srv/env"}

    def test_env_path_missing_falls_through(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MUXFS_CONFIG_PATH", str(tmp_path / "missing.yaml"))
        assert load_config() == get_default_config()

    def test_pyproject_in_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "work" / "pyproject.toml").write_text(
            '[tool.muxfs.mounts]\ncwd = "/srv/cwd"\n'
        )
        assert load_config().mounts == {"cwd": "/srv/cwd"}

    def test_pyproject_in_parent(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.muxfs.mounts]\nparent = "/srv/p"\n')
        nested = tmp_path / "work" / "nested"
        nested.mkdir()
        monkeypatch.chdir(nested)

        assert load_config().mounts == {"parent": "/srv/p"}

    def test_pyproject_without_section_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "work" / "pyproject.toml").write_text('[project]\nname = "x"\n')
        (tmp_path / "pyproject.toml").write_text('[tool.muxfs.mounts]\nouter = "/srv/o"\n')

        assert load_config().mounts == {"outer": "/srv/o"}


class TestLoggingOverrides:
    """Environment variables override the logging section."""

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "muxfs.yaml"
        path.write_text("kind: Config\nspec:\n  logging:\n    level: INFO\n")
        monkeypatch.setenv("MUXFS_LOG_LEVEL", "debug")
        monkeypatch.setenv("MUXFS_LOG_FORMAT", "JSON")
        monkeypatch.setenv("MUXFS_LOG_FILE", "/tmp/muxfs.log")
        monkeypatch.setenv("MUXFS_LOG_COLOR", "off")
        monkeypatch.setenv("MUXFS_LOG_TIMESTAMP", "no")

        log = load_config(path).logging

        assert log.level == "DEBUG"
        assert log.format == "json"
        assert log.output_file == "/tmp/muxfs.log"
        assert log.use_color is False
        assert log.include_timestamp is False

    def test_invalid_bool_keeps_file_value(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "muxfs.yaml"
        path.write_text("kind: Config\nspec:\n  logging:\n    use_color: false\n")
        monkeypatch.setenv("MUXFS_LOG_COLOR", "sometimes")

        assert load_config(path).logging.use_color is False


class TestModels:
    """Tests for configuration models."""

    def test_defaults(self) -> None:
        config = get_default_config()
        assert config.mounts == {}
        assert config.logging.level == "INFO"
        assert config.logging.format == "structured"
        assert config.logging.output_file is None

    def test_default_mounts_not_shared(self) -> None:
        a = MuxFSConfig()
        b = MuxFSConfig()
        a.mounts["x"] = "/x"
        assert b.mounts == {}
