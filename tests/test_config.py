"""Tests for ReindentConfig — YAML loading, discovery and env overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from fibtab.core.config import ConfigError, ReindentConfig, load_config
from fibtab.core.discover import discover_files


class TestDefaults:
    def test_defaults(self) -> None:
        cfg = ReindentConfig()
        assert cfg.multiplier == 2
        assert cfg.skip_blank_lines is False
        assert cfg.create_backups is True
        assert cfg.include_exts == (".py",)
        assert cfg.ladder.width(4) == 10

    def test_invalid_multiplier(self) -> None:
        with pytest.raises(ConfigError):
            ReindentConfig(multiplier=0)

    def test_replace_ignores_none(self) -> None:
        cfg = ReindentConfig().replace(multiplier=None, create_backups=False)
        assert cfg.multiplier == 2
        assert cfg.create_backups is False


class TestFromYaml:
    def test_loads_options(self, tmp_path: Path) -> None:
        path = tmp_path / ".fibtab.yaml"
        path.write_text(
            "multiplier: 3\n"
            "skip_blank_lines: true\n"
            "include_exts: [py, .PYI]\n"
            "exclude_dirs: [generated]\n",
            encoding="utf-8",
        )

        cfg = ReindentConfig.from_yaml(path)

        assert cfg.multiplier == 3
        assert cfg.skip_blank_lines is True
        assert cfg.include_exts == (".py", ".pyi")
        assert cfg.exclude_dirs == ("generated",)

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / ".fibtab.yaml"
        path.write_text("", encoding="utf-8")
        assert ReindentConfig.from_yaml(path) == ReindentConfig()

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / ".fibtab.yaml"
        path.write_text("use_tabs: true\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="use_tabs"):
            ReindentConfig.from_yaml(path)

    def test_bad_type_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / ".fibtab.yaml"
        path.write_text("multiplier: lots\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ReindentConfig.from_yaml(path)

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / ".fibtab.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ReindentConfig.from_yaml(path)

    def test_invalid_yaml_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / ".fibtab.yaml"
        path.write_text("multiplier: [\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ReindentConfig.from_yaml(path)

    def test_non_string_key_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / ".fibtab.yaml"
        path.write_text("1: x\nmultiplier: 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="unknown option"):
            ReindentConfig.from_yaml(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            ReindentConfig.from_yaml(tmp_path / "absent.yaml")


class TestDiscover:
    def test_discovers_in_directory(self, tmp_path: Path) -> None:
        (tmp_path / "fibtab.yaml").write_text("multiplier: 4\n", encoding="utf-8")
        assert ReindentConfig.discover(tmp_path).multiplier == 4

    def test_dotfile_takes_priority(self, tmp_path: Path) -> None:
        (tmp_path / "fibtab.yaml").write_text("multiplier: 4\n", encoding="utf-8")
        (tmp_path / ".fibtab.yaml").write_text("multiplier: 5\n", encoding="utf-8")
        assert ReindentConfig.discover(tmp_path).multiplier == 5

    def test_file_target_uses_parent(self, tmp_path: Path) -> None:
        (tmp_path / ".fibtab.yml").write_text("multiplier: 3\n", encoding="utf-8")
        target = tmp_path / "app.py"
        target.write_text("x\n", encoding="utf-8")
        assert ReindentConfig.discover(target).multiplier == 3

    def test_no_file_gives_defaults(self, tmp_path: Path) -> None:
        assert ReindentConfig.discover(tmp_path) == ReindentConfig()


class TestEnvOverrides:
    def test_env_overrides_file(self, tmp_path: Path) -> None:
        (tmp_path / ".fibtab.yaml").write_text("multiplier: 3\n", encoding="utf-8")
        env = {"FIBTAB_MULTIPLIER": "5", "FIBTAB_CREATE_BACKUPS": "no"}

        cfg = load_config(tmp_path, environ=env)

        assert cfg.multiplier == 5
        assert cfg.create_backups is False

    def test_env_list_is_comma_separated(self) -> None:
        cfg = ReindentConfig().with_env({"FIBTAB_INCLUDE_EXTS": "py, txt"})
        assert cfg.include_exts == (".py", ".txt")

    def test_bad_env_value(self) -> None:
        with pytest.raises(ConfigError):
            ReindentConfig().with_env({"FIBTAB_SKIP_BLANK_LINES": "maybe"})

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        explicit = tmp_path / "custom.yaml"
        explicit.write_text("multiplier: 7\n", encoding="utf-8")
        (tmp_path / ".fibtab.yaml").write_text("multiplier: 3\n", encoding="utf-8")

        cfg = load_config(tmp_path, config_path=explicit, environ={})

        assert cfg.multiplier == 7


class TestDiscoverFiles:
    def test_sorted_and_filtered(self, tmp_path: Path) -> None:
        (tmp_path / "b.py").write_text("", encoding="utf-8")
        (tmp_path / "a.py").write_text("", encoding="utf-8")
        (tmp_path / "c.md").write_text("", encoding="utf-8")

        files = discover_files([tmp_path])

        assert [f.name for f in files] == ["a.py", "b.py"]

    def test_custom_excludes(self, tmp_path: Path) -> None:
        (tmp_path / "gen").mkdir()
        (tmp_path / "gen" / "x.py").write_text("", encoding="utf-8")
        (tmp_path / "y.py").write_text("", encoding="utf-8")

        files = discover_files([tmp_path], exclude=["gen"])

        assert [f.name for f in files] == ["y.py"]

    def test_duplicates_collapsed(self, tmp_path: Path) -> None:
        f = tmp_path / "a.py"
        f.write_text("", encoding="utf-8")
        assert discover_files([tmp_path, f]) == [f]

    def test_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            discover_files([tmp_path / "gone"])
