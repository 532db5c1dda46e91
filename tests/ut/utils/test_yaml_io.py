"""YAML 读取测试"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

import forgekit.utils.yaml_io as yaml_io
from forgekit.utils.yaml_io import load_yaml


class TestLoadYaml:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_yaml(tmp_path / "missing.yml") == {}

    def test_empty_file(self, tmp_path: Path) -> None:
        p = tmp_path / "empty.yml"
        p.write_text("", encoding="utf-8")
        assert load_yaml(p) == {}

    def test_non_mapping(self, tmp_path: Path) -> None:
        p = tmp_path / "list.yml"
        p.write_text("- a\n- b\n", encoding="utf-8")
        assert load_yaml(p) == {}

    def test_mapping(self, tmp_path: Path) -> None:
        p = tmp_path / "cfg.yml"
        p.write_text("cache_dir: /tmp/c\n", encoding="utf-8")
        assert load_yaml(str(p)) == {"cache_dir": "/tmp/c"}

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        p = tmp_path / "bad.yml"
        p.write_text("a: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_yaml(p)

    def test_too_large(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(yaml_io, "MAX_YAML_SIZE", 4)
        p = tmp_path / "big.yml"
        p.write_text("cache_dir: /tmp/c\n", encoding="utf-8")
        with pytest.raises(ValueError, match="过大"):
            load_yaml(p)
