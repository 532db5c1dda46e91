"""命令行端到端测试"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

import forgekit.core.config as cfgmod
from forgekit import __version__
from forgekit.cli import main
from forgekit.utils.logger import reset_logging


@pytest.fixture()
def runner(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cfgmod, "_current", None)
    monkeypatch.delenv("FORGEKIT_CONFIG", raising=False)
    yield CliRunner()
    reset_logging()


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "forgekit.yml"
    path.write_text(yaml.dump({
        "cache_dir": str(tmp_path / "cache"),
        "rpc_storage_caching": {"chains": ["mainnet"], "endpoints": "remote"},
    }), encoding="utf-8")
    return path


def _invoke(runner: CliRunner, config_file: Path, *args: str):
    return runner.invoke(main, ["--config", str(config_file), *args])


class TestMain:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_config_aborts(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("rpc_storage_caching: all\n", encoding="utf-8")
        result = runner.invoke(main, ["--config", str(bad), "dep", "resolve", "org/repo"])
        assert result.exit_code == 1
        assert "映射类型" in result.output

    def test_broken_yaml_aborts(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("cache_dir: [unclosed\n", encoding="utf-8")
        result = runner.invoke(main, ["--config", str(bad), "dep", "resolve", "org/repo"])
        assert result.exit_code == 1
        assert "配置文件无法读取" in result.output
        assert "Traceback" not in result.output


class TestDepResolve:
    def test_text_output(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "dep", "resolve", "gakonst/lootloose@v1")
        assert result.exit_code == 0
        assert "https://github.com/gakonst/lootloose" in result.output
        assert "ref=v1" in result.output

    def test_json_output(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(
            runner, config_file, "dep", "resolve", "--json",
            "git@gitlab.com:org/repo", "org/lib",
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"name": "repo", "url": "https://gitlab.com/org/repo", "ref": None},
            {"name": "lib", "url": "https://github.com/org/lib", "ref": None},
        ]

    def test_invalid_shorthand_message(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "dep", "resolve", "solmate")
        assert result.exit_code == 1
        assert "无效的 GitHub 仓库名 `solmate`" in result.output

    def test_requires_argument(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "dep", "resolve")
        assert result.exit_code == 2


class TestForkCache:
    def test_enabled(self, runner: CliRunner, config_file: Path, tmp_path: Path) -> None:
        result = _invoke(
            runner, config_file, "fork", "cache", "--json",
            "--fork-url", "https://eth.example.com",
            "--fork-block-number", "14435000", "--chain-id", "1",
        )
        assert result.exit_code == 0
        fork = json.loads(result.output)["fork"]
        assert fork["cache_path"] == str(tmp_path / "cache" / "1" / "14435000" / "storage.json")
        assert fork["pin_block"] == 14435000

    def test_hex_block_number(self, runner: CliRunner, config_file: Path, tmp_path: Path) -> None:
        result = _invoke(
            runner, config_file, "fork", "cache",
            "--fork-url", "https://eth.example.com",
            "--fork-block-number", "0x10", "--chain-id", "1",
        )
        assert result.exit_code == 0
        assert str(tmp_path / "cache" / "1" / "16" / "storage.json") in result.output

    def test_chain_not_allowed(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(
            runner, config_file, "fork", "cache",
            "--fork-url", "https://eth.example.com",
            "--fork-block-number", "1", "--chain-id", "137",
        )
        assert result.exit_code == 0
        assert "存储缓存未启用" in result.output

    def test_local_endpoint_not_cached(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(
            runner, config_file, "fork", "cache", "--json",
            "--fork-url", "http://localhost:8545",
            "--fork-block-number", "1", "--chain-id", "1",
        )
        assert json.loads(result.output)["fork"]["cache_path"] is None

    def test_opt_out(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(
            runner, config_file, "fork", "cache", "--json", "--no-storage-caching",
            "--fork-url", "https://eth.example.com",
            "--fork-block-number", "1", "--chain-id", "1",
        )
        assert json.loads(result.output)["fork"]["cache_path"] is None

    def test_cache_dir_override(self, runner: CliRunner, config_file: Path, tmp_path: Path) -> None:
        result = _invoke(
            runner, config_file, "fork", "cache", "--json",
            "--cache-dir", str(tmp_path / "other"),
            "--fork-url", "https://eth.example.com",
            "--fork-block-number", "7", "--chain-id", "1",
        )
        assert json.loads(result.output)["fork"]["cache_path"] == str(
            tmp_path / "other" / "1" / "7" / "storage.json"
        )

    def test_no_fork(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "fork", "cache")
        assert result.exit_code == 0
        assert "未配置 fork" in result.output

    def test_missing_chain_id(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "fork", "cache", "--fork-url", "https://eth.example.com")
        assert result.exit_code == 1
        assert "chain_id" in result.output

    def test_bad_block_number(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(
            runner, config_file, "fork", "cache",
            "--fork-url", "https://eth.example.com", "--fork-block-number", "latest",
        )
        assert result.exit_code == 2

    def test_negative_hex_block_number(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(
            runner, config_file, "fork", "cache",
            "--fork-url", "https://eth.example.com",
            "--fork-block-number", "0x-1", "--chain-id", "1",
        )
        assert result.exit_code == 2
        assert "storage.json" not in result.output


class TestContract:
    def test_parse(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "contract", "parse", "src/A.sol:B")
        assert result.exit_code == 0
        assert "path=src/A.sol" in result.output
        assert "name=B" in result.output

    def test_parse_name_only(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "contract", "parse", "B")
        assert "path=-" in result.output

    def test_parse_malformed(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "contract", "parse", "src/contracts/Contracts.sol")
        assert result.exit_code == 1
        assert "合约定位符格式" in result.output

    def test_parse_full_missing_separator(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "contract", "parse", "--full", "NoColonHere")
        assert result.exit_code == 1
        assert "NoColonHere" in result.output

    def test_artifact(self, runner: CliRunner, config_file: Path) -> None:
        result = _invoke(runner, config_file, "contract", "artifact", "Token.json:Token")
        assert "file=Token.json" in result.output
        assert "name=Token" in result.output
