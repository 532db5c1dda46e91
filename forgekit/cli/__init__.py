"""forgekit 命令行接口

CLI 按领域拆分为子模块，每个模块注册自己的命令到 main group。
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click

from forgekit import __version__
from forgekit.core.config import DEFAULT_CONFIG_FILE, init_config
from forgekit.core.exceptions import ForgeKitError
from forgekit.utils.logger import setup_logging


@contextmanager
def _surface_errors() -> Iterator[None]:
    """业务异常原样输出并以非零状态退出"""
    try:
        yield
    except ForgeKitError as e:
        raise click.ClickException(e.message) from e


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "-c", "config_path", default=DEFAULT_CONFIG_FILE,
    envvar="FORGEKIT_CONFIG", show_default=True, help="配置文件路径",
)
def main(config_path: str) -> None:
    """forgekit - 智能合约构建工具的依赖与 fork 缓存解析"""
    setup_logging(
        level=os.getenv("FORGEKIT_LOG_LEVEL", "WARNING"),
        json_output=os.getenv("FORGEKIT_LOG_JSON", "") == "1",
    )
    with _surface_errors():
        init_config(config_path)


# 注册各领域子命令
from forgekit.cli.cmd_contract import register as _reg_contract  # noqa: E402
from forgekit.cli.cmd_deps import register as _reg_deps  # noqa: E402
from forgekit.cli.cmd_fork import register as _reg_fork  # noqa: E402
from forgekit.cli.cmd_misc import register as _reg_misc  # noqa: E402

_reg_deps(main)
_reg_fork(main)
_reg_contract(main)
_reg_misc(main)
