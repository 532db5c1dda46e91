"""CLI: 合约定位符命令"""

from __future__ import annotations

import click

from forgekit.cli import _surface_errors
from forgekit.core.locator import (
    ContractLocator,
    FullContractLocator,
    get_contract_name,
    get_file_name,
)


def register(group: click.Group) -> None:
    group.add_command(contract_group)


@click.group(name="contract")
def contract_group() -> None:
    """合约定位符解析"""


@contract_group.command(name="parse")
@click.argument("locator")
@click.option("--full", is_flag=True, help="要求 `<path>:<contractname>` 完整形式")
def contract_parse(locator: str, full: bool) -> None:
    """解析 `<path>:<contractname>` 或 `<contractname>`"""
    with _surface_errors():
        parsed = FullContractLocator.parse(locator) if full else ContractLocator.parse(locator)
    click.echo(f"path={parsed.path if parsed.path is not None else '-'}")
    click.echo(f"name={parsed.name}")


@contract_group.command(name="artifact")
@click.argument("artifact_id")
def contract_artifact(artifact_id: str) -> None:
    """拆分构建产物 id `<artifact file>:<contractname>`"""
    click.echo(f"file={get_file_name(artifact_id)}")
    click.echo(f"name={get_contract_name(artifact_id)}")
