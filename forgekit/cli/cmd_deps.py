"""CLI: 依赖描述解析命令"""

from __future__ import annotations

import click

from forgekit.cli import _echo_json, _surface_errors
from forgekit.core.dep import resolve_dependencies


def register(group: click.Group) -> None:
    group.add_command(dep_group)


@click.group(name="dep")
def dep_group() -> None:
    """git 依赖描述解析"""


@dep_group.command(name="resolve")
@click.argument("dependencies", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="以 JSON 输出")
def dep_resolve(dependencies: tuple[str, ...], as_json: bool) -> None:
    """解析依赖描述（owner/repo[@ref]、https URL 或 SSH 远程）"""
    with _surface_errors():
        specs = resolve_dependencies(dependencies)

    if as_json:
        _echo_json([s.to_dict() for s in specs])
        return
    for s in specs:
        click.echo(f"  {s.name:20s} {s.url}  ref={s.ref or '(默认分支)'}")
