"""CLI: fork 存储缓存决策命令"""

from __future__ import annotations

import click

from forgekit.cli import _echo_json, _surface_errors
from forgekit.core.config import get_config
from forgekit.core.exceptions import ValidationError
from forgekit.core.fork import ForkOptions, get_fork, resolve_cache_file
from forgekit.utils.parse import parse_u256


def register(group: click.Group) -> None:
    group.add_command(fork_group)


def _block_number(
    ctx: click.Context, param: click.Parameter, value: str | None,  # noqa: ARG001
) -> int | None:
    """区块号支持十进制和 0x 十六进制"""
    if value is None:
        return None
    try:
        return parse_u256(value)
    except ValidationError as e:
        raise click.BadParameter(e.message) from e


@click.group(name="fork")
def fork_group() -> None:
    """fork 会话存储缓存"""


@fork_group.command(name="cache")
@click.option("--fork-url", default=None, help="fork 的 RPC 端点")
@click.option(
    "--fork-block-number", default=None, callback=_block_number,
    help="固定的区块号（不指定则跟随链头，不缓存）",
)
@click.option("--no-storage-caching", is_flag=True, help="关闭存储缓存")
@click.option("--chain-id", type=click.IntRange(min=0), default=None, help="已解析的链 id")
@click.option("--cache-dir", default=None, help="覆盖配置中的缓存根目录")
@click.option("--json", "as_json", is_flag=True, help="以 JSON 输出")
def fork_cache(
    fork_url: str | None, fork_block_number: int | None, no_storage_caching: bool,
    chain_id: int | None, cache_dir: str | None, as_json: bool,
) -> None:
    """判断 fork 会话是否启用存储缓存，并给出缓存文件路径"""
    options = ForkOptions(
        fork_url=fork_url,
        fork_block_number=fork_block_number,
        no_storage_caching=no_storage_caching,
    )
    cfg = get_config()
    root = cache_dir or cfg.cache_root()

    with _surface_errors():
        policy = cfg.storage_caching()
        fork = get_fork(
            options, policy, chain_id,
            cache_file_resolver=lambda cid, block: resolve_cache_file(cid, block, root),
        )

    if as_json:
        _echo_json({"fork": fork.to_dict() if fork else None})
        return
    if fork is None:
        click.echo("未配置 fork，存储缓存未启用")
        return
    if fork.cache_path is None:
        click.echo(f"fork {fork.url} (chain_id={fork.chain_id}): 存储缓存未启用")
    else:
        click.echo(f"fork {fork.url} (chain_id={fork.chain_id}): 存储缓存 -> {fork.cache_path}")
