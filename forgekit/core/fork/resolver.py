"""Fork 存储缓存决策

缓存仅在以下条件全部满足时启用:
  1. 配置了 fork_url
  2. 未显式关闭存储缓存 (no_storage_caching)
  3. 固定了区块号（跟随链头时状态会变化，不能缓存）
  4. 缓存策略同时允许该端点和该链 id

启用时缓存文件位于 <cache_root>/<chain_id>/<block_number>/storage.json。
本模块只给出决策和路径，不创建目录、不读写缓存文件。
"""

from __future__ import annotations

import logging
from pathlib import Path

from forgekit.core.exceptions import ValidationError
from forgekit.core.fork.models import Fork, ForkCacheDecision, ForkOptions
from forgekit.core.protocols import CacheFileResolver, CachingPolicy

logger = logging.getLogger(__name__)

STORAGE_CACHE_FILE = "storage.json"


def _check_non_negative(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"{label} 必须是非负整数: {value!r}")
    return value


def resolve_cache_file(
    chain_id: int, block_number: int, cache_root: str | Path | None = None,
) -> Path:
    """计算存储缓存文件路径，cache_root 缺省时取全局配置的缓存根目录"""
    chain_id = _check_non_negative(chain_id, "chain_id")
    block_number = _check_non_negative(block_number, "block_number")
    if cache_root is None:
        from forgekit.core.config import get_config
        root = get_config().cache_root()
    else:
        root = Path(cache_root).expanduser()
    return root / str(chain_id) / str(block_number) / STORAGE_CACHE_FILE


def decide(
    options: ForkOptions,
    policy: CachingPolicy,
    chain_id: int | None = None,
    *,
    cache_file_resolver: CacheFileResolver | None = None,
) -> ForkCacheDecision:
    """决定 fork 会话是否启用存储缓存

    chain_id 由调用方预先解析（RPC 查询或静态表），只在需要咨询策略时使用。
    """
    url = options.fork_url
    if not url:
        logger.debug("未配置 fork_url，不启用存储缓存")
        return ForkCacheDecision.disabled()
    if options.no_storage_caching:
        logger.debug("已关闭存储缓存: %s", url)
        return ForkCacheDecision.disabled()
    block = options.fork_block_number
    if block is None:
        logger.debug("未固定区块号，不缓存链头状态: %s", url)
        return ForkCacheDecision.disabled()

    if chain_id is None:
        raise ValidationError(f"fork 端点 {url} 缺少已解析的 chain_id")

    if not (policy.enable_for_endpoint(url) and policy.enable_for_chain_id(chain_id)):
        logger.debug("缓存策略不允许: url=%s chain_id=%s", url, chain_id)
        return ForkCacheDecision.disabled()

    resolver = cache_file_resolver or resolve_cache_file
    path = resolver(chain_id, block)
    logger.info("存储缓存已启用: chain_id=%s block=%s -> %s", chain_id, block, path)
    return ForkCacheDecision.enabled_at(path)


def get_fork(
    options: ForkOptions,
    policy: CachingPolicy,
    chain_id: int | None = None,
    *,
    cache_file_resolver: CacheFileResolver | None = None,
) -> Fork | None:
    """返回 fork 执行后端配置，未配置 fork_url 时返回 None"""
    if not options.fork_url:
        return None
    if chain_id is None:
        raise ValidationError(f"fork 端点 {options.fork_url} 缺少已解析的 chain_id")
    decision = decide(
        options, policy, chain_id, cache_file_resolver=cache_file_resolver,
    )
    return Fork(
        url=options.fork_url,
        chain_id=chain_id,
        pin_block=options.fork_block_number,
        cache_path=decision.path,
    )
