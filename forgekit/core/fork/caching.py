"""RPC 存储缓存策略

配置段示例:

    rpc_storage_caching:
      chains: [mainnet, 10]      # all | none | 链 id / 链名列表
      endpoints: remote          # all | remote | 正则表达式

满足 CachingPolicy 协议，供 fork 缓存决策使用。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import urlparse

from forgekit.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

NAMED_CHAINS: dict[str, int] = {
    "mainnet": 1,
    "goerli": 5,
    "optimism": 10,
    "bsc": 56,
    "gnosis": 100,
    "polygon": 137,
    "arbitrum": 42161,
    "sepolia": 11155111,
}

_LOCAL_HOSTS = frozenset(("localhost", "127.0.0.1", "0.0.0.0", "::1"))  # nosec B104


class CacheMode(str, Enum):
    ALL = "all"
    NONE = "none"
    REMOTE = "remote"
    LISTED = "listed"
    PATTERN = "pattern"


def _parse_chain(value: Any) -> int:
    """链 id 或已知链名 -> 链 id"""
    if isinstance(value, bool):
        raise ConfigError(f"无效的链标识: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ConfigError(f"链 id 不能为负数: {value}")
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text.isdigit():
            return int(text)
        if text in NAMED_CHAINS:
            return NAMED_CHAINS[text]
    raise ConfigError(
        f"未知的链: {value!r}，可用链名: {', '.join(sorted(NAMED_CHAINS))}"
    )


@dataclass(frozen=True)
class CachedChains:
    """允许缓存的链"""

    mode: CacheMode = CacheMode.ALL
    chain_ids: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, value: Any) -> CachedChains:
        if value is None or value == CacheMode.ALL.value:
            return cls(CacheMode.ALL)
        if value == CacheMode.NONE.value:
            return cls(CacheMode.NONE)
        if isinstance(value, (list, tuple)):
            return cls(CacheMode.LISTED, frozenset(_parse_chain(v) for v in value))
        raise ConfigError(f"chains 只能是 all / none 或链列表: {value!r}")

    def allows(self, chain_id: int) -> bool:
        if self.mode is CacheMode.ALL:
            return True
        if self.mode is CacheMode.NONE:
            return False
        return chain_id in self.chain_ids


@dataclass(frozen=True)
class CachedEndpoints:
    """允许缓存的 RPC 端点"""

    mode: CacheMode = CacheMode.REMOTE
    pattern: re.Pattern[str] | None = None

    @classmethod
    def parse(cls, value: Any) -> CachedEndpoints:
        if value is None or value == CacheMode.REMOTE.value:
            return cls(CacheMode.REMOTE)
        if value == CacheMode.ALL.value:
            return cls(CacheMode.ALL)
        if not isinstance(value, str):
            raise ConfigError(f"endpoints 只能是 all / remote 或正则表达式: {value!r}")
        try:
            return cls(CacheMode.PATTERN, re.compile(value))
        except re.error as e:
            raise ConfigError(f"endpoints 正则表达式无效 `{value}`: {e}") from e

    def allows(self, url: str) -> bool:
        if self.mode is CacheMode.ALL:
            return True
        if self.mode is CacheMode.REMOTE:
            return not is_local_endpoint(url)
        return self.pattern is not None and self.pattern.search(url) is not None


def is_local_endpoint(url: str) -> bool:
    """端点是否指向本机节点"""
    parsed = urlparse(url if "://" in url else f"//{url}")
    return (parsed.hostname or "") in _LOCAL_HOSTS


@dataclass(frozen=True)
class StorageCachingConfig:
    """存储缓存策略（CachingPolicy 的配置实现）"""

    chains: CachedChains = field(default_factory=CachedChains)
    endpoints: CachedEndpoints = field(default_factory=CachedEndpoints)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> StorageCachingConfig:
        data = data or {}
        return cls(
            chains=CachedChains.parse(data.get("chains")),
            endpoints=CachedEndpoints.parse(data.get("endpoints")),
        )

    def enable_for_endpoint(self, url: str) -> bool:
        return self.endpoints.allows(url)

    def enable_for_chain_id(self, chain_id: int) -> bool:
        return self.chains.allows(chain_id)
