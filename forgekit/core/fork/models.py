"""Fork 会话数据模型

数据类:
- ForkOptions: 命令行层汇总的 fork 参数
- ForkCacheDecision: 存储缓存是否启用及缓存文件路径
- Fork: 交给 fork 执行后端的完整描述
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ForkOptions:
    """Fork 参数"""

    fork_url: str | None = None
    fork_block_number: int | None = None  # None 表示跟随链头
    no_storage_caching: bool = False


@dataclass(frozen=True)
class ForkCacheDecision:
    """存储缓存决策，path 仅在 enabled 时存在"""

    enabled: bool
    path: Path | None = None

    def __post_init__(self) -> None:
        if self.enabled != (self.path is not None):
            raise ValueError(
                f"缓存决策不一致: enabled={self.enabled}, path={self.path}"
            )

    @classmethod
    def disabled(cls) -> ForkCacheDecision:
        return cls(enabled=False, path=None)

    @classmethod
    def enabled_at(cls, path: Path) -> ForkCacheDecision:
        return cls(enabled=True, path=Path(path))

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "path": str(self.path) if self.path is not None else None,
        }


@dataclass(frozen=True)
class Fork:
    """Fork 执行后端配置"""

    url: str
    chain_id: int
    pin_block: int | None = None
    cache_path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "chain_id": self.chain_id,
            "pin_block": self.pin_block,
            "cache_path": str(self.cache_path) if self.cache_path is not None else None,
        }
