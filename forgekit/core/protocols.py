"""领域协议定义

解析器只依赖这里的抽象，具体策略由配置层或调用方注入，
测试中可以直接传入假实现。
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class CachingPolicy(Protocol):
    """存储缓存策略协议

    回答两个问题: 该 RPC 端点是否允许缓存、该链 id 是否允许缓存。
    Fork 缓存决策只在两者都为 True 时启用。
    """

    def enable_for_endpoint(self, url: str) -> bool:
        ...

    def enable_for_chain_id(self, chain_id: int) -> bool:
        ...


class CacheFileResolver(Protocol):
    """缓存文件路径解析协议，按 (chain_id, block_number) 给出确定的文件路径"""

    def __call__(self, chain_id: int, block_number: int) -> Path:
        ...
