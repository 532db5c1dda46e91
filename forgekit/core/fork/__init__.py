"""Fork 会话存储缓存

- models.py: ForkOptions / ForkCacheDecision / Fork
- caching.py: StorageCachingConfig 缓存策略
- resolver.py: 缓存决策与缓存文件路径
"""

from forgekit.core.fork.caching import StorageCachingConfig
from forgekit.core.fork.models import Fork, ForkCacheDecision, ForkOptions
from forgekit.core.fork.resolver import decide, get_fork, resolve_cache_file

__all__ = [
    "Fork",
    "ForkCacheDecision",
    "ForkOptions",
    "StorageCachingConfig",
    "decide",
    "get_fork",
    "resolve_cache_file",
]
