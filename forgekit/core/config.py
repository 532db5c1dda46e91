"""集中配置管理

支持从 YAML 文件加载 + 编程式覆盖。
缓存根目录和存储缓存策略都从这里取得。
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from forgekit.core.exceptions import ConfigError
from forgekit.utils.yaml_io import load_yaml

if TYPE_CHECKING:
    from forgekit.core.fork.caching import StorageCachingConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "forgekit.yml"


def _default_storage_caching() -> dict[str, Any]:
    return {"chains": "all", "endpoints": "remote"}


@dataclass
class Config:
    """框架全局配置"""

    # 进程级缓存根目录，fork 存储缓存位于 <cache_dir>/<chain_id>/<block>/storage.json
    cache_dir: str = "~/.forgekit/cache"

    # RPC 存储缓存策略: chains = all | none | [id/name...], endpoints = all | remote | <regex>
    rpc_storage_caching: dict[str, Any] = field(default_factory=_default_storage_caching)

    # 放不到字段里的配置项
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        try:
            data = load_yaml(path)
        except (yaml.YAMLError, ValueError, OSError) as e:
            raise ConfigError(f"配置文件无法读取: {path}: {e}") from e
        if not data:
            return cls()
        known = {f.name for f in cls.__dataclass_fields__.values()}
        matched = {k: v for k, v in data.items() if k in known and k != "extra"}
        extra = {k: v for k, v in data.items() if k not in known}
        caching = matched.get("rpc_storage_caching")
        if caching is not None and not isinstance(caching, dict):
            raise ConfigError(
                f"rpc_storage_caching 必须是映射类型: {path}"
            )
        cfg = cls(**matched)
        cfg.extra = extra
        return cfg

    def to_dict(self) -> dict:
        return asdict(self)

    def cache_root(self) -> Path:
        """展开 ~ 后的缓存根目录（不创建）"""
        return Path(self.cache_dir).expanduser()

    def block_cache_file(self, chain_id: int, block_number: int) -> Path:
        """指定链与区块的存储缓存文件路径"""
        from forgekit.core.fork.resolver import resolve_cache_file
        return resolve_cache_file(chain_id, block_number, cache_root=self.cache_root())

    def storage_caching(self) -> StorageCachingConfig:
        """根据 rpc_storage_caching 段构造缓存策略"""
        from forgekit.core.fork.caching import StorageCachingConfig
        return StorageCachingConfig.from_dict(self.rpc_storage_caching)


# 全局单例，首次 import 时不加载文件；由 CLI / Web 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str = DEFAULT_CONFIG_FILE) -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.info("配置已加载: %s", path)
    return _current
