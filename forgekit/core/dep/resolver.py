"""依赖描述解析器

职责:
- 将 owner/repo 简写、https URL、git+https URL、SSH 远程统一为 https:// 地址
- 拆出可选的 ref（分支 / 标签 / 提交）
- 从 URL 推导依赖名

纯函数，不访问网络，不校验远程仓库是否存在。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from forgekit.core.dep.models import GITHUB, VERSION_SEPARATOR, DependencySpec
from forgekit.core.dep.patterns import is_repo_shorthand, match_remote_prefix
from forgekit.core.exceptions import (
    AmbiguousRefError,
    EmptyDependencyNameError,
    InvalidRepoShorthandError,
)

logger = logging.getLogger(__name__)


class DependencyResolver:
    """依赖描述解析器 - 简写只解析到 default_host，显式给出的主机原样保留"""

    def __init__(self, default_host: str = GITHUB) -> None:
        self.default_host = default_host

    def resolve(self, text: str) -> DependencySpec:
        """解析单个依赖描述

        示例:
            gakonst/lootloose@v1              -> https://github.com/gakonst/lootloose, ref=v1
            git@github.com:gakonst/lootloose  -> https://github.com/gakonst/lootloose
            https://gitlab.com/org/repo       -> https://gitlab.com/org/repo
        """
        dependency = text.strip()
        url_with_version = self._normalize(dependency, text)
        url, ref = self._split_ref(url_with_version, dependency)
        name = url.rsplit("/", 1)[-1]
        if not name:
            raise EmptyDependencyNameError(f"无法从 `{dependency}` 推导依赖名")

        spec = DependencySpec(name=name, url=url, ref=ref)
        logger.debug("依赖已解析: %s -> %s (ref=%s)", dependency, url, ref)
        return spec

    def resolve_all(self, texts: Iterable[str]) -> list[DependencySpec]:
        """批量解析，任一失败即抛出，不返回部分结果"""
        return [self.resolve(t) for t in texts]

    def _normalize(self, dependency: str, text: str) -> str:
        prefix = match_remote_prefix(dependency)
        if prefix is not None:
            return prefix.to_https()
        if not is_repo_shorthand(dependency, VERSION_SEPARATOR):
            raise InvalidRepoShorthandError(text)
        return f"https://{self.default_host}/{dependency}"

    @staticmethod
    def _split_ref(url_with_version: str, dependency: str) -> tuple[str, str | None]:
        parts = url_with_version.split(VERSION_SEPARATOR)
        if len(parts) > 2:
            raise AmbiguousRefError(
                f"依赖 `{dependency}` 中版本分隔符 `{VERSION_SEPARATOR}` 出现多次"
            )
        url = parts[0]
        if len(parts) == 1:
            return url, None
        ref = parts[1]
        if not ref:
            raise AmbiguousRefError(
                f"依赖 `{dependency}` 的 `{VERSION_SEPARATOR}` 之后缺少 ref"
            )
        return url, ref


_default_resolver = DependencyResolver()


def resolve_dependency(text: str) -> DependencySpec:
    """使用默认 GitHub 主机解析依赖描述"""
    return _default_resolver.resolve(text)


def resolve_dependencies(texts: Iterable[str]) -> list[DependencySpec]:
    return _default_resolver.resolve_all(texts)
