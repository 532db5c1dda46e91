"""依赖描述数据模型

数据类:
- DependencySpec: 规范化后的 git 依赖 {name, url, ref}
"""

from __future__ import annotations

from dataclasses import dataclass

GITHUB = "github.com"
VERSION_SEPARATOR = "@"


@dataclass(frozen=True)
class DependencySpec:
    """作为子模块安装的 git 依赖

    url 始终为 https:// 形式且不含版本后缀；
    ref 可以是分支、标签或提交 SHA，None 表示默认分支。
    """

    name: str
    url: str
    ref: str | None = None

    @classmethod
    def parse(cls, text: str) -> DependencySpec:
        """从命令行字符串解析，见 DependencyResolver.resolve"""
        from forgekit.core.dep.resolver import resolve_dependency
        return resolve_dependency(text)

    def to_dict(self) -> dict[str, str | None]:
        return {"name": self.name, "url": self.url, "ref": self.ref}

    def __str__(self) -> str:
        if self.ref is None:
            return self.url
        return f"{self.url}{VERSION_SEPARATOR}{self.ref}"
