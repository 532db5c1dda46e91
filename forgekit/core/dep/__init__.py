"""依赖描述解析

- models.py: DependencySpec
- patterns.py: 远程前缀 / 简写匹配规则
- resolver.py: 解析流程
"""

from forgekit.core.dep.models import DependencySpec
from forgekit.core.dep.resolver import (
    DependencyResolver,
    resolve_dependencies,
    resolve_dependency,
)

__all__ = [
    "DependencySpec",
    "DependencyResolver",
    "resolve_dependency",
    "resolve_dependencies",
]
