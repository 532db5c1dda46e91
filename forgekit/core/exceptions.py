"""统一异常体系

所有业务异常继承 ForgeKitError，替代散落的 ValueError / RuntimeError。
CLI 层据此输出原始错误信息并中止命令，Web 层据此映射为 HTTP 400。
解析类错误均为纯输入问题，不做重试。
"""

from __future__ import annotations


class ForgeKitError(Exception):
    """框架基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(ForgeKitError):
    """配置文件缺失或内容无效"""

    code = "CONFIG_ERROR"


class ValidationError(ForgeKitError):
    """输入数据校验失败"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details = details or []


# =========================================================================
# 依赖解析
# =========================================================================


class DependencyError(ForgeKitError):
    """依赖描述解析失败"""

    code = "DEPENDENCY_ERROR"


class InvalidRepoShorthandError(DependencyError):
    """既不是 URL / SSH 形式，也不是合法的 owner/repo 简写"""

    code = "INVALID_REPO_SHORTHAND"

    def __init__(self, dependency: str) -> None:
        super().__init__(f"无效的 GitHub 仓库名 `{dependency}`")
        self.dependency = dependency


class EmptyDependencyNameError(DependencyError):
    """无法从 URL 推导出依赖名"""

    code = "EMPTY_NAME"


class AmbiguousRefError(DependencyError):
    """版本分隔符 `@` 出现多次或 ref 为空"""

    code = "AMBIGUOUS_REF"


# =========================================================================
# 合约定位符
# =========================================================================


class LocatorError(ForgeKitError):
    """合约定位符解析失败"""

    code = "LOCATOR_ERROR"


class MalformedLocatorError(LocatorError):
    """`<path>:<name>` 或 `<name>` 形式不满足"""

    code = "MALFORMED_LOCATOR"


class MissingLocatorSeparatorError(LocatorError):
    """完整定位符缺少 `:` 分隔符"""

    code = "MISSING_LOCATOR_SEPARATOR"
