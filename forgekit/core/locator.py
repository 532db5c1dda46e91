"""合约定位符解析

两种形式，分隔规则刻意不同:
- ContractLocator: `<path>:<name>` 或 `<name>`，按最后一个 `:` 拆分，路径中允许出现 `:`
- FullContractLocator: 必须是 `<path>:<name>`，按第一个 `:` 拆分

另提供构建产物 id（`<artifact file>:<contract>`）的拆分辅助函数。
"""

from __future__ import annotations

from dataclasses import dataclass

from forgekit.core.exceptions import MalformedLocatorError, MissingLocatorSeparatorError

LOCATOR_SEPARATOR = ":"

_LOCATOR_FORMAT = "合约定位符格式必须是 `<path>:<contractname>` 或 `<contractname>`"


@dataclass(frozen=True)
class ContractLocator:
    """可选路径的合约定位符"""

    name: str
    path: str | None = None

    @classmethod
    def parse(cls, text: str) -> ContractLocator:
        head, sep, tail = text.rpartition(LOCATOR_SEPARATOR)
        name = tail.strip()
        path = head if sep else None

        # 名字部分像路径，说明输入漏掉了合约名
        if not name or name.endswith(".sol") or "/" in name:
            raise MalformedLocatorError(f"{_LOCATOR_FORMAT}，实际为 `{text}`")
        return cls(name=name, path=path)

    def __str__(self) -> str:
        if self.path is None:
            return self.name
        return f"{self.path}{LOCATOR_SEPARATOR}{self.name}"


@dataclass(frozen=True)
class FullContractLocator:
    """路径必填的合约定位符"""

    path: str
    name: str

    @classmethod
    def parse(cls, text: str) -> FullContractLocator:
        path, sep, name = text.partition(LOCATOR_SEPARATOR)
        if not sep:
            raise MissingLocatorSeparatorError(
                f"应为 `<path>:<contractname>`，实际为 `{text}`"
            )
        return cls(path=path, name=name.strip())

    def __str__(self) -> str:
        return f"{self.path}{LOCATOR_SEPARATOR}{self.name}"


def get_contract_name(artifact_id: str) -> str:
    """`SafeTransferLibTest.json:SafeTransferLibTest` -> `SafeTransferLibTest`"""
    return artifact_id.rsplit(LOCATOR_SEPARATOR, 1)[-1]


def get_file_name(artifact_id: str) -> str:
    """`SafeTransferLibTest.json:SafeTransferLibTest` -> `SafeTransferLibTest.json`"""
    return artifact_id.split(LOCATOR_SEPARATOR, 1)[0]
