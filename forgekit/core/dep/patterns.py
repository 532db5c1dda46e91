"""依赖字符串的匹配规则

按顺序尝试:
  1. 远程前缀 [scheme] <host>.<tld> (/|:) <remainder>
     覆盖 git@host.tld:org/repo、git+https://、https:// 以及裸 host.tld/org/repo
  2. GitHub 简写 owner/repo
"""

from __future__ import annotations

import re
from dataclasses import dataclass

REMOTE_PREFIX_RE = re.compile(
    r"(?P<scheme>git@|git\+https://|https://)?"
    r"(?P<host>[A-Za-z0-9-]+)\.(?P<tld>[A-Za-z0-9-]+)"
    r"(?P<sep>[/:])"
)

# owner 只允许字母/数字/连字符，repo 额外允许下划线和点
REPO_SHORTHAND_RE = re.compile(r"[A-Za-z\d-]+/[A-Za-z\d_.-]+")


@dataclass(frozen=True)
class RemotePrefix:
    """远程前缀匹配结果"""

    scheme: str
    host: str
    tld: str
    separator: str
    remainder: str

    @property
    def domain(self) -> str:
        return f"{self.host}.{self.tld}"

    def to_https(self) -> str:
        return f"https://{self.domain}/{self.remainder}"


def match_remote_prefix(text: str) -> RemotePrefix | None:
    """匹配输入开头的远程前缀，不匹配返回 None"""
    m = REMOTE_PREFIX_RE.match(text)
    if m is None:
        return None
    return RemotePrefix(
        scheme=m.group("scheme") or "",
        host=m.group("host"),
        tld=m.group("tld"),
        separator=m.group("sep"),
        remainder=text[m.end():],
    )


def is_repo_shorthand(text: str, separator: str = "@") -> bool:
    """判断是否为 owner/repo[@ref] 形式的简写（ref 部分不参与校验）"""
    repo = text.split(separator, 1)[0]
    return REPO_SHORTHAND_RE.fullmatch(repo) is not None
