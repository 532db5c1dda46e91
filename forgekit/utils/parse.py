"""命令行取值解析工具"""

from __future__ import annotations

import math
import re
from datetime import timedelta
from pathlib import PurePath

from forgekit.core.exceptions import ValidationError

U256_MAX = 2**256 - 1

_HEX_RE = re.compile(r"0[xX][0-9a-fA-F]+")
_DEC_RE = re.compile(r"[0-9]+")


def parse_u256(text: str) -> int:
    """解析十进制或 0x 前缀十六进制字符串为 uint256"""
    s = text.strip()
    if _HEX_RE.fullmatch(s):
        value = int(s[2:], 16)
    elif _DEC_RE.fullmatch(s):
        value = int(s)
    else:
        raise ValidationError(f"无法解析为 uint256: `{text}`")
    if value > U256_MAX:
        raise ValidationError(f"超出 uint256 范围: `{text}`")
    return value


def parse_delay(text: str) -> timedelta:
    """解析延迟: `500ms` 为毫秒，其余按秒（可为小数，四舍五入到毫秒）"""
    s = text.strip()
    if s.endswith("ms"):
        digits = s[:-2]
        if not _DEC_RE.fullmatch(digits):
            raise ValidationError(f"无效的毫秒延迟: `{text}`")
        return _millis(int(digits), text)

    try:
        seconds = float(s)
    except ValueError as e:
        raise ValidationError(f"无效的延迟: `{text}`") from e
    scaled = seconds * 1000.0
    if not math.isfinite(scaled):
        raise ValidationError("延迟必须是有限的非负数")
    millis = round(scaled)
    if millis < 0:
        raise ValidationError("延迟必须是有限的非负数")
    return _millis(millis, text)


def _millis(millis: int, text: str) -> timedelta:
    try:
        return timedelta(milliseconds=millis)
    except OverflowError as e:
        raise ValidationError(f"延迟超出范围: `{text}`") from e


def is_sol_test(path: str | PurePath) -> bool:
    """文件名以 .t.sol 结尾"""
    return PurePath(path).name.endswith(".t.sol")


def is_sol(path: str | PurePath) -> bool:
    return PurePath(path).suffix == ".sol"


def is_yul(path: str | PurePath) -> bool:
    return PurePath(path).suffix == ".yul"
