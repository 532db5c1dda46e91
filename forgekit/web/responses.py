"""Web 层统一响应辅助函数"""

from __future__ import annotations

from flask import Response, jsonify

from forgekit.core.exceptions import ForgeKitError


def ok(data: dict, status: int = 200) -> tuple[Response, int] | Response:
    """成功响应"""
    if status == 200:
        return jsonify(data)
    return jsonify(data), status


def bad_request(message: str) -> tuple[Response, int]:
    """请求参数错误"""
    return jsonify(error=message), 400


def domain_error(exc: ForgeKitError) -> tuple[Response, int]:
    """业务异常统一映射为 400，并附带错误码"""
    return jsonify(error=exc.message, code=exc.code), 400
