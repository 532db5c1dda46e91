"""解析服务 HTTP API（基于 Flask）

提供依赖描述解析、fork 存储缓存决策、合约定位符解析三个端点。

启动方式: forgekit serve --port 8888
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from forgekit.core.exceptions import ForgeKitError
from forgekit.web.blueprints.resolve_bp import resolve_bp
from forgekit.web.responses import domain_error

logger = logging.getLogger(__name__)

MAX_CONTENT_LENGTH = 64 * 1024


def create_app() -> Flask:
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = MAX_CONTENT_LENGTH

    @app.errorhandler(ForgeKitError)
    def handle_domain_error(exc: ForgeKitError):
        logger.info("请求被拒绝 [%s]: %s", exc.code, exc.message)
        return domain_error(exc)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        """将所有 HTTP 异常统一返回 JSON"""
        return jsonify(error=exc.description), exc.code

    @app.errorhandler(Exception)
    def handle_generic_exception(exc: Exception):  # noqa: ARG001
        logger.exception("未处理的异常")
        return jsonify(error="服务器内部错误"), 500

    app.register_blueprint(resolve_bp)
    return app


def run_server(port: int = 8888, debug: bool = False, host: str = "127.0.0.1") -> None:
    app = create_app()
    logger.info("forgekit 解析服务已启动: http://%s:%d", host, port)
    app.run(host=host, port=port, debug=debug)
