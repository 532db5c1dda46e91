"""解析 API Blueprint"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, request

from forgekit.core.dep import resolve_dependencies, resolve_dependency
from forgekit.core.fork import ForkOptions, decide
from forgekit.core.locator import ContractLocator, FullContractLocator
from forgekit.web.responses import bad_request, ok

resolve_bp = Blueprint("resolve", __name__, url_prefix="/api")


def _body() -> dict[str, Any]:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def _optional_int(value: Any, field: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"参数 '{field}' 必须是整数")
    return value


@resolve_bp.route("/deps/resolve", methods=["POST"])
def deps_resolve() -> tuple[Response, int] | Response:
    body = _body()
    if "dependencies" in body:
        items = body["dependencies"]
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            return bad_request("dependencies 必须是字符串列表")
        return ok({"dependencies": [s.to_dict() for s in resolve_dependencies(items)]})

    dependency = body.get("dependency")
    if not isinstance(dependency, str) or not dependency:
        return bad_request("需要提供 dependency")
    return ok({"dependency": resolve_dependency(dependency).to_dict()})


@resolve_bp.route("/fork/cache", methods=["POST"])
def fork_cache() -> tuple[Response, int] | Response:
    from forgekit.core.config import get_config

    body = _body()
    try:
        options = ForkOptions(
            fork_url=body.get("fork_url") or None,
            fork_block_number=_optional_int(body.get("fork_block_number"), "fork_block_number"),
            no_storage_caching=bool(body.get("no_storage_caching", False)),
        )
        chain_id = _optional_int(body.get("chain_id"), "chain_id")
    except ValueError as e:
        return bad_request(str(e))

    decision = decide(options, get_config().storage_caching(), chain_id)
    return ok({"decision": decision.to_dict()})


@resolve_bp.route("/contracts/parse", methods=["POST"])
def contracts_parse() -> tuple[Response, int] | Response:
    body = _body()
    locator = body.get("locator")
    if not isinstance(locator, str) or not locator:
        return bad_request("需要提供 locator")
    if body.get("full"):
        full = FullContractLocator.parse(locator)
        return ok({"path": full.path, "name": full.name})
    parsed = ContractLocator.parse(locator)
    return ok({"path": parsed.path, "name": parsed.name})
