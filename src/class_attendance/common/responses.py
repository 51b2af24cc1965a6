"""JSON envelope shared by every endpoint: ``{success, data?|message?, error?}``."""

from __future__ import annotations

from typing import Any, Optional

from flask import jsonify


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200):
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def fail(error: str, status: int):
    return jsonify({"success": False, "error": error}), status
