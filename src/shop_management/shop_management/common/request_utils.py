from __future__ import annotations

from typing import Any, Mapping

from flask import request

from ..core.exceptions import ValidationError


def json_object_body() -> Mapping[str, Any]:
    """JSON request body as a mapping; a missing body counts as ``{}``."""
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return body
