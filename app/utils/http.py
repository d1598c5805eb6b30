from typing import Any, Dict
from flask import request, jsonify


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": message}
    if extra:
        body.update(extra)
    return jsonify(body), status


def form_dict() -> Dict[str, Any]:
    """
    Flatten request.form into a dict.

    A field sent more than once, or named with a trailing ``[]``, becomes a list.
    """
    data: Dict[str, Any] = {}
    for key in request.form.keys():
        values = request.form.getlist(key)
        if key.endswith("[]"):
            data[key[:-2]] = values
        elif len(values) > 1:
            data[key] = values
        else:
            data[key] = values[0]
    return data


def json_body() -> Dict[str, Any]:
    # Multipart and urlencoded bodies carry form fields
    if request.form:
        return form_dict()
    # Otherwise parse JSON (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}
