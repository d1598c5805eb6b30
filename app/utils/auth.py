import datetime as dt
from functools import wraps
from flask import request, jsonify, current_app
import jwt


def create_token(subject: str) -> str:
    ttl = current_app.config.get("TOKEN_TTL_HOURS", 12)
    payload = {
        "sub": str(subject),
        "iat": int(dt.datetime.utcnow().timestamp()),
        "exp": int((dt.datetime.utcnow() + dt.timedelta(hours=ttl)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return jsonify({"error": "Missing Bearer token"}), 401
        token = auth_header.split(" ", 1)[1]
        try:
            payload = decode_token(token)
            request.token_subject = payload["sub"]  # type: ignore
        except (jwt.InvalidTokenError, KeyError):
            return jsonify({"error": "Invalid token"}), 401
        return f(*args, **kwargs)
    return wrapper

__all__ = ["create_token", "decode_token", "require_auth"]
