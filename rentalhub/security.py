# rentalhub/security.py
from functools import wraps
from flask import jsonify
from flask_jwt_extended import verify_jwt_in_request, get_jwt, get_jwt_identity


def roles_required(*allowed):
    """Usage: @roles_required("admin", "landlord")"""
    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            role = get_jwt().get("role")
            if role not in allowed:
                return jsonify({"error": "forbidden", "message": "insufficient role"}), 403
            return fn(*args, **kwargs)
        return wrapper
    return deco


def current_user_id():
    identity = get_jwt_identity()
    return int(identity) if identity is not None else None
