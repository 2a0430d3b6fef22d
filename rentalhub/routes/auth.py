from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import create_access_token
from ..errors import json_body
from ..models import User

bp = Blueprint("auth", __name__)


def issue_token(user):
    return create_access_token(identity=str(user.id), additional_claims={"role": user.user_type})


@bp.post("/auth/login")
def login():
    data = json_body()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    if not email or not password:
        return jsonify({"error": "validation_error", "message": "email and password are required"}), 400

    user = User.query.filter(User.email == email).first()
    if not user or not user.check_password(password):
        current_app.logger.info("Failed login for %s", email)
        return jsonify({"error": "unauthorized", "message": "Invalid credentials"}), 401

    return jsonify({
        "access_token": issue_token(user),
        "user": user.serialize(),
    }), 200
