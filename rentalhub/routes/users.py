from flask import Blueprint, request, jsonify
from sqlalchemy import or_
from ..models import User
from ..security import roles_required

bp = Blueprint("users", __name__)


@bp.get("/users")
@roles_required("admin")
def list_users():
    """Users table with type / employment status / search filters"""
    q = (request.args.get("q") or "").strip()
    user_type = request.args.get("user_type")
    employment_status = request.args.get("employment_status")

    query = User.query
    if user_type:
        query = query.filter(User.user_type.in_([t.strip() for t in user_type.split(",") if t.strip()]))
    if employment_status:
        query = query.filter(User.employment_status == employment_status)
    if q:
        like = f"%{q}%"
        query = query.filter(or_(User.user_name.ilike(like), User.email.ilike(like)))

    users = query.order_by(User.id).all()
    return jsonify({"total": len(users), "users": [u.serialize() for u in users]}), 200
