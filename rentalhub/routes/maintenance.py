from flask import Blueprint, request, jsonify
from sqlalchemy import desc
from ..models import MaintenanceRequest
from ..security import roles_required

bp = Blueprint("maintenance", __name__)


@bp.get("/maintenance-requests")
@roles_required("admin", "landlord")
def list_maintenance_requests():
    """Get maintenance requests with filtering options"""
    status = request.args.get("status")
    priority = request.args.get("priority")
    unit_id = request.args.get("unit_id", type=int)
    limit = max(1, min(request.args.get("limit", 50, type=int), 200))
    offset = max(0, request.args.get("offset", 0, type=int))

    query = MaintenanceRequest.query
    if status:
        query = query.filter(MaintenanceRequest.request_status == status)
    if priority:
        query = query.filter(MaintenanceRequest.priority == priority)
    if unit_id:
        query = query.filter(MaintenanceRequest.unit_id == unit_id)

    total = query.count()
    requests = query.order_by(desc(MaintenanceRequest.created_at), desc(MaintenanceRequest.id)).limit(limit).offset(offset).all()

    return jsonify({
        "total": total,
        "maintenance_requests": [req.serialize() for req in requests]
    }), 200
