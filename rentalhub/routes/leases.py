from flask import Blueprint, request, jsonify, current_app
from .. import db
from ..errors import LeaseError, json_body
from ..models import Lease
from ..security import roles_required
from ..services import leases as lease_service

bp = Blueprint("leases", __name__)


@bp.get("/leases")
@roles_required("admin", "landlord")
def list_leases():
    """Leases table with tenant, unit and bill/maintenance counts"""
    status = request.args.get("status")
    landlord_id = request.args.get("landlord_id", type=int)
    return jsonify(lease_service.lease_table_data(status=status, landlord_id=landlord_id)), 200


@bp.post("/leases")
@roles_required("admin", "landlord")
def create_lease():
    data = json_body()
    try:
        lease = lease_service.create_lease(data)
    except LeaseError:
        db.session.rollback()
        raise
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Lease creation failed")
        return jsonify({"error": "creation_failed", "message": str(e)}), 500
    return jsonify(lease.serialize()), 201


@bp.patch("/leases/<int:lease_id>/terminate")
@roles_required("admin", "landlord")
def terminate_lease(lease_id):
    lease = db.get_or_404(Lease, lease_id)
    data = json_body()
    lease = lease_service.terminate_lease(lease, reason=data.get("termination_reason"))
    return jsonify(lease.serialize()), 200


@bp.delete("/leases/<int:lease_id>")
@roles_required("admin", "landlord")
def delete_lease(lease_id):
    lease = db.get_or_404(Lease, lease_id)
    lease_service.delete_lease(lease)
    return jsonify({"ok": True, "id": lease_id}), 200
