from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from .. import db
from ..errors import json_body
from ..models import RentalUnit, User
from ..security import roles_required, current_user_id
from ..services import units as unit_queries
from ..services.applications import submit_application
from ..services.photos import get_photo_resolver

bp = Blueprint("units", __name__)


@bp.get("/units")
@roles_required("admin", "landlord")
def list_units():
    """Units table with landlord details and resolved photos"""
    return jsonify(unit_queries.table_data(get_photo_resolver())), 200


@bp.get("/units/overview")
@roles_required("admin", "landlord")
def units_overview():
    return jsonify(unit_queries.overview_metrics()), 200


@bp.get("/units/available")
@roles_required("admin", "landlord")
def units_available():
    return jsonify(unit_queries.available_units()), 200


@bp.get("/units/<int:unit_id>/photos")
@jwt_required()
def unit_photos(unit_id):
    unit = db.get_or_404(RentalUnit, unit_id)
    return jsonify({"unit_id": unit.id, "photos": get_photo_resolver().resolve(unit)}), 200


@bp.get("/listings")
def listings():
    """Public listings for prospective tenants"""
    status = request.args.get("status")
    return jsonify(unit_queries.listings_data(get_photo_resolver(), status=status)), 200


@bp.post("/listings/<int:unit_id>/applications")
@roles_required("tenant")
def apply_for_listing(unit_id):
    unit = db.get_or_404(RentalUnit, unit_id)
    tenant = db.get_or_404(User, current_user_id())
    data = json_body()
    application = submit_application(unit, tenant, message=data.get("message"))
    return jsonify(application.serialize()), 201
