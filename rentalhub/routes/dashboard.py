from flask import Blueprint, jsonify
from ..security import roles_required
from ..services.performance import PropertyPerformanceAggregator

bp = Blueprint("dashboard", __name__)


@bp.get("/dashboard/property-performance")
@roles_required("admin", "landlord")
def property_performance():
    """Occupancy, rent, revenue and maintenance per address"""
    return jsonify(PropertyPerformanceAggregator().collect()), 200
