from sqlalchemy.orm import joinedload

from ..models import MaintenanceRequest, RentalUnit, db
from .amenities import normalize_amenities


def count_units():
    return db.session.query(db.func.count(RentalUnit.id)).scalar() or 0


def _count_by_status(status):
    return (
        db.session.query(db.func.count(RentalUnit.id))
        .filter(RentalUnit.availability_status == status)
        .scalar()
        or 0
    )


def count_available_units():
    return _count_by_status("available")


def count_occupied_units():
    return _count_by_status("occupied")


def overview_metrics():
    return {
        "numberOfUnits": count_units(),
        "availableUnits": count_available_units(),
        "numberOfOccupiedUnits": count_occupied_units(),
        "numberOfMaintenanceRequests": db.session.query(db.func.count(MaintenanceRequest.id)).scalar() or 0,
    }


def available_units():
    units = (
        RentalUnit.query
        .filter(RentalUnit.availability_status == "available")
        .order_by(RentalUnit.id)
        .all()
    )
    return [
        {
            "id": unit.id,
            "address": unit.address,
            "unit_number": unit.unit_number,
            "rent_price": float(unit.rent_price) if unit.rent_price is not None else None,
        }
        for unit in units
    ]


def table_data(resolver):
    """Every unit with its landlord, for the landlord/admin units table."""
    units = RentalUnit.query.options(joinedload(RentalUnit.landlord)).order_by(RentalUnit.id).all()
    rows = []
    for unit in units:
        row = unit.serialize()
        row.update({
            "landlord": unit.landlord.summary() if unit.landlord else None,
            "amenities": normalize_amenities(unit.amenities),
            "unit_photos": resolver.resolve(unit),
            "created_at": unit.created_at.isoformat() if unit.created_at else None,
            "updated_at": unit.updated_at.isoformat() if unit.updated_at else None,
        })
        rows.append(row)
    return rows


def listing_record(unit, resolver):
    row = unit.serialize()
    row.pop("landlord_id", None)
    row.update({
        "amenities": normalize_amenities(unit.amenities),
        "unit_photos": resolver.resolve(unit),
        "can_apply": not unit.is_occupied,
    })
    return row


def listings_data(resolver, status=None):
    """Public listings shown to prospective tenants."""
    query = RentalUnit.query
    if status:
        query = query.filter(RentalUnit.availability_status == status)
    return [listing_record(unit, resolver) for unit in query.order_by(RentalUnit.id).all()]
