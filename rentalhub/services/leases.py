import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import selectinload

from ..errors import LeaseConflict, LeaseError
from ..models import Lease, RentalUnit, User, db
from ..models.lease import LEASE_STATUSES

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('unit_id', 'tenant_id', 'start_date', 'end_date', 'monthly_rent')


def lease_term_months(start_date, end_date):
    delta = relativedelta(end_date, start_date)
    return delta.years * 12 + delta.months


def _parse_date(value, field):
    try:
        return datetime.strptime(str(value), '%Y-%m-%d').date()
    except ValueError:
        raise LeaseError(f"{field}: invalid date format. Use YYYY-MM-DD")


def _parse_amount(value, field):
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise LeaseError(f"{field} must be a number")
    if not amount.is_finite():
        raise LeaseError(f"{field} must be a number")
    if amount < Decimal(0):
        raise LeaseError(f"{field} must not be negative")
    return amount


def lease_table_row(lease):
    unit = lease.unit
    bills = lease.bills
    row = lease.serialize()
    row.update({
        'tenant': lease.tenant.summary() if lease.tenant else None,
        'units': {
            'id': unit.id,
            'address': unit.address,
            'unit_number': unit.unit_number,
            'property_type': unit.property_type,
            'landlord': {
                'id': unit.landlord.id,
                'user_name': unit.landlord.user_name,
            } if unit.landlord else None,
        },
        'total_bills': len(bills),
        'pending_bills': sum(1 for bill in bills if bill.payment_status == 'pending'),
        'overdue_bills': sum(1 for bill in bills if bill.payment_status == 'overdue'),
        'maintenance_requests': len(unit.maintenance_requests),
    })
    return row


def lease_table_data(status=None, landlord_id=None):
    query = Lease.query.options(
        selectinload(Lease.bills),
        selectinload(Lease.tenant),
        selectinload(Lease.unit).selectinload(RentalUnit.landlord),
        selectinload(Lease.unit).selectinload(RentalUnit.maintenance_requests),
    )
    if status:
        statuses = [s.strip() for s in status.split(',') if s.strip()]
        query = query.filter(Lease.lease_status.in_(statuses))
    if landlord_id:
        query = query.join(RentalUnit, Lease.unit_id == RentalUnit.id).filter(RentalUnit.landlord_id == landlord_id)
    leases = query.order_by(Lease.created_at.desc(), Lease.id.desc()).all()
    return [lease_table_row(lease) for lease in leases]


def _refresh_unit_availability(unit):
    has_active = any(lease.lease_status == 'active' for lease in unit.leases)
    if has_active:
        unit.availability_status = 'occupied'
    elif unit.availability_status == 'occupied':
        unit.availability_status = 'available'


def create_lease(data):
    """Validate ``data`` and create a lease. Returns the new Lease."""
    if not isinstance(data, dict):
        raise LeaseError("Invalid payload")
    for field in REQUIRED_FIELDS:
        if data.get(field) in (None, ''):
            raise LeaseError(f"{field} is required")

    start_date = _parse_date(data['start_date'], 'start_date')
    end_date = _parse_date(data['end_date'], 'end_date')
    if start_date >= end_date:
        raise LeaseError("End date must be after start date")

    status = data.get('lease_status') or 'pending'
    if status not in LEASE_STATUSES:
        raise LeaseError(f"lease_status must be one of: {', '.join(LEASE_STATUSES)}")

    unit = db.session.get(RentalUnit, data['unit_id'])
    if unit is None:
        raise LeaseError("Invalid unit")
    tenant = db.session.get(User, data['tenant_id'])
    if tenant is None or tenant.user_type != 'tenant':
        raise LeaseError("Invalid tenant")

    if status == 'active' and unit.current_lease is not None:
        raise LeaseConflict("Unit already has an active lease")

    lease = Lease(
        unit=unit,
        tenant=tenant,
        start_date=start_date,
        end_date=end_date,
        lease_term=lease_term_months(start_date, end_date),
        monthly_rent=_parse_amount(data['monthly_rent'], 'monthly_rent'),
        deposit_amount=_parse_amount(data.get('deposit_amount') or 0, 'deposit_amount'),
        lease_status=status,
        terms_and_conditions=data.get('terms_and_conditions'),
    )
    db.session.add(lease)
    _refresh_unit_availability(unit)
    db.session.commit()
    logger.info("Created lease %s on unit %s (%s)", lease.id, unit.id, status)
    return lease


def terminate_lease(lease, reason=None, today=None):
    if lease.lease_status != 'active':
        raise LeaseConflict("Only active leases can be terminated")

    lease.lease_status = 'terminated'
    lease.terminated_date = today or date.today()
    lease.termination_reason = reason
    _refresh_unit_availability(lease.unit)
    db.session.commit()
    logger.info("Terminated lease %s", lease.id)
    return lease


def delete_lease(lease):
    unit = lease.unit
    was_active = lease.lease_status == 'active'
    lease_id = lease.id
    db.session.delete(lease)
    db.session.flush()
    if was_active:
        db.session.refresh(unit)
        _refresh_unit_availability(unit)
    db.session.commit()
    logger.info("Deleted lease %s", lease_id)
