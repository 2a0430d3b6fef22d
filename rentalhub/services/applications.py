import logging

from ..errors import ApplicationConflict
from ..models import RentalApplication, db

logger = logging.getLogger(__name__)


def submit_application(unit, tenant, message=None):
    if unit.is_occupied:
        raise ApplicationConflict("Unit is occupied")

    pending = RentalApplication.query.filter_by(
        unit_id=unit.id,
        tenant_id=tenant.id,
        application_status='pending',
    ).first()
    if pending:
        raise ApplicationConflict("You already have a pending application for this unit")

    application = RentalApplication(unit=unit, tenant=tenant, message=message)
    db.session.add(application)
    db.session.commit()
    logger.info("Tenant %s applied for unit %s", tenant.id, unit.id)
    return application
