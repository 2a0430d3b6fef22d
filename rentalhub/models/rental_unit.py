import logging
from datetime import date, datetime

from . import db

logger = logging.getLogger(__name__)


class RentalUnit(db.Model):
    __tablename__ = 'rental_units'

    id = db.Column(db.Integer, primary_key=True)
    landlord_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    # Unit details
    address = db.Column(db.String(512), nullable=False, index=True)
    unit_number = db.Column(db.String(50), nullable=True)
    floor_area = db.Column(db.Numeric(10, 2), nullable=True)
    rent_price = db.Column(db.Numeric(10, 2), nullable=True)
    property_type = db.Column(db.String(50), nullable=True)  # duplex, triplex, loft, studio
    description = db.Column(db.Text, nullable=True)

    # JSON list of strings; legacy rows may hold a delimited string instead
    amenities = db.Column(db.JSON, nullable=True)
    # JSON list of photo URLs, used when the unit has no mapped photo folder
    unit_photos = db.Column(db.JSON, nullable=True)

    # Unit status
    availability_status = db.Column(db.String(20), default='available')  # available, occupied, maintenance, unavailable

    # Metadata
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    landlord = db.relationship('User', back_populates='rental_units')
    leases = db.relationship('Lease', back_populates='unit', lazy=True, order_by='Lease.id')
    maintenance_requests = db.relationship('MaintenanceRequest', back_populates='unit', lazy=True)
    applications = db.relationship('RentalApplication', back_populates='unit', lazy=True)

    def __repr__(self):
        return f'<RentalUnit {self.id}: {self.address} #{self.unit_number}>'

    @property
    def current_lease(self):
        """Get the active lease for this unit"""
        active = [lease for lease in self.leases if lease.lease_status == 'active']
        if not active:
            return None
        if len(active) > 1:
            logger.warning("Unit %s has %d active leases; using the latest", self.id, len(active))
        return max(active, key=lambda lease: (lease.start_date or date.min, lease.id))

    @property
    def is_occupied(self):
        return (self.availability_status or '').lower() == 'occupied'

    def serialize(self):
        return {
            'id': self.id,
            'landlord_id': self.landlord_id,
            'address': self.address,
            'unit_number': self.unit_number,
            'availability_status': self.availability_status,
            'floor_area': float(self.floor_area) if self.floor_area is not None else None,
            'rent_price': float(self.rent_price) if self.rent_price is not None else None,
            'property_type': self.property_type,
            'description': self.description,
        }
