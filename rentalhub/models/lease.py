from . import db
from datetime import datetime


LEASE_STATUSES = ('active', 'expired', 'terminated', 'pending', 'for_review')


class Lease(db.Model):
    __tablename__ = 'leases'

    id = db.Column(db.Integer, primary_key=True)
    unit_id = db.Column(db.Integer, db.ForeignKey('rental_units.id'), nullable=False, index=True)
    tenant_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    # Lease Terms
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    lease_term = db.Column(db.Integer, nullable=False)  # months

    # Financial Terms
    monthly_rent = db.Column(db.Numeric(10, 2), nullable=False)
    deposit_amount = db.Column(db.Numeric(10, 2), default=0)

    # Status
    lease_status = db.Column(db.String(20), default='pending')  # active, expired, terminated, pending, for_review
    terms_and_conditions = db.Column(db.Text, nullable=True)
    terminated_date = db.Column(db.Date, nullable=True)
    termination_reason = db.Column(db.String(255), nullable=True)

    # Metadata
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    unit = db.relationship('RentalUnit', back_populates='leases')
    tenant = db.relationship('User', back_populates='leases')
    bills = db.relationship('RentalBill', back_populates='lease', lazy=True, cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Lease {self.id}: {self.start_date} to {self.end_date}>'

    def serialize(self):
        return {
            'id': self.id,
            'tenant_id': self.tenant_id,
            'unit_id': self.unit_id,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'monthly_rent': float(self.monthly_rent),
            'deposit_amount': float(self.deposit_amount or 0),
            'lease_term': self.lease_term,
            'lease_status': self.lease_status,
            'terms_and_conditions': self.terms_and_conditions,
            'terminated_date': self.terminated_date.isoformat() if self.terminated_date else None,
            'termination_reason': self.termination_reason,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
