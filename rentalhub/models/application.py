from . import db
from datetime import datetime


class RentalApplication(db.Model):
    __tablename__ = 'rental_applications'

    id = db.Column(db.Integer, primary_key=True)
    unit_id = db.Column(db.Integer, db.ForeignKey('rental_units.id'), nullable=False, index=True)
    tenant_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    message = db.Column(db.Text, nullable=True)
    application_status = db.Column(db.String(20), default='pending')  # pending, approved, rejected
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    unit = db.relationship('RentalUnit', back_populates='applications')
    tenant = db.relationship('User')

    def serialize(self):
        return {
            'id': self.id,
            'unit_id': self.unit_id,
            'tenant_id': self.tenant_id,
            'message': self.message,
            'application_status': self.application_status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
