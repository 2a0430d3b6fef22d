from . import db
from datetime import datetime


STATUS_LABELS = {
    'pending': 'Pending',
    'in_progress': 'In Progress',
    'completed': 'Completed',
    'cancelled': 'Cancelled',
}

PRIORITY_LABELS = {
    'urgent': 'Urgent',
    'high': 'High',
    'medium': 'Medium',
    'low': 'Low',
}


class MaintenanceRequest(db.Model):
    __tablename__ = 'maintenance_requests'

    id = db.Column(db.Integer, primary_key=True)
    unit_id = db.Column(db.Integer, db.ForeignKey('rental_units.id'), nullable=False, index=True)
    tenant_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)

    description = db.Column(db.Text, nullable=False)
    priority = db.Column(db.String(20), default='medium')  # urgent, high, medium, low
    request_status = db.Column(db.String(20), default='pending')  # pending, in_progress, completed, cancelled

    estimated_cost = db.Column(db.Numeric(10, 2), nullable=True)
    actual_cost = db.Column(db.Numeric(10, 2), nullable=True)
    completion_date = db.Column(db.Date, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    unit = db.relationship('RentalUnit', back_populates='maintenance_requests')
    tenant = db.relationship('User')

    def __repr__(self):
        return f'<MaintenanceRequest {self.id}: unit {self.unit_id} {self.request_status}>'

    @property
    def status_label(self):
        return STATUS_LABELS.get(self.request_status, self.request_status)

    @property
    def priority_label(self):
        return PRIORITY_LABELS.get(self.priority, self.priority)

    def serialize(self):
        return {
            'id': self.id,
            'unit_id': self.unit_id,
            'tenant_id': self.tenant_id,
            'description': self.description,
            'priority': self.priority,
            'priority_label': self.priority_label,
            'request_status': self.request_status,
            'status_label': self.status_label,
            'estimated_cost': float(self.estimated_cost) if self.estimated_cost is not None else None,
            'actual_cost': float(self.actual_cost) if self.actual_cost is not None else None,
            'completion_date': self.completion_date.isoformat() if self.completion_date else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
