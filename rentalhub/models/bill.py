from . import db
from datetime import date, datetime


class RentalBill(db.Model):
    __tablename__ = 'rental_bills'

    id = db.Column(db.Integer, primary_key=True)
    lease_id = db.Column(db.Integer, db.ForeignKey('leases.id', ondelete='CASCADE'), nullable=False, index=True)

    billing_date = db.Column(db.Date, nullable=False, default=lambda: date.today().replace(day=1))  # billing period first day
    due_date = db.Column(db.Date, nullable=True)
    amount_due = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    amount_paid = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    payment_status = db.Column(db.String(20), default='pending')  # pending, paid, overdue, partial
    paid_date = db.Column(db.Date, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    lease = db.relationship('Lease', back_populates='bills')

    def __repr__(self):
        return f'<RentalBill {self.id}: lease {self.lease_id} {self.payment_status}>'

    def serialize(self):
        return {
            'id': self.id,
            'lease_id': self.lease_id,
            'billing_date': self.billing_date.isoformat() if self.billing_date else None,
            'due_date': self.due_date.isoformat() if self.due_date else None,
            'amount_due': float(self.amount_due or 0),
            'amount_paid': float(self.amount_paid or 0),
            'payment_status': self.payment_status,
            'paid_date': self.paid_date.isoformat() if self.paid_date else None,
        }
