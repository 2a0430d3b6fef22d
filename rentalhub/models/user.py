from . import db
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash


USER_TYPES = ("admin", "landlord", "tenant")


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    user_name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    user_contact_number = db.Column(db.String(50), nullable=True)
    user_type = db.Column(db.String(20), nullable=False, default='tenant')  # admin, landlord, tenant
    employment_status = db.Column(db.String(50), nullable=True)
    password_hash = db.Column(db.String(256), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    rental_units = db.relationship('RentalUnit', back_populates='landlord', lazy=True)
    leases = db.relationship('Lease', back_populates='tenant', lazy=True)

    def __repr__(self):
        return f'<User {self.id}: {self.email}>'

    def set_password(self, raw):
        self.password_hash = generate_password_hash(raw)

    def check_password(self, raw):
        return check_password_hash(self.password_hash, raw)

    def summary(self):
        return {
            'id': self.id,
            'user_name': self.user_name,
            'email': self.email,
            'user_contact_number': self.user_contact_number,
        }

    def serialize(self):
        data = self.summary()
        data.update({
            'user_type': self.user_type,
            'employment_status': self.employment_status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        })
        return data
