"""init schema

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('user_contact_number', sa.String(length=50), nullable=True),
        sa.Column('user_type', sa.String(length=20), nullable=False),
        sa.Column('employment_status', sa.String(length=50), nullable=True),
        sa.Column('password_hash', sa.String(length=256), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table('rental_units',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('landlord_id', sa.Integer(), nullable=False),
        sa.Column('address', sa.String(length=512), nullable=False),
        sa.Column('unit_number', sa.String(length=50), nullable=True),
        sa.Column('floor_area', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('rent_price', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('property_type', sa.String(length=50), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('amenities', sa.JSON(), nullable=True),
        sa.Column('unit_photos', sa.JSON(), nullable=True),
        sa.Column('availability_status', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['landlord_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_rental_units_landlord_id', 'rental_units', ['landlord_id'])
    op.create_index('ix_rental_units_address', 'rental_units', ['address'])

    op.create_table('leases',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('lease_term', sa.Integer(), nullable=False),
        sa.Column('monthly_rent', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('deposit_amount', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('lease_status', sa.String(length=20), nullable=True),
        sa.Column('terms_and_conditions', sa.Text(), nullable=True),
        sa.Column('terminated_date', sa.Date(), nullable=True),
        sa.Column('termination_reason', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['tenant_id'], ['users.id']),
        sa.ForeignKeyConstraint(['unit_id'], ['rental_units.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_leases_unit_id', 'leases', ['unit_id'])
    op.create_index('ix_leases_tenant_id', 'leases', ['tenant_id'])

    op.create_table('rental_bills',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('lease_id', sa.Integer(), nullable=False),
        sa.Column('billing_date', sa.Date(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('amount_due', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('amount_paid', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('payment_status', sa.String(length=20), nullable=True),
        sa.Column('paid_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['lease_id'], ['leases.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_rental_bills_lease_id', 'rental_bills', ['lease_id'])

    op.create_table('maintenance_requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('priority', sa.String(length=20), nullable=True),
        sa.Column('request_status', sa.String(length=20), nullable=True),
        sa.Column('estimated_cost', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('actual_cost', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('completion_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['tenant_id'], ['users.id']),
        sa.ForeignKeyConstraint(['unit_id'], ['rental_units.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_maintenance_requests_unit_id', 'maintenance_requests', ['unit_id'])

    op.create_table('rental_applications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('application_status', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['tenant_id'], ['users.id']),
        sa.ForeignKeyConstraint(['unit_id'], ['rental_units.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_rental_applications_unit_id', 'rental_applications', ['unit_id'])
    op.create_index('ix_rental_applications_tenant_id', 'rental_applications', ['tenant_id'])


def downgrade():
    op.drop_table('rental_applications')
    op.drop_table('maintenance_requests')
    op.drop_table('rental_bills')
    op.drop_table('leases')
    op.drop_table('rental_units')
    op.drop_table('users')
