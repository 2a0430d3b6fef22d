from datetime import date
from decimal import Decimal

import pytest

from rentalhub import create_app, db
from rentalhub.config import TestingConfig
from rentalhub.models import Lease, MaintenanceRequest, RentalBill, RentalUnit, User
from rentalhub.routes.auth import issue_token
from rentalhub.services.folder_store import InMemoryFolderMappingStore


@pytest.fixture
def photo_root(tmp_path):
    root = tmp_path / "public"
    (root / "rental_units").mkdir(parents=True)
    return root


@pytest.fixture
def folder_store():
    return InMemoryFolderMappingStore()


@pytest.fixture
def app(photo_root, folder_store):
    app = create_app(TestingConfig, folder_store=folder_store)
    app.config["UNIT_PHOTO_ROOT"] = str(photo_root)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(email, user_type="tenant", user_name=None, password="secret123", **kwargs):
    user = User(
        email=email,
        user_name=user_name or email.split("@")[0].title(),
        user_type=user_type,
        **kwargs,
    )
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def make_unit(landlord, address="123 Main St", unit_number="1A", status="available", rent_price="15000", **kwargs):
    unit = RentalUnit(
        landlord=landlord,
        address=address,
        unit_number=unit_number,
        availability_status=status,
        rent_price=Decimal(rent_price) if rent_price is not None else None,
        floor_area=kwargs.pop("floor_area", Decimal("45.50")),
        property_type=kwargs.pop("property_type", "studio"),
        **kwargs,
    )
    db.session.add(unit)
    db.session.commit()
    return unit


def make_lease(unit, tenant, status="active", start=date(2026, 1, 1), end=date(2026, 12, 31), rent="15000"):
    lease = Lease(
        unit=unit,
        tenant=tenant,
        start_date=start,
        end_date=end,
        lease_term=12,
        monthly_rent=Decimal(rent),
        deposit_amount=Decimal("30000"),
        lease_status=status,
    )
    db.session.add(lease)
    db.session.commit()
    return lease


def make_bill(lease, amount_paid="0", status="pending", paid_date=None, amount_due="15000"):
    bill = RentalBill(
        lease=lease,
        amount_due=Decimal(amount_due),
        amount_paid=Decimal(amount_paid),
        payment_status=status,
        paid_date=paid_date,
    )
    db.session.add(bill)
    db.session.commit()
    return bill


def make_request(unit, status="pending", actual_cost=None, completion_date=None, priority="medium"):
    request = MaintenanceRequest(
        unit=unit,
        description="Leaking faucet",
        priority=priority,
        request_status=status,
        actual_cost=Decimal(actual_cost) if actual_cost is not None else None,
        completion_date=completion_date,
    )
    db.session.add(request)
    db.session.commit()
    return request


def auth_headers(user):
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture
def landlord(app):
    return make_user("landlord@example.com", user_type="landlord", user_name="John Smith")


@pytest.fixture
def tenant(app):
    return make_user("tenant@example.com", user_type="tenant", user_name="Maria Cruz")


@pytest.fixture
def admin(app):
    return make_user("admin@example.com", user_type="admin", user_name="Admin")
