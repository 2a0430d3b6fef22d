"""Per-address performance summary for the landlord dashboard.

Yearly revenue is this month's revenue times twelve, and net income subtracts
this year's maintenance costs from this month's revenue. Both are kept as the
dashboard has always reported them.
"""
from __future__ import annotations

import logging
from collections import OrderedDict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import selectinload

from ..models import Lease, RentalUnit

logger = logging.getLogger(__name__)


def occupancy_rate(occupied: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(occupied / total * 100, 1)


def _dec(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _as_date(value) -> Optional[date]:
    # DateTime columns hold datetimes
    if value is None:
        return None
    if hasattr(value, "date") and callable(value.date):
        return value.date()
    return value


class PropertyPerformanceAggregator:
    def __init__(self, today: Optional[date] = None):
        self.today = today or date.today()

    def _paid_this_month(self, bill) -> bool:
        paid = _as_date(bill.paid_date)
        return (
            bill.payment_status == "paid"
            and paid is not None
            and paid.year == self.today.year
            and paid.month == self.today.month
        )

    def _completed_this_year(self, request) -> bool:
        completed = _as_date(request.completion_date)
        return (
            request.request_status == "completed"
            and request.actual_cost is not None
            and completed is not None
            and completed.year == self.today.year
        )

    def summarize_address(self, address: str, units: list) -> dict:
        total = len(units)
        occupied = sum(1 for unit in units if unit.availability_status == "occupied")

        rents = [_dec(unit.rent_price) for unit in units if unit.rent_price is not None]
        average_rent = sum(rents) / len(rents) if rents else Decimal(0)

        monthly_revenue = sum(
            (_dec(bill.amount_paid or 0)
             for unit in units
             for lease in unit.leases
             for bill in lease.bills
             if self._paid_this_month(bill)),
            Decimal(0),
        )
        yearly_revenue = monthly_revenue * 12

        maintenance_costs = sum(
            (_dec(request.actual_cost)
             for unit in units
             for request in unit.maintenance_requests
             if self._completed_this_year(request)),
            Decimal(0),
        )

        return {
            "address": address,
            "units": int(total),
            "occupancy": float(occupancy_rate(occupied, total)),
            "monthlyRent": float(average_rent),
            "monthlyRevenue": float(monthly_revenue),
            "yearlyRevenue": float(yearly_revenue),
            "maintenanceCosts": float(maintenance_costs),
            "netIncome": float(monthly_revenue - maintenance_costs),
        }

    def summarize(self, units: Iterable) -> list[dict]:
        """Group already-loaded units by address, keeping first-seen order."""
        groups: "OrderedDict[str, list]" = OrderedDict()
        for unit in units:
            groups.setdefault(unit.address, []).append(unit)
        return [self.summarize_address(address, members) for address, members in groups.items()]

    def collect(self) -> list[dict]:
        units = (
            RentalUnit.query
            .options(
                selectinload(RentalUnit.leases).selectinload(Lease.bills),
                selectinload(RentalUnit.maintenance_requests),
            )
            .order_by(RentalUnit.id)
            .all()
        )
        logger.debug("Summarizing performance for %d units", len(units))
        return self.summarize(units)
