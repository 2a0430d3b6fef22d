from rentalhub.extensions import db

# Core Models
from .user import User
from .rental_unit import RentalUnit
from .lease import Lease
from .bill import RentalBill
from .maintenance import MaintenanceRequest
from .application import RentalApplication
