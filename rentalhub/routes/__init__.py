from .auth import bp as auth_bp
from .dashboard import bp as dashboard_bp
from .health import bp as health_bp
from .leases import bp as leases_bp
from .maintenance import bp as maintenance_bp
from .units import bp as units_bp
from .users import bp as users_bp

BLUEPRINTS = (health_bp, auth_bp, units_bp, dashboard_bp, leases_bp, maintenance_bp, users_bp)
