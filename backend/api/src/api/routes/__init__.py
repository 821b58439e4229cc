"""API routes package.

Routers are organized by domain:

- health: Health check endpoints
- houses: Houses and their discount rules
- pricing: Stay price calculation
- bookings: Booking quotes

All routers are registered in main.py with /api prefix.
"""

from api.routes.bookings import router as bookings_router
from api.routes.health import router as health_router
from api.routes.houses import router as houses_router
from api.routes.pricing import router as pricing_router

__all__ = [
    "bookings_router",
    "health_router",
    "houses_router",
    "pricing_router",
]
