"""API routes."""

from payslip_service.api.routes.health import router as health_router
from payslip_service.api.routes.payslips import router as payslips_router

__all__ = ["payslips_router", "health_router"]
