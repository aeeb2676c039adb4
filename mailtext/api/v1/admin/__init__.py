"""
Admin API module.

Modular structure:
- auth.py: Authentication endpoints (login, verify)
- email_templates.py: Email template customization

Email template endpoints answer 404 to anyone who is not an admin.
"""
from fastapi import APIRouter

from .auth import router as auth_router
from .email_templates import router as email_templates_router

# Main admin router
router = APIRouter()

# Include all sub-routers
router.include_router(auth_router, tags=["auth"])
router.include_router(email_templates_router, tags=["email-templates"])

__all__ = ["router"]
