"""HTTP route modules for the items service.

Import the composed router via:

    from app.routes import router

The composition itself lives in `app/routes/api_router.py`.
"""

from .api_router import router
