"""
FastAPI routers.

Each module exposes an APIRouter included by ``cashcard.app.create_app``.
Services are read from ``request.app.state`` so the app factory decides which
store they talk to.
"""
