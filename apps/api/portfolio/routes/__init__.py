"""Route modules."""

from .admin_auth import router as admin_auth_router
from .admin_content import router as admin_content_router
from .content import router as content_router
from .health import router as health_router
from .posts import router as posts_router
from .video import router as video_router

__all__ = [
    "admin_auth_router",
    "admin_content_router",
    "content_router",
    "health_router",
    "posts_router",
    "video_router",
]
