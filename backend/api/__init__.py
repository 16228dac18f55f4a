from .dimensions import router as dimensions_router
from .info import router as info_router
from .orders import router as orders_router
from .preview import router as preview_router

__all__ = [
    "dimensions_router",
    "info_router",
    "orders_router",
    "preview_router",
]
