from .users_controller import router as users_router
from .error_handlers import register_error_handlers


__all__ = ["users_router", "register_error_handlers"]
