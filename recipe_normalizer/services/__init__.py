"""Services package."""
from .recipe_service import build_adapter, extract_recipe
from .request_generation import RequestGeneration
from .service_handlers import handle_extract

__all__ = ["RequestGeneration", "build_adapter", "extract_recipe", "handle_extract"]
