"""Services package."""

from services.hierarchy_service import build_hierarchy

__all__ = ["build_hierarchy"]
