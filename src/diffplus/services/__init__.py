"""External pager service."""

from .pager_service import PagerService

__all__ = ["PagerService"]
