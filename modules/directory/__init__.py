"""Medical institution directory: store, listing pipeline and services."""

from .exceptions import DirectoryError, NotFoundError, ValidationError
from .models import FilterSpec, Institution, ListingPage, NewsItem, Review
from .pipeline import ListingPipeline, build_filter_spec, run_listing
from .repository import EntityStore
from .services import DirectoryService
from . import seed


def register_api(app) -> None:
    """Register the public directory routes on ``app``."""
    from .api import router as directory_router

    if not any(getattr(r, "path", "").startswith("/api/directory") for r in app.router.routes):
        app.include_router(directory_router)


__all__ = [
    "DirectoryError",
    "NotFoundError",
    "ValidationError",
    "FilterSpec",
    "Institution",
    "ListingPage",
    "NewsItem",
    "Review",
    "ListingPipeline",
    "build_filter_spec",
    "run_listing",
    "EntityStore",
    "DirectoryService",
    "seed",
    "register_api",
]
