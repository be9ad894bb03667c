"""Resource services, one per group of APSIS endpoints."""

from apsis.services.base import Service
from apsis.services.imports import ImportService
from apsis.services.newsletters import MAX_DELETE_BATCH, NewsletterService

__all__ = ["Service", "ImportService", "NewsletterService", "MAX_DELETE_BATCH"]
