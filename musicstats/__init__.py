"""Music catalogue entities, stores, listening statistics and a query-output checker."""

__version__ = "0.1.0"