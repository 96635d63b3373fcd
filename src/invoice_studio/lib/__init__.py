"""
Local library modules shared across the application.

Modules:
    logs: Logging utilities
    objects: Stable hashing and JSON serialization
    paths: Data directory resolution
    caches: Disk-backed key-value store
"""

from invoice_studio.lib import caches, logs, objects, paths

__all__ = ["caches", "logs", "objects", "paths"]
