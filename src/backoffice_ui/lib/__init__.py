"""
Local library modules shared across the back office package.

Modules:
    logs: Logging utilities
    caches: Disk-backed persistent storage (session token)
    clients: httpx client factory for the REST API
"""

from backoffice_ui.lib import caches, clients, logs

__all__ = ["caches", "clients", "logs"]
