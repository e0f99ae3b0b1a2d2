"""Internal modules for the Mirlo node.

WARNING: This package contains host-level modules used by workflow engines.
These are not intended for direct use in application code.

Modules:
    dispatch - Per-item action dispatcher
    http - Shared HTTP client configuration and authenticated requester
"""
