"""Internal modules for Freshlearn SDK.

WARNING: These modules back the public clients and are not intended for
direct use in application code.

Modules:
    dispatch - Request dispatcher and response classification
    http - Shared HTTP client configuration
"""
