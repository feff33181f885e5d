"""
Core helpers for the SRO client.

This package holds the pieces that do not depend on a particular HTTP
collaborator: settings, SOAP envelope construction, request assembly
and response deserialization.
"""

__all__ = []
