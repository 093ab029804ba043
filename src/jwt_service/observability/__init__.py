"""
jwt_service.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.
