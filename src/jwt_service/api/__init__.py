"""
jwt_service.api

FastAPI integration for `TokenService`.

Responsibilities:
- App factory, dependencies, and error-to-HTTP mapping.
"""

# Package marker.
