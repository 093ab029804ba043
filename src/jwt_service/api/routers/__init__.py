"""
jwt_service.api.routers

HTTP routers for the reference host app.
"""

# Package marker.
