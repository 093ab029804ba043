"""
jwt_service.clients

Outbound HTTP helpers that attach service tokens.
"""

# Package marker.
