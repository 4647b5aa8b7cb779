"""
Helper Functions

Request-related utilities shared by the HTTP and WebSocket layers.
"""

from typing import Dict
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    return {
        'user_ip': request_obj.remote_addr or 'unknown',
    }


def get_user_ip(request_obj=None) -> str:
    return get_user_identity(request_obj)['user_ip']
