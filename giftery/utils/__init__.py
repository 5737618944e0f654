"""
Utility modules for the Giftery client
"""
from .config_loader import ClientSettings, load_client_settings, DEFAULT_ENDPOINT

__all__ = [
    'ClientSettings',
    'load_client_settings',
    'DEFAULT_ENDPOINT',
]
