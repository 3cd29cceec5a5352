"""
podenv — compile-time environment header for installed pods.
"""

__version__ = "0.1.0"
