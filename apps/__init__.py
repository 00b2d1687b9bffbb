"""
Pursuit Applications Package.

Contains:
- web: process entry points hosting the FastAPI application
"""

__version__ = "0.1.0"
