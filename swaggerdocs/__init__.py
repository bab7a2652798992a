"""
swaggerdocs — generate and verify Go swagger documentation sources.
"""

__version__ = "0.1.0"
