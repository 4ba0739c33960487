"""
TiendApp storefront core: local persistence, live queries and view-state objects
"""

__version__ = "1.0.0"
