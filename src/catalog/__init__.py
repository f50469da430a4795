"""Product catalog REST service.

This package contains the product CRUD API together with its runtime
configuration, database setup and logging infrastructure.
"""

__version__ = "0.1.0"
