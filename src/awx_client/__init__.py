"""AWX API client.

Typed client for the AWX automation platform REST API: organizations,
projects, inventories, inventory sources and job templates.
"""

__version__ = "0.1.0"
