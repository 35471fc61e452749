"""Inventory source endpoints (``/api/v2/inventory_sources/``).

Updating an inventory source changes its configuration only; it does not
start a sync.
"""

from ..awxapi.types import InventorySource, InventorySourceRequest
from .base import API_PREFIX, ResourceService


class InventorySourceService(ResourceService[InventorySource, InventorySourceRequest]):
    base_path = API_PREFIX + "inventory_sources/"
    resource_model = InventorySource
    request_model = InventorySourceRequest
