"""Inventory endpoints (``/api/v2/inventories/``)."""

from ..awxapi.types import Inventory, InventoryRequest
from .base import API_PREFIX, ResourceService


class InventoryService(ResourceService[Inventory, InventoryRequest]):
    base_path = API_PREFIX + "inventories/"
    resource_model = Inventory
    request_model = InventoryRequest
