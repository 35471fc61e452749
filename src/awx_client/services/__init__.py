"""Resource services for the AWX API.

Each module binds the generic ResourceService to one collection path and
its resource/request models. An AwxClient exposes one instance of each.
"""

from .base import API_PREFIX, ResourceService
from .inventories import InventoryService
from .inventory_sources import InventorySourceService
from .job_templates import JobTemplateService
from .organizations import OrganizationService
from .projects import ProjectService

__all__ = [
    "API_PREFIX",
    "InventoryService",
    "InventorySourceService",
    "JobTemplateService",
    "OrganizationService",
    "ProjectService",
    "ResourceService",
]
