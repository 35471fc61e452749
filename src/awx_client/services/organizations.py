"""Organization endpoints (``/api/v2/organizations/``)."""

from ..awxapi.types import Organization, OrganizationRequest
from .base import API_PREFIX, ResourceService


class OrganizationService(ResourceService[Organization, OrganizationRequest]):
    base_path = API_PREFIX + "organizations/"
    resource_model = Organization
    request_model = OrganizationRequest
