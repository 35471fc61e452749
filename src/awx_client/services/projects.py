"""Project endpoints (``/api/v2/projects/``)."""

from ..awxapi.types import Project, ProjectRequest
from .base import API_PREFIX, ResourceService


class ProjectService(ResourceService[Project, ProjectRequest]):
    base_path = API_PREFIX + "projects/"
    resource_model = Project
    request_model = ProjectRequest
