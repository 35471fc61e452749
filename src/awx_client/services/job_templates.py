"""Job template endpoints (``/api/v2/job_templates/``)."""

from ..awxapi.types import JobTemplate, JobTemplateRequest
from .base import API_PREFIX, ResourceService


class JobTemplateService(ResourceService[JobTemplate, JobTemplateRequest]):
    base_path = API_PREFIX + "job_templates/"
    resource_model = JobTemplate
    request_model = JobTemplateRequest
