"""Response and request types for the AWX REST API.

Pydantic models representing the resources returned by the AWX v2 API,
the payloads accepted when creating or patching them, and the paginated
list envelope. Resource models ignore unknown fields so the client keeps
working as the server schema grows.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")
R = TypeVar("R", bound="Resource")


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Response(Generic[T]):
    """HTTP status and headers alongside the decoded payload.

    For list calls ``data`` is the :class:`ListEnvelope`, which is where the
    ``next``/``previous`` page references live.
    """

    status_code: int
    headers: httpx.Headers
    content: bytes = b""
    data: T | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300  # noqa: PLR2004


class ListEnvelope(BaseModel, Generic[R]):
    """Paginated listing returned by every AWX collection endpoint."""

    count: int
    next: str | None = None
    previous: str | None = None
    results: list[R]

    @model_validator(mode="after")
    def _results_within_count(self) -> "ListEnvelope[R]":
        if len(self.results) > self.count:
            msg = f"page holds {len(self.results)} results but count is {self.count}"
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


class Resource(BaseModel):
    """Fields shared by every AWX resource.

    Only ``id`` is required; everything else is server state with defaults
    for fields a given server version leaves out or sends as null.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    type: str = ""
    url: str = ""
    related: dict[str, Any] = {}
    summary_fields: dict[str, Any] = {}
    created: datetime | None = None
    modified: datetime | None = None
    name: str = ""
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data: Any) -> Any:
        # null reads as the field default, like a missing key
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Organization(Resource):
    """AWX organization."""

    custom_virtualenv: str | None = None
    max_hosts: int = 0


class Project(Resource):
    """AWX project (an SCM checkout of playbooks)."""

    local_path: str = ""
    scm_type: str = ""
    scm_url: str = ""
    scm_branch: str = ""
    scm_refspec: str = ""
    scm_clean: bool = False
    scm_delete_on_update: bool = False
    scm_update_on_launch: bool = False
    scm_update_cache_timeout: int = 0
    scm_revision: str = ""
    credential: int | None = None
    timeout: int = 0
    organization: int | None = None
    status: str = ""
    custom_virtualenv: str | None = None
    last_job_run: datetime | None = None
    last_job_failed: bool = False
    next_job_run: datetime | None = None
    last_update_failed: bool = False
    last_updated: datetime | None = None


class Inventory(Resource):
    """AWX inventory."""

    organization: int | None = None
    kind: str = ""
    host_filter: str | None = None
    variables: str = ""
    has_active_failures: bool = False
    total_hosts: int = 0
    hosts_with_active_failures: int = 0
    total_groups: int = 0
    has_inventory_sources: bool = False
    total_inventory_sources: int = 0
    inventory_sources_with_failures: int = 0
    insights_credential: int | None = None
    pending_deletion: bool = False


class InventorySource(Resource):
    """AWX inventory source (where an inventory syncs hosts from)."""

    source: str = ""
    source_path: str = ""
    source_script: str | None = None
    source_vars: str = ""
    credential: int | None = None
    source_regions: str = ""
    instance_filters: str = ""
    group_by: str = ""
    overwrite: bool = False
    overwrite_vars: bool = False
    timeout: int = 0
    verbosity: int = 0
    status: str = ""
    inventory: int | None = None
    update_on_launch: bool = False
    update_cache_timeout: int = 0
    source_project: int | None = None
    update_on_project_update: bool = False
    last_job_run: datetime | None = None
    last_job_failed: bool = False
    next_job_run: datetime | None = None
    last_update_failed: bool = False
    last_updated: datetime | None = None


class JobTemplate(Resource):
    """AWX job template."""

    job_type: str = ""
    inventory: int | None = None
    project: int | None = None
    playbook: str = ""
    forks: int = 0
    limit: str = ""
    verbosity: int = 0
    extra_vars: str = ""
    job_tags: str = ""
    force_handlers: bool = False
    skip_tags: str = ""
    start_at_task: str = ""
    timeout: int = 0
    use_fact_cache: bool = False
    status: str = ""
    host_config_key: str = ""
    ask_diff_mode_on_launch: bool = False
    ask_variables_on_launch: bool = False
    ask_limit_on_launch: bool = False
    ask_tags_on_launch: bool = False
    ask_skip_tags_on_launch: bool = False
    ask_job_type_on_launch: bool = False
    ask_verbosity_on_launch: bool = False
    ask_inventory_on_launch: bool = False
    ask_credential_on_launch: bool = False
    survey_enabled: bool = False
    become_enabled: bool = False
    diff_mode: bool = False
    allow_simultaneous: bool = False
    custom_virtualenv: str | None = None
    last_job_run: datetime | None = None
    last_job_failed: bool = False
    next_job_run: datetime | None = None


# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class ResourceRequest(BaseModel):
    """Writable fields for a create (POST) or partial update (PATCH).

    Every field is optional. Only fields the caller actually set are
    serialized, so ``description=""`` is sent while an untouched
    ``description`` is left out of the payload.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of explicitly set fields."""
        return self.model_dump(mode="json", exclude_unset=True)


class OrganizationRequest(ResourceRequest):
    custom_virtualenv: str | None = None
    max_hosts: int | None = None


class ProjectRequest(ResourceRequest):
    local_path: str | None = None
    scm_type: str | None = None
    scm_url: str | None = None
    scm_branch: str | None = None
    scm_refspec: str | None = None
    scm_clean: bool | None = None
    scm_delete_on_update: bool | None = None
    credential: int | None = None
    timeout: int | None = None
    organization: int | None = None
    scm_update_on_launch: bool | None = None
    scm_update_cache_timeout: int | None = None
    custom_virtualenv: str | None = None


class InventoryRequest(ResourceRequest):
    organization: int | None = None
    kind: str | None = None
    host_filter: str | None = None
    variables: str | None = None
    insights_credential: int | None = None


class InventorySourceRequest(ResourceRequest):
    source: str | None = None
    source_path: str | None = None
    source_script: str | None = None
    source_vars: str | None = None
    credential: int | None = None
    source_regions: str | None = None
    instance_filters: str | None = None
    group_by: str | None = None
    overwrite: bool | None = None
    overwrite_vars: bool | None = None
    timeout: int | None = None
    verbosity: int | None = None
    inventory: int | None = None
    update_on_launch: bool | None = None
    update_cache_timeout: int | None = None
    source_project: int | None = None
    update_on_project_update: bool | None = None


class JobTemplateRequest(ResourceRequest):
    job_type: str | None = None
    inventory: int | None = None
    project: int | None = None
    playbook: str | None = None
    forks: int | None = None
    limit: str | None = None
    verbosity: int | None = None
    extra_vars: str | None = None
    job_tags: str | None = None
    force_handlers: bool | None = None
    skip_tags: str | None = None
    start_at_task: str | None = None
    timeout: int | None = None
    use_fact_cache: bool | None = None
    host_config_key: str | None = None
    ask_diff_mode_on_launch: bool | None = None
    ask_variables_on_launch: bool | None = None
    ask_limit_on_launch: bool | None = None
    ask_tags_on_launch: bool | None = None
    ask_skip_tags_on_launch: bool | None = None
    ask_job_type_on_launch: bool | None = None
    ask_verbosity_on_launch: bool | None = None
    ask_inventory_on_launch: bool | None = None
    ask_credential_on_launch: bool | None = None
    survey_enabled: bool | None = None
    become_enabled: bool | None = None
    diff_mode: bool | None = None
    allow_simultaneous: bool | None = None
    custom_virtualenv: str | None = None
    credential: int | None = None
    vault_credential: int | None = None
