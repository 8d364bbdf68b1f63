"""Task Schemas — translation task creation."""

from pydantic import Field

from lokalise_proxy.schemas.base import UpstreamPayload


class TaskLanguage(UpstreamPayload):
    language_iso: str = Field(min_length=1)
    users: list[int] = Field(min_length=1)


class CreateTaskRequest(UpstreamPayload):
    title: str = Field(min_length=1)
    description: str | None = None
    task_type: str | None = None
    keys: list[int] | None = None
    languages: list[TaskLanguage] = Field(min_length=1)
