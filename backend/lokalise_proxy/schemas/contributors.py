"""Contributor Schemas — adding people to a project."""

from pydantic import Field

from lokalise_proxy.schemas.base import UpstreamPayload


class ContributorLanguage(UpstreamPayload):
    lang_iso: str = Field(min_length=1)
    is_writable: bool | None = None


class ContributorCreate(UpstreamPayload):
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    fullname: str | None = None
    is_admin: bool | None = None
    is_reviewer: bool | None = None
    languages: list[ContributorLanguage] | None = None


class CreateContributorsRequest(UpstreamPayload):
    contributors: list[ContributorCreate] = Field(min_length=1)

    def upstream_contributors(self) -> list[dict]:
        return [c.to_upstream() for c in self.contributors]
