"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edges (config file, provider JSON) with the schema
  documented next to the data it describes.
- Aliases map the provider's wire names (`secretapikey`, `dns_entry_type`)
  to readable attribute names without hand-written converters.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, SecretStr
from pydantic.config import ConfigDict

RECORD_TTL = "600"
SUCCESS_STATUS = "SUCCESS"


class DomainEntry(BaseModel):
    """Target DNS record: `<subdomain>.<domain>` of type `record_type`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    domain: str = Field(
        ...,
        min_length=1,
        description="Registered domain managed by the provider (e.g. 'example.com').",
    )
    record_type: str = Field(
        ...,
        alias="dns_entry_type",
        min_length=1,
        description="DNS record type (typically 'A' or 'AAAA').",
    )
    subdomain: str = Field(
        ...,
        description="Subdomain label; empty string targets the apex.",
    )


class Configuration(BaseModel):
    """Credentials plus the list of records to keep in sync.

    Why frozen:
    - The value flows unchanged through the whole pipeline; nothing downstream
      is allowed to rewrite credentials or targets.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    secret_key: SecretStr = Field(
        ...,
        alias="secretkey",
        description="Porkbun secret API key.",
    )
    api_key: SecretStr = Field(
        ...,
        alias="apikey",
        description="Porkbun API key.",
    )
    domains: list[DomainEntry] = Field(
        ...,
        min_length=1,
        description="Records to manage. Only the first one is used.",
    )

    @property
    def target(self) -> DomainEntry:
        return self.domains[0]


class Credentials(BaseModel):
    """Authentication body shared by every provider request."""

    secretapikey: str
    apikey: str

    @classmethod
    def from_config(cls, config: Configuration) -> "Credentials":
        return cls(
            secretapikey=config.secret_key.get_secret_value(),
            apikey=config.api_key.get_secret_value(),
        )


class EditRecordRequest(Credentials):
    content: str
    ttl: str = RECORD_TTL


class DNSRecord(BaseModel):
    """A record as returned by `retrieveByNameType`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | int
    name: str
    record_type: str = Field(..., alias="type")
    content: str
    ttl: str | int | None = None
    prio: str | int | None = None
    notes: str | None = None


class RetrieveRecordResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str
    records: list[DNSRecord] = Field(default_factory=list)


class EditRecordResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCESS_STATUS


class UpdateOutcome(str, Enum):
    """What the updater did with the record."""

    UNCHANGED = "unchanged"
    UPDATED = "updated"
    FAILED = "failed"


class UpdateResult(BaseModel):
    """Result of one pipeline run, ready to be printed."""

    outcome: UpdateOutcome
    current_ip: str
    dns_content: str
    message: str = Field(..., min_length=1)
