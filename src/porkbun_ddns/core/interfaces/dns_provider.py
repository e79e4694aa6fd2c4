"""DNS provider and IP resolver contracts.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The pipeline depends on these abstractions, so tests can hand it fakes
  and a second provider can be plugged in without touching the Core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from porkbun_ddns.core.domain.models import Configuration, EditRecordResponse


@runtime_checkable
class PublicIPResolver(Protocol):
    def resolve(self) -> str:
        """Return the caller's current public IP address."""

        ...


@runtime_checkable
class DNSProvider(Protocol):
    """Minimal contract for a DNS hosting API.

    Design rules:
    - Calls are blocking; the pipeline is strictly sequential.
    - Both methods target `config.target` only.
    """

    def retrieve_record_content(self, config: Configuration) -> str:
        """Return the content currently published for the target record."""

        ...

    def edit_record(self, config: Configuration, content: str) -> EditRecordResponse:
        """Replace the target record's content; the provider's verdict is returned, not raised."""

        ...
