"""
Tests for the update decision and the pipeline sequencing.

Uses in-memory fakes for the resolver and the provider so the decision rule
is exercised without HTTP.
"""

import pytest

from porkbun_ddns.core.domain.models import EditRecordResponse, UpdateOutcome
from porkbun_ddns.core.errors import STEP_READ_RECORD, STEP_RESOLVE_IP, NetworkError, ResponseShapeError
from porkbun_ddns.core.interfaces.dns_provider import DNSProvider, PublicIPResolver
from porkbun_ddns.core.services.ddns_pipeline import run_pipeline, update_dns_entry


class FakeResolver:
    def __init__(self, ip: str | None = None, error: Exception | None = None):
        self.ip = ip
        self.error = error
        self.calls = 0

    def resolve(self) -> str:
        self.calls += 1
        if self.error:
            raise self.error
        return self.ip


class FakeProvider:
    def __init__(self, content: str = "203.0.113.5", status: str = "SUCCESS", message=None, read_error=None):
        self.content = content
        self.status = status
        self.message = message
        self.read_error = read_error
        self.reads = 0
        self.edits: list[str] = []

    def retrieve_record_content(self, config) -> str:
        self.reads += 1
        if self.read_error:
            raise self.read_error
        return self.content

    def edit_record(self, config, content: str) -> EditRecordResponse:
        self.edits.append(content)
        return EditRecordResponse(status=self.status, message=self.message)


def test_fakes_satisfy_protocols():
    assert isinstance(FakeResolver("1.2.3.4"), PublicIPResolver)
    assert isinstance(FakeProvider(), DNSProvider)


class TestUpdateDnsEntry:
    def test_identical_ip_is_a_noop(self, config):
        provider = FakeProvider()

        result = update_dns_entry(
            current_ip="203.0.113.5", dns_content="203.0.113.5", config=config, provider=provider
        )

        assert provider.edits == []
        assert result.outcome is UpdateOutcome.UNCHANGED
        assert result.message == (
            "Current IP: 203.0.113.5, identical to current DNS Entry, 203.0.113.5. Not updating."
        )

    def test_comparison_is_exact(self, config):
        provider = FakeProvider()

        result = update_dns_entry(
            current_ip="203.0.113.5", dns_content="203.0.113.5\n", config=config, provider=provider
        )

        assert provider.edits == ["203.0.113.5"]
        assert result.outcome is UpdateOutcome.UPDATED

    def test_changed_ip_updates_once(self, config):
        provider = FakeProvider()

        result = update_dns_entry(
            current_ip="203.0.113.9", dns_content="203.0.113.5", config=config, provider=provider
        )

        assert provider.edits == ["203.0.113.9"]
        assert result.outcome is UpdateOutcome.UPDATED
        assert result.message == "Updated DNS Entry to 203.0.113.9"

    @pytest.mark.parametrize("status", ["ERROR", "FAILURE", "success", ""])
    def test_non_success_status_reports_both_ips(self, config, status):
        provider = FakeProvider(status=status)

        result = update_dns_entry(
            current_ip="203.0.113.9", dns_content="203.0.113.5", config=config, provider=provider
        )

        assert result.outcome is UpdateOutcome.FAILED
        assert result.message == "Could not update DNS Entry. 203.0.113.5 -> 203.0.113.9"

    def test_failure_includes_provider_message(self, config):
        provider = FakeProvider(status="ERROR", message="Invalid API key. (002)")

        result = update_dns_entry(
            current_ip="203.0.113.9", dns_content="203.0.113.5", config=config, provider=provider
        )

        assert result.message == (
            "Could not update DNS Entry. 203.0.113.5 -> 203.0.113.9: Invalid API key. (002)"
        )


class TestRunPipeline:
    def test_unchanged(self, config):
        resolver = FakeResolver("203.0.113.5")
        provider = FakeProvider(content="203.0.113.5")

        result = run_pipeline(config=config, resolver=resolver, provider=provider)

        assert result.outcome is UpdateOutcome.UNCHANGED
        assert (resolver.calls, provider.reads, provider.edits) == (1, 1, [])

    def test_changed(self, config):
        resolver = FakeResolver("203.0.113.9")
        provider = FakeProvider(content="203.0.113.5")

        result = run_pipeline(config=config, resolver=resolver, provider=provider)

        assert result.outcome is UpdateOutcome.UPDATED
        assert result.current_ip == "203.0.113.9"
        assert result.dns_content == "203.0.113.5"
        assert provider.edits == ["203.0.113.9"]

    def test_resolver_failure_stops_before_provider(self, config):
        resolver = FakeResolver(error=NetworkError("down", step=STEP_RESOLVE_IP))
        provider = FakeProvider()

        with pytest.raises(NetworkError):
            run_pipeline(config=config, resolver=resolver, provider=provider)

        assert provider.reads == 0
        assert provider.edits == []

    def test_read_failure_stops_before_update(self, config):
        resolver = FakeResolver("203.0.113.9")
        provider = FakeProvider(read_error=ResponseShapeError("no records", step=STEP_READ_RECORD))

        with pytest.raises(ResponseShapeError):
            run_pipeline(config=config, resolver=resolver, provider=provider)

        assert provider.edits == []
