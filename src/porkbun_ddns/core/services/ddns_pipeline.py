"""DDNS update orchestration.

The run is a straight line: resolve IP → read record → decide/update. Each
step depends on the previous one succeeding; any `DDNSError` propagates to
the caller untouched. The only branch lives in `update_dns_entry`.

Keeping this out of the CLI makes the decision rule testable with fake
resolvers/providers and leaves printing and exit codes to the entry point.
"""

from __future__ import annotations

import logging

from porkbun_ddns.core.domain.models import Configuration, UpdateOutcome, UpdateResult
from porkbun_ddns.core.interfaces.dns_provider import DNSProvider, PublicIPResolver

logger = logging.getLogger(__name__)


def update_dns_entry(
    *,
    current_ip: str,
    dns_content: str,
    config: Configuration,
    provider: DNSProvider,
) -> UpdateResult:
    """Push `current_ip` to the provider unless it is already published.

    Equality is exact on the strings as handed in; no normalisation here.
    """

    if current_ip == dns_content:
        logger.debug("Record already points at %s, skipping edit", current_ip)
        return UpdateResult(
            outcome=UpdateOutcome.UNCHANGED,
            current_ip=current_ip,
            dns_content=dns_content,
            message=(
                f"Current IP: {current_ip}, identical to current DNS Entry, "
                f"{dns_content}. Not updating."
            ),
        )

    logger.debug("Record content %s differs from %s, editing", dns_content, current_ip)
    response = provider.edit_record(config, current_ip)

    if response.succeeded:
        return UpdateResult(
            outcome=UpdateOutcome.UPDATED,
            current_ip=current_ip,
            dns_content=dns_content,
            message=f"Updated DNS Entry to {current_ip}",
        )

    message = f"Could not update DNS Entry. {dns_content} -> {current_ip}"
    if response.message:
        message = f"{message}: {response.message}"
    logger.info("Provider rejected the update with status %r", response.status)
    return UpdateResult(
        outcome=UpdateOutcome.FAILED,
        current_ip=current_ip,
        dns_content=dns_content,
        message=message,
    )


def run_pipeline(
    *,
    config: Configuration,
    resolver: PublicIPResolver,
    provider: DNSProvider,
) -> UpdateResult:
    """Run resolve → read → update once for `config.target`."""

    target = config.target
    logger.info(
        "Syncing %s record for %s",
        target.record_type,
        f"{target.subdomain}.{target.domain}" if target.subdomain else target.domain,
    )

    current_ip = resolver.resolve()
    logger.info("Current public IP: %s", current_ip)

    dns_content = provider.retrieve_record_content(config)
    logger.info("Published record content: %s", dns_content)

    return update_dns_entry(
        current_ip=current_ip,
        dns_content=dns_content,
        config=config,
        provider=provider,
    )
