"""Adapters: concrete I/O (HTTP) behind the Core's interfaces.

Each module implements a contract from `porkbun_ddns.core.interfaces`.
"""

from porkbun_ddns.adapters.porkbun import PorkbunClient
from porkbun_ddns.adapters.public_ip import CheckIPResolver

__all__ = [
    "CheckIPResolver",
    "PorkbunClient",
]
