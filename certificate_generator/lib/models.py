"""Request and result models for certificate generation."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass
class CertificateRequest:
    """Parameters collected from the user for one client certificate."""

    domain: str
    lifetime_days: str
    wildcard: bool

    @property
    def common_name(self) -> str:
        """Resolved name used for both the subject CN and the SAN DNS entry."""
        if self.wildcard:
            return f"*.{self.domain}"
        return self.domain


@dataclass
class CertificateSummary:
    """Fields read back from an issued certificate."""

    common_name: str
    dns_names: list[str]
    serial_number: str
    not_after: datetime


@dataclass
class GenerationResult:
    """Result from a certificate generation run.

    Contains artifact paths plus whether the root was regenerated and
    installed into the system trust store during this run.
    """

    key_path: Path
    cert_path: Path
    root_cert_path: Path
    regenerated: bool
    installed: bool
    certificate: CertificateSummary | None = None

    @property
    def needs_manual_trust(self) -> bool:
        return not (self.regenerated and self.installed)
