"""Generator configuration dataclass."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class GeneratorConfig:
    """Certificate generator configuration.

    Holds the output directory and the fixed OpenSSL parameters. Every
    artifact path is derived from ``output_dir`` so nothing depends on the
    current working directory.
    """

    output_dir: Path = field(default_factory=lambda: Path("out"))
    openssl_bin: str = "openssl"
    default_lifetime_days: int = 1024
    default_wildcard: bool = True
    curve: str = "prime256v1"
    digest: str = "sha256"
    root_subject: str = "/CN=local"
    directory_mode: int = 0o700
    extension_file_mode: int = 0o600
    offer_install: bool = True

    @property
    def root_key_path(self) -> Path:
        return self.output_dir / "root.key"

    @property
    def root_cert_path(self) -> Path:
        return self.output_dir / "root.crt"

    @property
    def extension_file_path(self) -> Path:
        return self.output_dir / "v3.ext"

    def client_key_path(self, domain: str) -> Path:
        return self.output_dir / f"{domain}.key"

    def client_csr_path(self, domain: str) -> Path:
        return self.output_dir / f"{domain}.csr"

    def client_cert_path(self, domain: str) -> Path:
        return self.output_dir / f"{domain}.crt"
