"""X.509 v3 extension file consumed by ``openssl x509 -extfile``."""

import os
from pathlib import Path

V3_TEMPLATE = """\
authorityKeyIdentifier=keyid,issuer
basicConstraints=CA:FALSE
keyUsage = digitalSignature, nonRepudiation, keyEncipherment, dataEncipherment
subjectAltName = @alt_names

[alt_names]
DNS.1 = {dns_name}
"""


def render_extensions(dns_name: str) -> str:
    """Render the extension file with a single DNS SAN entry."""
    return V3_TEMPLATE.format(dns_name=dns_name)


def write_extension_file(path: Path, dns_name: str, mode: int = 0o600) -> Path:
    """Write the extension file, creating it with owner-only permissions.

    Raises:
        OSError: If the file cannot be created or written
    """
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(render_extensions(dns_name))
    return path
