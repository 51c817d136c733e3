"""Certificate utility functions for reading back and checking issued certificates."""

from pathlib import Path

from cryptography import x509
from cryptography.exceptions import InvalidSignature

from certificate_generator.lib.models import CertificateSummary


def deserialize_certificate(pem_data: bytes) -> x509.Certificate:
    """Deserialize certificate from PEM bytes."""
    return x509.load_pem_x509_certificate(pem_data)


def load_certificate(path: Path) -> x509.Certificate:
    """Load a PEM certificate from disk."""
    return deserialize_certificate(path.read_bytes())


def get_certificate_serial_hex(cert: x509.Certificate) -> str:
    """Return certificate serial number as hex with colons (e.g., 3A:F2:B1:...)."""
    serial_hex = f"{cert.serial_number:X}"
    if len(serial_hex) % 2 != 0:
        serial_hex = "0" + serial_hex
    return ":".join(serial_hex[i : i + 2] for i in range(0, len(serial_hex), 2))


def get_common_name(cert: x509.Certificate) -> str:
    """Return the subject CN of a certificate.

    Raises:
        ValueError: If the subject has no CN or it is not a string
    """
    attributes = cert.subject.get_attributes_for_oid(x509.NameOID.COMMON_NAME)
    if not attributes:
        raise ValueError("certificate subject has no CN")
    cn = attributes[0].value
    if not isinstance(cn, str):
        raise ValueError("CN must be string")
    return cn


def get_dns_names(cert: x509.Certificate) -> list[str]:
    """Return SAN DNS entries, or an empty list when the extension is absent."""
    try:
        san = cert.extensions.get_extension_for_class(x509.SubjectAlternativeName).value
    except x509.ExtensionNotFound:
        return []
    return san.get_values_for_type(x509.DNSName)


def summarize_certificate(cert: x509.Certificate) -> CertificateSummary:
    """Extract the fields shown in the final report."""
    return CertificateSummary(
        common_name=get_common_name(cert),
        dns_names=get_dns_names(cert),
        serial_number=get_certificate_serial_hex(cert),
        not_after=cert.not_valid_after_utc,
    )


def is_issued_by(cert: x509.Certificate, issuer_cert: x509.Certificate) -> bool:
    """Verify cert is directly signed by issuer_cert.

    Returns True if the issuer name and signature check out, False otherwise.
    """
    try:
        cert.verify_directly_issued_by(issuer_cert)
        return True
    except (ValueError, TypeError, InvalidSignature):
        return False


def verify_client_certificate(
    cert_path: Path, root_cert_path: Path, expected_name: str
) -> CertificateSummary:
    """Check an issued client certificate against its root and expected name.

    Args:
        cert_path: Path to the issued client certificate
        root_cert_path: Path to the root certificate that should have signed it
        expected_name: Resolved name expected as CN and sole SAN DNS entry

    Returns:
        CertificateSummary of the client certificate

    Raises:
        ValueError: If the chain, CN or SAN does not match
    """
    cert = load_certificate(cert_path)
    root_cert = load_certificate(root_cert_path)

    if not is_issued_by(cert, root_cert):
        raise ValueError(f"{cert_path} is not signed by {root_cert_path}")

    summary = summarize_certificate(cert)
    if summary.common_name != expected_name:
        raise ValueError(f"unexpected CN {summary.common_name!r}, expected {expected_name!r}")
    if summary.dns_names != [expected_name]:
        raise ValueError(
            f"unexpected SAN DNS names {summary.dns_names}, expected {[expected_name]}"
        )

    return summary
