"""Human-readable summary of a generation run."""

from certificate_generator.lib.models import GenerationResult

RULE = "======================================"


def format_summary(result: GenerationResult) -> str:
    """Render the final summary block.

    The trust reminder is omitted only when the root was regenerated and
    installed during this run.
    """
    lines = ["", RULE, "", "Certificates generated!"]
    if result.needs_manual_trust:
        lines.append(f"Add {result.root_cert_path} to your system trust centre")

    lines.extend(["", f"Key:\t{result.key_path}", f"Cert:\t{result.cert_path}"])

    if result.certificate is not None:
        cert = result.certificate
        lines.append(f"Name:\t{', '.join(cert.dns_names) or cert.common_name}")
        lines.append(f"Serial:\t{cert.serial_number}")
        lines.append(f"Expires:\t{cert.not_after.isoformat()}")

    lines.extend(["", RULE])
    return "\n".join(lines)


def print_summary(result: GenerationResult) -> None:
    print(format_summary(result))
