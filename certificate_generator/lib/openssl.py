"""OpenSSL command construction for root and client certificate steps."""

from pathlib import Path

from certificate_generator.lib.config import GeneratorConfig
from certificate_generator.lib.runner import CommandRunner


class OpenSSL:
    """Builds openssl argument lists and hands them to a CommandRunner."""

    def __init__(self, runner: CommandRunner, config: GeneratorConfig) -> None:
        """Initialize OpenSSL wrapper.

        Args:
            runner: Command runner used for every invocation
            config: Generator configuration (binary, curve, digest, root subject)
        """
        self.runner = runner
        self.config = config

    def _run(self, description: str, args: list[str]) -> str:
        return self.runner.run(description, self.config.openssl_bin, *args)

    def generate_ec_key(self, description: str, key_path: Path) -> None:
        """Generate an EC private key on the configured curve."""
        args = ["ecparam", "-name", self.config.curve, "-genkey", "-out", str(key_path)]
        self._run(description, args)

    def create_root_certificate(self, key_path: Path, cert_path: Path, days: str) -> None:
        """Create the self-signed root certificate from an existing key."""
        args = [
            "req",
            "-x509",
            "-new",
            "-nodes",
            "-key",
            str(key_path),
            f"-{self.config.digest}",
            "-days",
            days,
            "-subj",
            self.config.root_subject,
            "-out",
            str(cert_path),
        ]
        self._run("Generating root certificate", args)

    def create_request(self, key_path: Path, csr_path: Path, common_name: str) -> None:
        """Create a certificate signing request with the given CN."""
        args = [
            "req",
            "-new",
            f"-{self.config.digest}",
            "-nodes",
            "-key",
            str(key_path),
            "-subj",
            f"/CN={common_name}",
            "-out",
            str(csr_path),
        ]
        self._run("Generating client certificate request", args)

    def sign_request(
        self,
        csr_path: Path,
        ca_cert_path: Path,
        ca_key_path: Path,
        cert_path: Path,
        days: str,
        extension_path: Path,
    ) -> None:
        """Sign a CSR with the root CA, creating the serial file if needed."""
        args = [
            "x509",
            "-req",
            "-in",
            str(csr_path),
            "-CA",
            str(ca_cert_path),
            "-CAkey",
            str(ca_key_path),
            "-CAcreateserial",
            "-out",
            str(cert_path),
            "-days",
            days,
            f"-{self.config.digest}",
            "-extfile",
            str(extension_path),
        ]
        self._run("Generating client certificate", args)
