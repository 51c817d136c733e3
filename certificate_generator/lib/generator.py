"""Certificate generator orchestrating root and client certificate creation."""

import os
from collections.abc import Callable

from certificate_generator.lib.cert_utils import verify_client_certificate
from certificate_generator.lib.config import GeneratorConfig
from certificate_generator.lib.extensions import write_extension_file
from certificate_generator.lib.installer import TrustInstaller
from certificate_generator.lib.logging_config import LOGGER
from certificate_generator.lib.models import (
    CertificateRequest,
    CertificateSummary,
    GenerationResult,
)
from certificate_generator.lib.openssl import OpenSSL
from certificate_generator.lib.prompt import Prompter, format_bool


class CertificateGenerator:
    """Interactive generator for a local root CA and one client certificate."""

    def __init__(
        self,
        config: GeneratorConfig,
        prompter: Prompter,
        openssl: OpenSSL,
        installer_factory: Callable[[], TrustInstaller],
    ) -> None:
        """Initialize generator.

        Args:
            config: Generator configuration with output directory and defaults
            prompter: Source of interactive answers
            openssl: OpenSSL command wrapper
            installer_factory: Returns the trust installer for this host, called
                only when automatic install was requested
        """
        self.config = config
        self.prompter = prompter
        self.openssl = openssl
        self.installer_factory = installer_factory

    def ensure_output_dir(self) -> None:
        """Create the output directory with owner-only permissions if missing."""
        self.config.output_dir.mkdir(mode=self.config.directory_mode, parents=True, exist_ok=True)

    def collect_request(self) -> CertificateRequest:
        """Ask for domain, lifetime and wildcard flag."""
        domain = self.prompter.non_empty("Domain []")
        lifetime = str(self.config.default_lifetime_days)
        lifetime_days = self.prompter.string(f"Lifetime (days) [{lifetime}]", lifetime)
        wildcard_default = format_bool(self.config.default_wildcard)
        wildcard = self.prompter.boolean(
            f"Wildcard [{wildcard_default}]", self.config.default_wildcard
        )
        return CertificateRequest(domain=domain, lifetime_days=lifetime_days, wildcard=wildcard)

    def root_key_exists(self) -> bool:
        """Return whether root.key is present.

        Raises:
            OSError: For stat failures other than the file being absent
        """
        try:
            os.stat(self.config.root_key_path)
        except FileNotFoundError:
            return False
        return True

    def should_regenerate_root(self) -> bool:
        """Regenerate unconditionally without a root key, otherwise ask (default no)."""
        if not self.root_key_exists():
            return True
        return self.prompter.boolean("Root certificate detected, regenerate? [false]", False)

    def generate_root(self, lifetime_days: str) -> None:
        """Generate root private key and self-signed root certificate."""
        self.openssl.generate_ec_key("Generating root private key", self.config.root_key_path)
        self.openssl.create_root_certificate(
            self.config.root_key_path, self.config.root_cert_path, lifetime_days
        )

    def generate_client(self, request: CertificateRequest) -> None:
        """Generate client key, CSR and root-signed certificate.

        The extension file and CSR are removed once signing has finished,
        whether or not it succeeded.

        Raises:
            CommandError: If an openssl step fails
            OSError: If the extension file cannot be written
        """
        key_path = self.config.client_key_path(request.domain)
        csr_path = self.config.client_csr_path(request.domain)
        cert_path = self.config.client_cert_path(request.domain)
        extension_path = self.config.extension_file_path

        self.openssl.generate_ec_key("Generating client private key", key_path)
        self.openssl.create_request(key_path, csr_path, request.common_name)

        try:
            write_extension_file(
                extension_path, request.common_name, mode=self.config.extension_file_mode
            )
            self.openssl.sign_request(
                csr_path=csr_path,
                ca_cert_path=self.config.root_cert_path,
                ca_key_path=self.config.root_key_path,
                cert_path=cert_path,
                days=request.lifetime_days,
                extension_path=extension_path,
            )
        finally:
            extension_path.unlink(missing_ok=True)
            csr_path.unlink(missing_ok=True)

    def check_client(self, request: CertificateRequest) -> CertificateSummary | None:
        """Read back the issued certificate and compare it with the request.

        openssl may rewrite names it cannot represent in its config grammar
        (a `#` starts a comment, trailing spaces are dropped). A mismatch is
        logged as a warning and the certificate is kept.

        Returns:
            CertificateSummary, or None when the certificate does not match
        """
        try:
            return verify_client_certificate(
                self.config.client_cert_path(request.domain),
                self.config.root_cert_path,
                request.common_name,
            )
        except ValueError as e:
            LOGGER.warning("issued certificate does not match request: %s", e)
            return None

    def run(self) -> GenerationResult:
        """Run the full interactive generation sequence.

        Returns:
            GenerationResult with client artifact paths and root install state

        Raises:
            OSError: If the output directory, root key stat or extension file fails
            EOFError: If standard input is closed
            CommandError: If any openssl step fails
        """
        self.ensure_output_dir()
        request = self.collect_request()

        regenerate = self.should_regenerate_root()
        install = False

        if regenerate:
            if self.config.offer_install:
                install = self.prompter.boolean("Try to install automatically? [true]", True)

            self.generate_root(request.lifetime_days)

            if install:
                install = self.installer_factory().install(self.config.root_cert_path)
        else:
            LOGGER.info("Reusing existing root key %s", self.config.root_key_path)

        self.generate_client(request)
        summary = self.check_client(request)

        return GenerationResult(
            key_path=self.config.client_key_path(request.domain),
            cert_path=self.config.client_cert_path(request.domain),
            root_cert_path=self.config.root_cert_path,
            regenerated=regenerate,
            installed=install,
            certificate=summary,
        )
