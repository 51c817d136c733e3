"""Test fixtures for certificate_generator tests."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePrivateKey

from certificate_generator.lib.config import GeneratorConfig
from certificate_generator.lib.prompt import Prompter
from certificate_generator.lib.runner import CommandRunner
from certificate_generator.tests.helpers import build_certificate, scripted_reader


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return output directory path inside tmp_path (not yet created)."""
    return tmp_path / "out"


@pytest.fixture
def config(output_dir: Path) -> GeneratorConfig:
    """Return generator config writing into the temporary output directory."""
    return GeneratorConfig(output_dir=output_dir)


@pytest.fixture
def mock_runner() -> MagicMock:
    """Return mocked CommandRunner."""
    runner = MagicMock(spec=CommandRunner)
    runner.run.return_value = ""
    return runner


@pytest.fixture
def make_prompter() -> Callable[..., Prompter]:
    """Return factory building a Prompter that replays the given answers."""

    def factory(*answers: str) -> Prompter:
        return Prompter(read=scripted_reader(list(answers)), write=MagicMock())

    return factory


@pytest.fixture
def root_key() -> EllipticCurvePrivateKey:
    """Generate P-256 private key for the root CA."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def root_cert(root_key: EllipticCurvePrivateKey) -> x509.Certificate:
    """Generate self-signed root certificate with CN=local."""
    return build_certificate("local", root_key.public_key(), None, root_key)


@pytest.fixture
def client_key() -> EllipticCurvePrivateKey:
    """Generate P-256 private key for the client certificate."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def wildcard_client_cert(
    client_key: EllipticCurvePrivateKey,
    root_cert: x509.Certificate,
    root_key: EllipticCurvePrivateKey,
) -> x509.Certificate:
    """Generate *.example.com client certificate signed by the root."""
    return build_certificate(
        "*.example.com",
        client_key.public_key(),
        root_cert,
        root_key,
        dns_names=["*.example.com"],
    )
