"""System trust-store installation for the generated root certificate."""

import platform
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from certificate_generator.lib.logging_config import LOGGER
from certificate_generator.lib.prompt import Prompter
from certificate_generator.lib.runner import CommandError, CommandRunner

OS_FAMILIES = {
    "redhat": {
        "rhel",
        "redhat",
        "centos",
        "fedora",
        "rocky",
        "almalinux",
        "ol",
        "amzn",
        "scientific",
        "cloudlinux",
    },
    "debian": {"debian", "ubuntu", "raspbian", "linuxmint", "pop"},
    "suse": {"suse", "opensuse", "opensuse-leap", "opensuse-tumbleweed", "sles"},
    "arch": {"arch", "archarm", "manjaro", "endeavouros"},
}


def detect_os_family() -> str:
    """Return the host OS family (e.g. redhat, debian, darwin, windows).

    Linux hosts are classified from ``ID`` and ``ID_LIKE`` in os-release;
    an unknown distribution is reported by its own ``ID``.

    Raises:
        OSError: If os-release cannot be read
    """
    system = platform.system().lower()
    if system != "linux":
        return system

    os_release = platform.freedesktop_os_release()
    candidates = [os_release.get("ID", "")]
    candidates.extend(os_release.get("ID_LIKE", "").split())

    for candidate in candidates:
        for family, ids in OS_FAMILIES.items():
            if candidate in ids:
                return family

    return candidates[0] or system


class TrustInstaller(ABC):
    """Installs a root certificate into the host trust store."""

    @abstractmethod
    def install(self, root_cert_path: Path) -> bool:
        """Install root_cert_path; return True only if it is now trusted."""


class RedHatTrustInstaller(TrustInstaller):
    """Installs into the ca-trust anchors directory used by RHEL and Fedora."""

    ANCHOR_PATH = Path("/etc/pki/ca-trust/source/anchors/certificate-generator-root.crt")

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def install(self, root_cert_path: Path) -> bool:
        try:
            self.runner.run(
                "Copying root certificate",
                "sudo",
                "cp",
                str(root_cert_path),
                str(self.ANCHOR_PATH),
            )
            self.runner.run("Installing root certificate", "sudo", "update-ca-trust")
        except CommandError as e:
            LOGGER.error("Root certificate install failed: %s", e)
            return False

        LOGGER.info("Root certificate installed to %s", self.ANCHOR_PATH)
        return True


class UnsupportedPlatformInstaller(TrustInstaller):
    """No-op installer for families without automatic install support."""

    def __init__(self, family: str, prompter: Prompter) -> None:
        self.family = family
        self.prompter = prompter

    def install(self, root_cert_path: Path) -> bool:
        print(f"\nAutomatic install not supported on {self.family}")
        self.prompter.string("Press enter to continue...", "")
        return False


class HostInfoUnavailableInstaller(TrustInstaller):
    """No-op installer used when the host OS family cannot be determined."""

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def install(self, root_cert_path: Path) -> bool:
        print("\nFailed to get host info")
        LOGGER.warning("Host info unavailable: %s", self.reason)
        return False


INSTALLERS: dict[str, Callable[[CommandRunner], TrustInstaller]] = {
    "redhat": RedHatTrustInstaller,
}


def select_installer(
    runner: CommandRunner,
    prompter: Prompter,
    detect: Callable[[], str] = detect_os_family,
) -> TrustInstaller:
    """Pick the trust installer registered for the host OS family.

    Args:
        runner: Command runner passed to supported installers
        prompter: Prompter used by the unsupported-platform acknowledgement
        detect: OS family lookup

    Returns:
        Registered installer for the family, or a no-op installer
    """
    try:
        family = detect()
    except OSError as e:
        return HostInfoUnavailableInstaller(str(e))

    factory = INSTALLERS.get(family)
    if factory is None:
        return UnsupportedPlatformInstaller(family, prompter)
    return factory(runner)
