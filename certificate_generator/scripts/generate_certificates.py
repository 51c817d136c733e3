#!/usr/bin/env python3
"""Interactively generate a local root CA and a root-signed domain certificate."""

import argparse
import shlex
import sys
from pathlib import Path

from certificate_generator.lib.config import GeneratorConfig
from certificate_generator.lib.generator import CertificateGenerator
from certificate_generator.lib.installer import select_installer
from certificate_generator.lib.logging_config import LOGGER, set_verbose
from certificate_generator.lib.openssl import OpenSSL
from certificate_generator.lib.prompt import Prompter
from certificate_generator.lib.reporter import print_summary
from certificate_generator.lib.runner import CommandError, CommandRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a local root CA and a domain certificate signed by it"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("out"),
        help="Output directory for keys and certificates (default: out)",
    )
    parser.add_argument(
        "--openssl",
        default="openssl",
        help="OpenSSL executable (default: openssl from PATH)",
    )
    parser.add_argument(
        "--no-install",
        action="store_true",
        help="Never offer automatic trust-store installation of the root certificate",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log openssl output for every step",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the interactive certificate generator.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)
    set_verbose(args.verbose)

    config = GeneratorConfig(
        output_dir=args.output_dir,
        openssl_bin=args.openssl,
        offer_install=not args.no_install,
    )
    prompter = Prompter()
    runner = CommandRunner()
    generator = CertificateGenerator(
        config=config,
        prompter=prompter,
        openssl=OpenSSL(runner, config),
        installer_factory=lambda: select_installer(runner, prompter),
    )

    try:
        result = generator.run()
    except EOFError as e:
        LOGGER.error("failed to read string from stdin: %s", str(e) or "end of input")
        return 1
    except CommandError as e:
        LOGGER.error(
            "command failed: %s: %s",
            e.description,
            e.output.strip(),
            extra={"command": shlex.join(e.argv), "returncode": e.returncode},
        )
        return 1
    except OSError as e:
        LOGGER.error("filesystem operation failed: %s", e)
        return 1
    except KeyboardInterrupt:
        print()
        return 130

    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
