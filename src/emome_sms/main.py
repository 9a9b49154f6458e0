"""
Emome IMSP SMS - command line

Sends a message through the SubmitSM servlet and prints
the gateway status for every recipient.
"""

import logging
import sys

from .config import load_config
from .errors import EmomeError
from .parsers import SubmissionResult
from .senders import ImspClient

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler(),
        ]
    )


def parse_overrides(args: list[str]) -> dict[str, str]:
    """Parse key=value arguments into a parameters dict."""
    params = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got: {arg}")
        params[key] = value
    return params


def print_result(result: SubmissionResult) -> None:
    """Print one line per recipient."""
    for outcome in result.outcomes:
        print(" | ".join(outcome.fields))
    for warning in result.warnings:
        print(f"warning: {warning}")


def usage() -> None:
    print("Usage: python -m emome_sms.main [send|submit] ...")
    print("  send <to> <message>       - send message, <to> may be comma-separated")
    print("  submit key=value ...      - SubmitSM with arbitrary parameters")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    mode = argv[0] if argv else ""

    params = None
    if mode == "submit":
        try:
            params = parse_overrides(argv[1:])
        except ValueError as e:
            print(e)
            return 2
    elif not (mode == "send" and len(argv) == 3):
        usage()
        return 2

    setup_logging()

    config = load_config()
    if not config.account or not config.password:
        logger.error("EMOME_ACCOUNT / EMOME_PASSWORD not configured")
        return 1

    client = ImspClient.from_config(config)

    try:
        if params is None:
            result = client.send_sm(argv[2], argv[1])
        else:
            result = client.submit_sm(params)
    except EmomeError as e:
        logger.error(f"❌ SMS не отправлен: {e}")
        return 1

    print_result(result)
    return 1 if result.malformed else 0


if __name__ == "__main__":
    sys.exit(main())
