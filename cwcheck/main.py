import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from cwcheck.config import ConfigModel, parse_config_file
from cwcheck.host_abi import HOST_ABI_TABLES
from cwcheck.policies.policy_catalog import POLICY_CATALOG
from cwcheck.results import CwCheckError
from cwcheck.schemas import VerdictResponse
from cwcheck.validator import check_contract, parse_capabilities

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def setup_args(argv: Optional[List[str]] = None):
    """Read all the args."""
    parser = argparse.ArgumentParser(description="Verify that a CosmWasm contract is valid")
    parser.add_argument("path", help="Path to the contract")
    parser.add_argument(
        "-c", "--capabilities",
        help="Comma separated list of capabilities the host provides. Can be repeated.",
        action="append",
        default=None,
    )
    parser.add_argument("--host-version", choices=sorted(HOST_ABI_TABLES), default=None)
    parser.add_argument("--capability-policy", choices=sorted(POLICY_CATALOG), default=None)
    parser.add_argument("--config", help="Path to a yaml config.", default=None)
    parser.add_argument("--json", help="Print the verdict as JSON.", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entrypoint for cwcheck.

    * Parses CLI args
    * Parses and validates config, CLI args take precedence
    * Checks the contract and maps the verdict to an exit status
    """
    args = setup_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = parse_config_file(args.config) if args.config else ConfigModel()
    except (ValueError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_ERROR

    host_version = args.host_version or config.host_version
    capability_policy = args.capability_policy or config.capability_policy
    if args.capabilities is None:
        capabilities = frozenset(config.capabilities)
    else:
        capabilities = parse_capabilities(args.capabilities)

    try:
        result = check_contract(args.path, capabilities, host_version, capability_policy)
    except CwCheckError as e:
        logger.error(str(e))
        return EXIT_ERROR

    if args.json:
        print(VerdictResponse.from_result(result).model_dump_json())
    elif result.ok:
        print(f"{args.path}: valid")
    else:
        print(f"{args.path}: invalid ({result.kind.value}): {result.reason}")

    return EXIT_VALID if result.ok else EXIT_INVALID


def run():
    sys.exit(main())


if __name__ == "__main__":
    # Run using `python -m cwcheck.main artifacts/hackatom.wasm -c staking`
    run()
