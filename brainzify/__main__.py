"""
Command line interface for Brainzify.

Usage: ``python -m brainzify validate [token] [--url URL] [--config PATH]``
"""
import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from brainzify import PROGRAM_NAME
from brainzify.api.exception import APIError
from brainzify.config import Config
from brainzify.exception import BrainzifyError
from brainzify.log.logger import BrainzifyLogger

#: Exit code when the token is valid
EXIT_VALID = 0
#: Exit code when the token is invalid
EXIT_INVALID = 1
#: Exit code when the token could not be validated
EXIT_ERROR = 2


# noinspection PyProtectedMember
def get_parser() -> argparse.ArgumentParser:
    """Get the terminal input parser"""
    parser = argparse.ArgumentParser(
        description="Interact with the ListenBrainz API.",
        prog=PROGRAM_NAME.lower(),
        usage="%(prog)s [options] function",
    )
    parser._positionals.title = "Functions"
    parser._optionals.title = "Optional arguments"

    functions = parser.add_subparsers(dest="function", required=True)

    validate_parser = functions.add_parser("validate", help="Check whether a user token is valid.")
    validate_parser.add_argument(
        "token", type=str, nargs="?", default=None,
        help="The token to validate. When not given, the token from the config or environment is used."
    )
    validate_parser.add_argument(
        "-u", "--url", type=str, required=False, dest="url", default=None,
        help="The root URL of the API to use"
    )
    validate_parser.add_argument(
        "-c", "--config", type=str, required=False, dest="config_path", default=None,
        help="The path to the config file to use"
    )
    validate_parser.add_argument(
        "-lc", "--log-config", type=str, required=False, dest="log_config_path", default=None,
        help="The path to the logging config file to use"
    )

    return parser


async def validate(config: Config, token: str | None = None, url: str | None = None) -> int:
    """
    Validate the given ``token`` and print the result.

    :return: The exit code for the result of the validation.
    """
    # noinspection PyTypeChecker
    logger: BrainzifyLogger = logging.getLogger(__name__)

    token = token or config.token
    if not token:
        logger.print_message("\33[91mNo token given\33[0m")
        return EXIT_ERROR

    async with config.create_api(url=url) as api:
        try:
            response = await api.validate_token(token)
        except APIError as ex:
            logger.print_message(f"\33[91mCould not validate token: {ex}\33[0m")
            return EXIT_ERROR

    if response.valid:
        logger.print_message(f"\33[92mToken is valid for user: {response.user_name}\33[0m")
    else:
        logger.print_message(f"\33[91mToken is invalid: {response.message}\33[0m")

    if (limit := response.rate_limit) is not None:
        logger.print_message(
            f"Rate limit: {limit.remaining}/{limit.limit} requests remaining | Resets in {limit.reset_in}s"
        )

    return EXIT_VALID if response.valid else EXIT_INVALID


def main(args: Sequence[str] | None = None) -> int:
    """Run the command line interface with the given ``args`` and return the exit code"""
    named_args = get_parser().parse_args(args)

    try:
        config = Config(named_args.config_path) if named_args.config_path else Config()
        if named_args.config_path:
            config.load()
        if named_args.log_config_path:
            config.load_log_config(named_args.log_config_path)

        return asyncio.run(validate(config, token=named_args.token, url=named_args.url))
    except BrainzifyError as ex:
        print(f"\33[91m{ex}\33[0m", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
