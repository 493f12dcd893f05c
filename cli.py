"""
Command-line entry point for httpdl.

Parses arguments into a Cli config, sends one request and streams the
response body to a file. Errors raised anywhere below are reported here
and mapped to the process exit status.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

import requests

from dispatcher import __version__, send_request
from downloader import Transfer, download
from errors import HttpdlError, UnsupportedUrlError

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ('http://', 'https://')

# HTTP client loggers that drown out -v output
NOISY_LOGGERS = [
    'urllib3',
    'requests',
]


@dataclass
class Cli:
    url: str
    output: Optional[str] = None
    type_of_req: str = 'get'
    header: Optional[str] = None
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='httpdl',
        description='Download the body of a single HTTP request to a file.',
    )
    parser.add_argument('-u', '--url', required=True, help='Url to download from.')
    parser.add_argument(
        '-t', '--type', dest='type_of_req', default='get',
        help='Type of request: get, post, put, delete or head (default: get).',
    )
    parser.add_argument(
        '-o', '--output', default=None,
        help='Output file. Defaults to output.<ext> from the response Content-Type.',
    )
    parser.add_argument('-H', '--header', default=None, help='Add header to request, as name:value.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def is_supported_url(url: str) -> bool:
    return url.lower().startswith(SUPPORTED_SCHEMES)


def validate_url(url: str, prompt=None) -> None:
    """
    Asks the user whether to go on when the url is not http(s).

    Raises:
        UnsupportedUrlError: the user did not answer y/yes
    """
    if is_supported_url(url):
        return

    prompt = prompt or input
    try:
        answer = prompt(f"The url {url} is not supported. Do you want to continue? ")
    except EOFError:
        answer = ''
    if answer.strip().lower() not in ('y', 'yes'):
        raise UnsupportedUrlError(url)


def parse_args(argv: Optional[List[str]] = None, prompt=None) -> Cli:
    args = build_parser().parse_args(argv)
    validate_url(args.url, prompt=prompt)
    return Cli(
        url=args.url,
        output=args.output,
        type_of_req=args.type_of_req,
        header=args.header,
        verbose=args.verbose,
    )


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure console logging.

    Diagnostics are shown at DEBUG with --verbose; otherwise only
    warnings (such as a non-2xx status) and above get through.
    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates on re-init
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return logging.getLogger('httpdl')


def run(cli: Cli) -> Transfer:
    """Send the request described by cli and save its body."""
    logger.debug(f"Got args! ({cli})")

    with requests.Session() as session:
        logger.debug("Created Client!")
        with send_request(cli.url, cli.type_of_req, cli.header, session=session) as response:
            transfer = download(response, cli.output)

    logger.debug(f"Downloaded file! ({transfer.bytes_written} bytes to {transfer.destination_path})")
    return transfer


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cli = parse_args(argv)
        setup_logging(cli.verbose)
        run(cli)
    except HttpdlError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted, partial file left on disk.", file=sys.stderr)
        return 130
    return 0


if __name__ == '__main__':
    sys.exit(main())
