"""Main entry point for the Guest WiFi Password Portal."""

import argparse
import logging
import sys
import uvicorn
from typing import List, Optional
from shared.config.config import config
from shared.domain.errors import get_error_action_text, get_error_message
from portal.services.lookup_service import create_lookup_service

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    """Command line options for the lookup and the server."""
    parser = argparse.ArgumentParser(description="Show today's guest WiFi password.")
    parser.add_argument(
        "csv_path",
        nargs="?",
        help="Password table to read before the configured locations",
    )
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API")
    parser.add_argument("--host", default=config.HOST, help="Bind address for --serve")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port for --serve")
    return parser


def print_current_password(csv_path: Optional[str]) -> int:
    """
    Look up and print today's password.

    Returns:
        Process exit code: 0 if a password was found, 1 otherwise.
    """
    service = create_lookup_service(source_path=csv_path)
    result = service.get_current_password(include_yesterday=True)

    print(f"Network:   {result.network_name}")
    if result.date:
        print(f"Date:      {result.date}")

    if result.password is None:
        print(f"Error:     {get_error_message(result.error_state, result.error)}")
        print(f"Action:    {get_error_action_text(result.error_state)}")
    else:
        print(f"Password:  {result.password}")

    if result.yesterday_password:
        print(f"Yesterday: {result.yesterday_password}")

    return 0 if result.password is not None else 1


def serve(host: str, port: int) -> None:
    """Run the API with uvicorn."""
    logger.info(f"Starting password portal on {host}:{port}")
    uvicorn.run("portal.api.app:app", host=host, port=port)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = build_arg_parser().parse_args(argv)

    if args.serve:
        serve(args.host, args.port)
        return 0

    return print_current_password(args.csv_path)


if __name__ == "__main__":
    sys.exit(main())
