#!/usr/bin/env python3
"""
Command-line interface for the Shortify client.

Usage:
    shortify-client shorten <url> [--copy]
    shortify-client stats <short_code>
    shortify-client platform
    shortify-client qr <short_url> -o FILE
    shortify-client serve
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from shortify_client.config import Config, load_config
from shortify_client.lib.backend import BackendClient
from shortify_client.lib.common.logging_config import setup_logging
from shortify_client.lib.errors import BackendError
from shortify_client.lib.flows import AnalyticsView, AnalyticsTab, ShorteningFlow
from shortify_client.lib.state import Failed, ViewState


class ShortifyCLI:
    """Command-line front for the shortening and analytics flows."""

    def __init__(self, config: Config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.logger = setup_logging(
            level="DEBUG" if verbose else config.log_level,
            log_file=config.log_file,
            json_format=config.log_json,
            stream=sys.stderr,
        )
        self.backend: Optional[BackendClient] = None

    def initialize(self):
        """Create the backend client."""
        self.backend = BackendClient(
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout_seconds,
            logger=self.logger.getChild("backend"),
        )

    async def cleanup(self):
        """Cleanup resources."""
        if self.backend:
            await self.backend.close()

    async def shorten(self, url: str, copy: bool = False) -> int:
        """Shorten a URL."""
        flow = ShorteningFlow(self.backend, self.config.redirect_base_url, logger=self.logger)
        state = await flow.submit(url)
        if isinstance(state, Failed):
            return _print_failure(state)

        result = state.payload
        output = {
            "success": True,
            "short_url": result.short_url,
            "short_code": result.short_code,
            "original_url": result.original_url or url,
        }
        if copy:
            output["copied"] = flow.copy_short_url()
        print(json.dumps(output, indent=2))
        return 0

    async def stats(self, short_code: str) -> int:
        """Get statistics for a short code."""
        view = AnalyticsView(self.backend, logger=self.logger)
        state = await view.url_stats.fetch(short_code)
        return _print_state(state, "statistics")

    async def platform(self) -> int:
        """Get platform-wide statistics."""
        view = AnalyticsView(self.backend, logger=self.logger)
        await view.select_tab(AnalyticsTab.PLATFORM)
        return _print_state(view.platform_stats.state, "statistics")

    async def qr(self, short_url: str, output: str) -> int:
        """Save the QR code PNG for a short URL."""
        try:
            image = await self.backend.get_qr_code(short_url)
        except BackendError as e:
            print(json.dumps({
                "success": False,
                "error": e.message or "Failed to fetch QR code",
            }, indent=2), file=sys.stderr)
            return 1

        with open(output, "wb") as f:
            f.write(image)

        print(json.dumps({
            "success": True,
            "short_url": short_url,
            "file": output,
            "bytes": len(image),
        }, indent=2))
        return 0


def _print_failure(state: Failed) -> int:
    print(json.dumps({
        "success": False,
        "error": state.message,
        "kind": state.kind.value,
    }, indent=2), file=sys.stderr)
    return 1


def _print_state(state: ViewState, key: str) -> int:
    if isinstance(state, Failed):
        return _print_failure(state)
    print(json.dumps({
        "success": True,
        key: state.payload.model_dump(mode="json"),
    }, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortify-client",
        description="Shortify client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL and copy the result
  %(prog)s shorten https://example.com/long/url --copy

  # Statistics for one short code
  %(prog)s stats t6fXRb

  # Platform-wide statistics
  %(prog)s platform

  # Save the QR code of a short URL
  %(prog)s qr http://localhost:8080/t6fXRb -o t6fXRb.png

  # Run the web front
  %(prog)s serve --port 3000
        """
    )

    parser.add_argument(
        "--api-url",
        default=None,
        help="Shortify API origin (default: from API_BASE_URL env or http://localhost:8080)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--copy", action="store_true", help="Copy the short URL to the clipboard")

    stats_parser = subparsers.add_parser("stats", help="Get URL statistics")
    stats_parser.add_argument("short_code", help="Short code to get stats for")

    subparsers.add_parser("platform", help="Get platform statistics")

    qr_parser = subparsers.add_parser("qr", help="Save the QR code of a short URL")
    qr_parser.add_argument("short_url", help="Short URL to encode")
    qr_parser.add_argument("-o", "--output", required=True, help="PNG file to write")

    serve_parser = subparsers.add_parser("serve", help="Run the web front")
    serve_parser.add_argument("--host", default=None, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on")

    return parser


async def run(args: argparse.Namespace, config: Config) -> int:
    """Execute one command against the backend."""
    cli = ShortifyCLI(config, verbose=args.verbose)
    cli.initialize()
    try:
        if args.command == "shorten":
            return await cli.shorten(args.url, args.copy)
        elif args.command == "stats":
            return await cli.stats(args.short_code)
        elif args.command == "platform":
            return await cli.platform()
        elif args.command == "qr":
            return await cli.qr(args.short_url, args.output)
        return 1
    finally:
        await cli.cleanup()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = load_config(
        api_base_url=args.api_url,
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
    )

    if args.command == "serve":
        from shortify_client.app import main as serve
        serve(config)
        return 0

    return asyncio.run(run(args, config))


if __name__ == "__main__":
    sys.exit(main())
