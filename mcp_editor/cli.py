"""Command-line launcher: starts the API server and opens the browser GUI."""
import argparse
import logging
import os
import threading
import webbrowser

logger = logging.getLogger("mcp_editor.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-editor",
        description="Edit MCP server configuration in your browser.",
    )
    parser.add_argument("--host", default=None, help="Interface to bind (default 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default 3456)")
    parser.add_argument(
        "--config",
        default=None,
        help="Edit this config file instead of the auto-detected one",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the GUI in a browser",
    )
    return parser


def apply_args(args: argparse.Namespace, environ=None) -> None:
    """Export CLI options as the environment variables Settings reads."""
    environ = os.environ if environ is None else environ
    if args.host:
        environ["MCP_EDITOR_HOST"] = args.host
    if args.port:
        environ["MCP_EDITOR_PORT"] = str(args.port)
    if args.config:
        environ["MCP_EDITOR_CONFIG_PATH"] = args.config
    if args.no_browser:
        environ["MCP_EDITOR_OPEN_BROWSER"] = "false"


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    # Settings are built from the environment when mcp_editor.config is imported
    apply_args(args)

    from mcp_editor.app import run
    from mcp_editor.config import settings

    if settings.open_browser:
        url = f"http://{settings.host}:{settings.port}/"
        threading.Timer(1.0, webbrowser.open, args=[url]).start()
        logger.info("Opening %s", url)

    run(settings.host, settings.port)


if __name__ == "__main__":
    main()
