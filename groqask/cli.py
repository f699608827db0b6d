import argparse
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

from .config import ClientSettings, resolve_config_path
from .credentials import load_api_key
from .errors import GroqAskError
from .llm.client import GroqClient
from .llm.extract import extract_result
from .llm.request import build_request
from .llm.types import ChatResult

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="groqask", description="Chat Completion CLI")
    parser.add_argument("-p", "--prompt", required=True, help="The prompt to send to the AI model")
    parser.add_argument("-u", "--usage", action="store_true", help="Show usage information")
    parser.add_argument("-c", "--config", help="JSON file holding GROQ_API_KEY (default: config.json)")
    parser.add_argument("-m", "--model", help="Override the model identifier")
    parser.add_argument("-t", "--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument(
        "--log-level",
        default=_default_log_level(),
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (env: GROQASK_LOG_LEVEL)",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _default_log_level() -> str:
    level = os.environ.get("GROQASK_LOG_LEVEL", "").strip().upper()
    return level if level in LOG_LEVELS else "WARNING"


def setup_logging(level: str, console: Console) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])
    err_console = Console(stderr=True)
    setup_logging(args.log_level, err_console)
    return run(args, Console(), err_console)


def run(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    console.print(f"Q: {args.prompt}", markup=False, highlight=False, emoji=False, soft_wrap=True)
    try:
        settings = ClientSettings.from_env().with_overrides(model=args.model, timeout=args.timeout)
        api_key = load_api_key(resolve_config_path(args.config))
        req = build_request(args.prompt, settings)
        document = GroqClient.from_settings(api_key, settings).send(req)
    except GroqAskError as exc:
        logger.debug("request failed", exc_info=True)
        err_console.print(f"Error: {exc}", style="red", markup=False, highlight=False, emoji=False, soft_wrap=True)
        return 1

    render_result(console, extract_result(document, show_usage=args.usage))
    return 0


def render_result(console: Console, result: ChatResult) -> None:
    if result.answer is not None:
        console.print(f"A: {result.answer}", markup=False, highlight=False, emoji=False, soft_wrap=True)
    if result.usage is not None:
        console.print("Usage:", highlight=False)
        console.print_json(data=result.usage)


if __name__ == "__main__":
    sys.exit(main())
