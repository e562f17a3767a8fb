import argparse
import asyncio
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

from loguru import logger
from prompt_toolkit import PromptSession
from rich.console import Console
from rich.panel import Panel

from sky.chat import Repl
from sky.config import Config, ConfigStore
from sky.errors import ConfigError
from sky.factory import chat_factory


def _version() -> str:
    try:
        return version("sky-chat")
    except PackageNotFoundError:
        return "unknown"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sky", description="An AI chat assistant powered by OpenAI."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {_version()}"
    )
    parser.add_argument(
        "-p",
        "--print",
        action="store_true",
        help="Write the conversation to a chat-with-sky-<timestamp> file",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logs")

    subparsers = parser.add_subparsers(dest="command")
    config_parser = subparsers.add_parser(
        "config", help="Set runtime configuration, most importantly the OpenAI API key"
    )
    config_parser.add_argument("-a", "--api-key", help="OpenAI API key")
    config_parser.add_argument(
        "--show", action="store_true", help="Print the current configuration"
    )
    return parser.parse_args(argv)


def configure(store: ConfigStore, console: Console, api_key: str | None, show: bool):
    if api_key is not None:
        try:
            config = store.load()
        except ConfigError as e:
            logger.warning(f"Replacing unreadable config: {e}")
            config = Config()
        store.store(config.model_copy(update={"api_key": api_key}))
    if show:
        console.print(store.load().model_dump_json(indent=2), markup=False)


async def run_chat(store: ConfigStore, console: Console, report: bool):
    chat = chat_factory(store.load(), report=report)
    try:
        await Repl(chat, console, PromptSession()).start()
    finally:
        await chat.close()


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    console = Console()
    store = ConfigStore()
    try:
        if args.command == "config":
            configure(store, console, args.api_key, args.show)
        else:
            asyncio.run(run_chat(store, console, args.print))
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        Console(stderr=True).print(Panel.fit(str(e), border_style="red"))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
