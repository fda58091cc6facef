"""
    Interactive shell — reads playground commands line by line.

    Replay time only moves when the user asks for it (``tick``,
    ``next``, ``seek``), so the shell runs the playground on a
    ``ManualTickScheduler``.
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from pathviz_core.services.tick_scheduler import ManualTickScheduler

from ..config import PlaygroundConfig
from ..core import Playground
from .command_processor import CommandProcessor

logger = logging.getLogger(__name__)

PROMPT = "pathviz> "
EXIT_WORDS = ("exit", "quit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathviz",
        description="Build a weighted graph and replay Dijkstra's search step by step.",
    )
    parser.add_argument("--interval", type=int, default=500,
                        help="Milliseconds per replay step (default: 500)")
    parser.add_argument("--undirected", action="store_true",
                        help="Start with an undirected graph")
    parser.add_argument("--no-autoplay", action="store_true",
                        help="Do not start the replay automatically after 'run'")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: WARNING)")
    return parser


def run_shell(playground: Playground, processor: CommandProcessor,
              stdin: TextIO, stdout: TextIO, interactive: bool = True) -> int:
    """
    Feed lines from ``stdin`` to the processor until EOF or exit.

    Returns:
        Number of commands that failed.
    """
    failures = 0
    while True:
        if interactive:
            stdout.write(PROMPT)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        text = line.strip()
        if text.lower() in EXIT_WORDS:
            break
        if not text or text.startswith("#"):
            continue

        result = processor.process(text, playground)
        if not result.success:
            failures += 1
        stdout.write(result.message + "\n")
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = PlaygroundConfig(
        tick_interval_ms=args.interval,
        autoplay=not args.no_autoplay,
        directed=not args.undirected,
    )
    playground = Playground(config, scheduler=ManualTickScheduler())
    processor = CommandProcessor(max_undo=config.max_undo_depth)

    interactive = sys.stdin.isatty()
    if interactive:
        print("Type 'help' for commands, 'exit' to quit.")
    failures = run_shell(playground, processor, sys.stdin, sys.stdout, interactive)
    logger.info("Shell finished with %d failed command(s).", failures)
    return 0 if interactive or failures == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
