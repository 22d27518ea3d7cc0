"""Command-line launcher for Reverse Snake."""

from __future__ import annotations

import argparse
import logging
import sys

from reverse_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reverse-snake",
        description="Reverse Snake headless simulator and game server.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    common.add_argument("--board-size", type=int, default=None)
    common.add_argument("--seed", type=int, default=None)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", parents=[common],
        help="Run the engine headless and print the board.",
    )
    sim_p.add_argument("--ticks", type=int, default=20)
    sim_p.add_argument(
        "--keys", type=str, default="",
        help=(
            "Comma-separated keys, one per tick (e.g. 'ArrowDown,,ArrowLeft'). "
            "Empty entries send no key."
        ),
    )
    sim_p.add_argument(
        "--verbose", action="store_true",
        help="Print the board after every tick.",
    )

    # --- serve ---
    serve_p = sub.add_parser(
        "serve", help="Run the HTTP/WebSocket game server.",
    )
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {"board_size": "board_size", "seed": "seed"}
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    from reverse_snake.engine import GameEngine
    from reverse_snake.render import render_text

    engine = GameEngine(_load_config(args))
    keys = args.keys.split(",") if args.keys else []

    state = engine.get_state()
    for i in range(args.ticks):
        if i < len(keys) and keys[i].strip():
            engine.on_direction_key(keys[i].strip())
        state = engine.tick()
        if args.verbose:
            print(render_text(state), end="\n\n")  # noqa: T201
        if engine.game_over:
            break

    if not args.verbose:
        print(render_text(state))  # noqa: T201
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from reverse_snake.server.app import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``reverse-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "serve": _run_serve,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
