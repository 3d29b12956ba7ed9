"""Command line entrypoint: look at the board, play a local game in the terminal, or run the HTTP server."""

import argparse
from typing import Callable, Optional, Sequence, TextIO

import uvicorn

from src.api.app import create_app
from src.chess.game import new_game
from src.chess.square import Square
from src.core.config import get_settings
from src.core.exceptions import InvalidRequestError
from src.ui.selection import Selection
from src.ui.text_board import render_board, status_line

QUIT_COMMANDS = {"quit", "exit", "q"}


def cmd_show(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    game = new_game()
    print(render_board(game.board), file=out)
    print(status_line(game), file=out)
    return 0


def cmd_play(
    args: argparse.Namespace,
    read: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    """
    Every square name you type counts as a click on that square.
    Type 'e2' to pick up the pawn, then 'e4' to put it down ('e2 e4' on one line works too).
    """
    game = new_game()
    selection = Selection()
    while True:
        print(render_board(game.board, selection), file=out)
        print(status_line(game), file=out)
        try:
            line = read("> ").strip().lower()
        except EOFError:
            return 0

        for token in line.split():
            if token in QUIT_COMMANDS:
                return 0
            try:
                square = Square.from_algebraic(token)
            except InvalidRequestError as err:
                print(err, file=out)
                break
            selection.click(game, square)


def cmd_serve(args: argparse.Namespace) -> int:
    uvicorn.run(create_app(), host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="simple-chess")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="print the starting position")
    show.set_defaults(func=cmd_show)

    play = sub.add_parser("play", help="play a two-player game in the terminal")
    play.set_defaults(func=cmd_play)

    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
