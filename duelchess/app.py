"""Entry points: a two-player game at one board, or a game between two processes."""

from __future__ import annotations

import argparse
import os
import queue
import signal
import sys
import threading
import time
from typing import Optional, Sequence

import pygame

from .board import Board, Square
from .protocol import ONE_SIGNAL, ZERO_SIGNAL, MoveDecoder, SignalLink
from .render import WINDOW_SIZE, BoardView, Images, load_images
from .selection import ClickOutcome, InvalidRemoteMove, Selector, Side, mouse_to_square

WINDOW_TITLE = "game"
HANDSHAKE_DELAY = 1.0
FRAME_RATE = 60
LEFT_BUTTON = 1

_LINK_SIGNALS = {ONE_SIGNAL, ZERO_SIGNAL}


def _pid(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid pid: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"pid must be positive, got {value}")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line into a mode ('local', 'server' or 'client'), a peer pid and an assets directory."""
    parser = argparse.ArgumentParser(
        prog="duelchess",
        description="Play chess at one board, or between two processes on this machine.",
    )
    parser.add_argument(
        "--assets",
        default=".",
        help="directory that holds the assets/ folder (default: current directory)",
    )
    parser.set_defaults(mode="local", peer_pid=None)
    modes = parser.add_subparsers(dest="mode")
    modes.add_parser("local", help="both players at this window")
    modes.add_parser("server", help="play white and wait for a client")
    client = modes.add_parser("client", help="play black against a waiting server")
    client.add_argument("peer_pid", type=_pid, help="process id the server printed")
    args = parser.parse_args(None if argv is None else list(argv))
    if args.mode is None:
        args.mode = "local"
    return args


def _open_window() -> pygame.Surface:
    pygame.init()
    surface = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
    pygame.display.set_caption(WINDOW_TITLE)
    return surface


def _close() -> int:
    print("Closing Application!")
    return 1


def _require_sigwaitinfo() -> None:
    if not hasattr(signal, "sigwaitinfo") or not hasattr(signal, "pthread_sigmask"):
        raise RuntimeError("playing between processes needs sigwaitinfo, which this platform lacks")


def _block_link_signals() -> None:
    """Hold link signals pending so they are collected with sigwaitinfo, never lost to a handler."""
    _require_sigwaitinfo()
    signal.pthread_sigmask(signal.SIG_BLOCK, _LINK_SIGNALS)


class _Receiver(threading.Thread):
    """Collects signalled bits in the background and queues each complete move."""

    def __init__(self) -> None:
        super().__init__(name="duelchess-receiver", daemon=True)
        self.moves: "queue.Queue[tuple[Square, Square]]" = queue.Queue()

    def run(self) -> None:
        decoder = MoveDecoder()
        while True:
            info = signal.sigwaitinfo(_LINK_SIGNALS)
            move = decoder.feed(info.si_signo == ONE_SIGNAL)
            if move is not None:
                self.moves.put(move)


def _show(view: BoardView, selector: Selector, outcome: ClickOutcome) -> None:
    if outcome.redraw:
        view.redraw(selector.board, selector.my_turn)
    for square, colour in outcome.highlights:
        view.highlight(square, int(colour))
    pygame.display.flip()


def _play(
    selector: Selector,
    view: BoardView,
    link: Optional[SignalLink] = None,
    receiver: Optional[_Receiver] = None,
) -> int:
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return _close()
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
                square = mouse_to_square(*event.pos, flipped=view.flipped)
                if square is None:
                    continue
                outcome = selector.click(square)
                if outcome.move is not None and link is not None:
                    link.send_move(*outcome.move)
                _show(view, selector, outcome)
        if receiver is not None:
            while True:
                try:
                    from_square, to_square = receiver.moves.get_nowait()
                except queue.Empty:
                    break
                selector.apply_remote_move(from_square, to_square)
                view.redraw(selector.board, selector.my_turn)
                pygame.display.flip()
        clock.tick(FRAME_RATE)


def _start_view(images: Images, flipped: bool, my_turn: bool) -> BoardView:
    view = BoardView(_open_window(), images, flipped=flipped)
    view.draw_board(my_turn)
    pygame.display.flip()
    return view


def run_local(assets_dir: str = ".") -> int:
    """Play both sides at one window until it is closed."""
    images = load_images(str(assets_dir))
    try:
        selector = Selector(Board.initial(), Side.LOCAL)
        view = _start_view(images, flipped=False, my_turn=True)
        view.draw_pieces(selector.board)
        pygame.display.flip()
        return _play(selector, view)
    finally:
        pygame.quit()


def run_server(assets_dir: str = ".") -> int:
    """Play white: print this process's id, wait for a client, then exchange moves."""
    images = load_images(str(assets_dir))
    _require_sigwaitinfo()
    print(f"PID: [{os.getpid()}]", flush=True)
    _block_link_signals()
    try:
        selector = Selector(Board.initial(), Side.SERVER)
        view = _start_view(images, flipped=False, my_turn=selector.my_turn)
        info = signal.sigwaitinfo(_LINK_SIGNALS)
        peer_pid = info.si_pid
        time.sleep(HANDSHAKE_DELAY)
        print("client connected!", flush=True)
        os.kill(peer_pid, ONE_SIGNAL)
        receiver = _Receiver()
        receiver.start()
        view.draw_pieces(selector.board)
        pygame.display.flip()
        return _play(selector, view, SignalLink(peer_pid), receiver)
    finally:
        pygame.quit()


def run_client(peer_pid: int, assets_dir: str = ".") -> int:
    """Play black against the server whose process id is *peer_pid*."""
    peer_pid = int(peer_pid)
    if peer_pid <= 0:
        raise ValueError(f"peer pid must be positive, got {peer_pid}")
    images = load_images(str(assets_dir))
    _block_link_signals()
    try:
        selector = Selector(Board.initial(), Side.CLIENT)
        view = _start_view(images, flipped=True, my_turn=selector.my_turn)
        os.kill(peer_pid, ONE_SIGNAL)
        signal.sigwaitinfo(_LINK_SIGNALS)
        print("connected to server!", flush=True)
        receiver = _Receiver()
        receiver.start()
        view.draw_pieces(selector.board)
        pygame.display.flip()
        return _play(selector, view, SignalLink(peer_pid), receiver)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game in the mode chosen on the command line and return the exit status."""
    args = parse_args(argv)
    try:
        if args.mode == "server":
            return run_server(args.assets)
        if args.mode == "client":
            return run_client(args.peer_pid, args.assets)
        return run_local(args.assets)
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1
    except InvalidRemoteMove:
        print("invalid move received!")
        return 1
    except (RuntimeError, ProcessLookupError, PermissionError) as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())