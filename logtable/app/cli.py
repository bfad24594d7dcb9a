from __future__ import annotations

"""Terminal front end for the log table trainer.

Renders session events as text, forwards typed answers to the controller and
owns the pause before each retry round.
"""

import argparse
import sys
import time
from typing import Any, Callable, Dict, Optional

from .. import __version__
from ..config.config import (
    ALLOWED_MODES,
    QuizSettings,
    describe_settings,
    load_config,
    settings_from_config,
    validate_config,
)
from ..drills.log_drill import Direction, Mode
from ..drills.validator import MIN_SIGNIFICANT
from ..stats.stats import format_summary, plural
from ..util.randomness import seed_if_needed
from .events import EventBus
from .presets import get_preset, list_presets
from .session_manager import SessionController, SessionState


RESTART_COMMAND = ":r"
QUIT_COMMAND = ":q"
PLAY_AGAIN_PROMPT = "[y/N] "


def query_line(prompt_text: str, direction: Direction) -> str:
    """Left-hand side of a table equation, ready for the answer to follow."""
    if direction is Direction.LOG_TO_ARGUMENT:
        return f"{prompt_text} = log10 of "
    return f"log10({prompt_text}) = "


def how_to_play(mode: Mode) -> str:
    lines = [
        f"Try to guess the logarithm with at least {MIN_SIGNIFICANT} significant digits of accuracy.",
        "After typing your answer, press enter to continue.",
        "If you make a mistake, the correct answer will be shown.",
        "After answering all questions, you will retry the ones you got wrong.",
        f"Type {RESTART_COMMAND} to restart or {QUIT_COMMAND} to quit.",
    ]
    if mode is Mode.SHUFFLED:
        lines.append("Shuffled mode: questions appear in random order.")
    elif mode is Mode.REVERSE:
        lines.append("Reverse mode: guess what number the logarithm is of.")
    return "\n".join(lines)


def _build_ui(inform: Callable[[str], None]) -> Dict[str, Callable[[Any], None]]:
    """Event handlers keyed by event kind."""
    # direction of the query on screen, for the history lines
    shown = {"direction": Direction.ARGUMENT_TO_LOG}

    def session_started(ev: Any) -> None:
        inform(f"{plural(ev.total_count, 'question')}.")

    def query_presented(ev: Any) -> None:
        shown["direction"] = ev.expected_direction
        header = "Questions remaining" if ev.round == 1 else "Retrying questions"
        inform(f"{header}: {ev.remaining_count}")

    def answer_accepted(ev: Any) -> None:
        inform(f"  ok  {query_line(ev.prompt_text, shown['direction'])}{ev.verbatim_input.strip()}")

    def answer_rejected(ev: Any) -> None:
        line = query_line(ev.prompt_text, shown["direction"])
        inform(f"  --  {line}{ev.rounded_correct_answer}  (correct answer)")

    def retry_announced(ev: Any) -> None:
        inform(f"{ev.remaining_count} incorrect, retrying...")

    def session_finished(ev: Any) -> None:
        inform(format_summary(ev.mistake_count, ev.total_count))
        inform("All questions answered!")

    return {
        "session_started": session_started,
        "query_presented": query_presented,
        "answer_accepted": answer_accepted,
        "answer_rejected": answer_rejected,
        "retry_announced": retry_announced,
        "session_finished": session_finished,
    }


def confirm_restart(
    settings: QuizSettings,
    ask: Callable[[str], str],
    inform: Callable[[str], None],
) -> bool:
    """Ask whether to play again with ``settings``. EOF counts as no."""
    inform("Play again with the following settings?")
    inform(describe_settings(settings))
    try:
        reply = ask(PLAY_AGAIN_PROMPT)
    except EOFError:
        return False
    return reply.strip().lower() in ("y", "yes")


def run_session(
    settings: QuizSettings,
    *,
    ask: Optional[Callable[[str], str]] = None,
    inform: Optional[Callable[[str], None]] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> int:
    """Play sessions until the player declines to play again.

    Typing ``:r`` during a session offers a restart, ``:q`` quits. Returns a
    process exit status: 0 after a finished session, 1 when the player quits
    or input ends mid-session.

    ``ask``, ``inform`` and ``sleep`` default to ``input``, ``print`` and
    ``time.sleep``.
    """
    ask = ask or input
    inform = inform or print
    sleep = sleep or time.sleep
    bus = EventBus()
    for kind, handler in _build_ui(inform).items():
        bus.subscribe(kind, handler)
    controller = SessionController(bus)
    controller.start(settings.range_min, settings.range_max, settings.mode)

    while True:
        if controller.state is SessionState.FINISHED:
            if not confirm_restart(settings, ask, inform):
                return 0
            controller.start(settings.range_min, settings.range_max, settings.mode)
            continue
        if controller.state is SessionState.RETRY_PAUSE:
            sleep(settings.retry_delay_ms / 1000.0)
            controller.resume()
            continue
        query = controller.current_query
        assert query is not None
        try:
            text = ask(query_line(query.prompt_text, query.direction))
        except EOFError:
            inform("\nSession ended early.")
            return 1

        command = text.strip().lower()
        if command == QUIT_COMMAND:
            inform("Session ended early.")
            return 1
        if command == RESTART_COMMAND:
            # declining goes back to the same question
            if confirm_restart(settings, ask, inform):
                controller.start(settings.range_min, settings.range_max, settings.mode)
            continue
        controller.submit_answer(text)


def _apply_overrides(cfg: Dict[str, Any], args: argparse.Namespace) -> None:
    quiz = cfg.setdefault("quiz", {})
    if args.preset:
        quiz.update(get_preset(args.preset))
    if args.min is not None:
        quiz["range_min"] = args.min
    if args.max is not None:
        quiz["range_max"] = args.max
    if args.mode is not None:
        quiz["mode"] = args.mode
    if args.retry_delay_ms is not None:
        quiz["retry_delay_ms"] = args.retry_delay_ms


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="logtable")
    p.add_argument("--version", action="version", version=f"logtable {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list-presets")

    sc = sub.add_parser("show-config")
    sc.add_argument("--config", default=None, help="Path to YAML config")

    pp = sub.add_parser("play")
    pp.add_argument("--config", default=None, help="Path to YAML config")
    pp.add_argument("--preset", default=None)
    pp.add_argument("--min", default=None, help="First argument, e.g. 1.01")
    pp.add_argument("--max", default=None, help="Last argument, e.g. 2.00")
    pp.add_argument("--mode", default=None, choices=sorted(ALLOWED_MODES))
    pp.add_argument("--retry-delay-ms", dest="retry_delay_ms", type=int, default=None)
    pp.add_argument("--explain", action="store_true")
    pp.add_argument("--no-how-to-play", dest="how_to_play", action="store_false")

    args = p.parse_args(argv)

    if args.cmd == "list-presets":
        for name, params in list_presets().items():
            print(f"{name}: {params['range_min']} to {params['range_max']}, {params['mode']} mode")
        return 0

    if args.cmd == "show-config":
        cfg = validate_config(load_config(args.config))
        try:
            settings = settings_from_config(cfg)
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2
        print(describe_settings(settings))
        return 0

    if args.cmd == "play":
        cfg = load_config(args.config)
        try:
            _apply_overrides(cfg, args)
        except KeyError as e:
            print(f"ERROR: {e.args[0]}", file=sys.stderr)
            return 2
        cfg = validate_config(cfg)
        try:
            settings = settings_from_config(cfg)
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2

        if args.explain or cfg["ui"].get("explain", False):
            from .explain import enable as explain_enable
            explain_enable(True)
        seed_if_needed()

        print(f"Settings: {describe_settings(settings)}")
        if args.how_to_play and cfg["ui"].get("show_how_to_play", True):
            print(how_to_play(settings.mode))
        return run_session(settings)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
