"""Blocking console front end."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from manor import config
from manor.exploration.controller import RoomVisit
from manor.judgment.accusation import AccusationVerdict, parse_accusation
from manor.presentation import text
from manor.session import GameSession, open_session

ReadLine = Callable[[str], Optional[str]]
Write = Callable[[str], None]


def _stdin_reader(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _read_accusation(session: GameSession, read_line: ReadLine, write: Write) -> str:
    prompt = text.accusation_prompt(session.suspects())
    while True:
        line = read_line(prompt)
        if line is None:
            return config.DEFAULT_ACCUSED
        accused = parse_accusation(line)
        if accused is not None:
            return accused
        write(text.ACCUSATION_RETRY)


def play(read_line: ReadLine, write: Write, session: GameSession | None = None) -> AccusationVerdict:
    session = session or open_session()
    try:
        for line in text.banner_lines(session.case.title, session.case.intro):
            write(line)

        def report(event) -> None:
            lines = text.visit_lines(event) if isinstance(event, RoomVisit) else text.step_lines(event)
            for line in lines:
                write(line)

        session.controller.run(lambda: read_line(text.ACTION_PROMPT), report)

        for line in text.evidence_lines(session.evidence()):
            write(line)
        verdict = session.judge(_read_accusation(session, read_line, write))
        for line in text.verdict_lines(verdict):
            write(line)
        return verdict
    finally:
        session.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Explore the mansion and accuse the culprit.")
    parser.add_argument("--verbose", action="store_true", help="Log clue lookups and teardown.")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        play(_stdin_reader, print)
    except MemoryError:
        print("Fatal: out of memory", file=sys.stderr)
        return 1
    print("\nCase file closed. Program finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
