from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Input, RichLog, Static

from manor.judgment.accusation import AccusationVerdict, parse_accusation
from manor.presentation import text
from manor.session import GameSession, open_session


class MansionApp(App):
    TITLE = ""
    SUB_TITLE = ""
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #log {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #menu {
        height: auto;
        padding: 1 1;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(self, session: GameSession | None = None) -> None:
        super().__init__()
        self.session = session or open_session()
        self.stage = "explore"
        self.verdict: AccusationVerdict | None = None
        self.menu_text = text.ACTION_PROMPT
        self.transcript: list[str] = []

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(self.session.case.title, id="header")
            yield RichLog(id="log", wrap=True)
            yield Static(self.menu_text, id="menu")
            yield Input(placeholder="e / d / s", id="command")

    def on_mount(self) -> None:
        self._write_lines(text.banner_lines(self.session.case.title, self.session.case.intro))
        self._write_lines(text.visit_lines(self.session.controller.start()))
        self._refresh_header()
        self.query_one("#command", Input).focus()

    def on_unmount(self) -> None:
        self.session.close()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        event.input.value = ""
        if self.stage == "explore":
            self._handle_choice(value)
        elif self.stage == "accuse":
            self._handle_accusation(value)
        elif value.lower() == "q":
            self.exit(self.verdict)

    def _handle_choice(self, value: str) -> None:
        controller = self.session.controller
        self._write_lines(text.step_lines(controller.choose(value)))
        self._refresh_header()
        if controller.finished:
            self._write_lines(text.evidence_lines(self.session.evidence()))
            self.stage = "accuse"
            self._set_menu(text.accusation_prompt(self.session.suspects()))

    def _handle_accusation(self, value: str) -> None:
        accused = parse_accusation(value)
        if accused is None:
            self._write(text.ACCUSATION_RETRY)
            return
        self.verdict = self.session.judge(accused)
        self._write_lines(text.verdict_lines(self.verdict))
        self.stage = "done"
        self._set_menu("Type 'q' to close the case file.")

    def _refresh_header(self) -> None:
        room = self.session.controller.current
        location = room.name if room is not None else "-"
        self.query_one("#header", Static).update(
            f"{self.session.case.title}  Room: {location}  Clues: {len(self.session.ledger)}"
        )

    def _set_menu(self, message: str) -> None:
        self.menu_text = message
        self.query_one("#menu", Static).update(message)

    def _write(self, message: str) -> None:
        self.transcript.append(message)
        self.query_one("#log", RichLog).write(message)

    def _write_lines(self, lines: list[str]) -> None:
        for line in lines:
            self._write(line)

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()
