import asyncio

from textual.widgets import Input

from manor.presentation.text import ACCUSATION_RETRY
from manor.ui.app import MansionApp


def _play(*entries):
    app = MansionApp()

    async def drive():
        async with app.run_test() as pilot:
            await pilot.pause()
            for entry in entries:
                app.query_one("#command", Input).value = entry
                await pilot.press("enter")
                await pilot.pause()

    asyncio.run(drive())
    return app


def test_exploration_moves_through_rooms():
    app = _play("e", "d")
    assert app.session.controller.path == ["Central Hall", "Library", "Kitchen"]
    assert app.stage == "explore"
    assert app.menu_text.startswith("Action (e) go LEFT")


def test_invalid_and_blank_entries_keep_exploring():
    app = _play("x", "", "e")
    assert app.session.controller.path == ["Central Hall", "Library"]
    assert app.stage == "explore"
    assert app.transcript.count("[ERROR] Invalid action.") == 2


def test_blank_accusation_is_resolicited():
    app = _play("s", "", "Cook Marie")
    assert app.transcript.count(ACCUSATION_RETRY) == 1
    assert app.stage == "done"
    assert app.verdict.accused == "Cook Marie"


def test_stop_switches_to_accusation():
    app = _play("s")
    assert app.stage == "accuse"
    assert app.menu_text.startswith("Who do you accuse?")


def test_accusation_produces_verdict():
    app = _play("d", "s", "   ", "Lady Agatha")
    assert app.stage == "done"
    assert app.verdict.accused == "Lady Agatha"
    assert app.verdict.evidence_count == 2
    assert app.verdict.is_successful
