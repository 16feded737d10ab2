#!/usr/bin/env python3
"""Tests for the Cardfolio app - key bindings, inputs, toasts and theme.

Drives the real Textual app headless through App.run_test().

Run with: pytest tests/test_cardfolio_app.py -v
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from textual.widgets import Button, Input

from cardfolio_tui.card_form import Field, Mode
from cardfolio_tui.cardfolio_tui import CardfolioApp
from cardfolio_tui.modes.card_view import CardIdentity, HintBanner, StatusChip
from cardfolio_tui.theme import CARD_DARK, CARD_LIGHT


def run_app(scenario, hint_seconds: float = 3.0):
    """Run scenario(app, pilot, toasts) inside a headless app."""

    async def _run():
        app = CardfolioApp(card_theme=CARD_DARK, hint_seconds=hint_seconds)
        toasts = []
        app.notify = lambda message, **kwargs: toasts.append((message, kwargs))
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await scenario(app, pilot, toasts)

    asyncio.run(_run())


async def type_into(app, pilot, input_id: str, value: str) -> None:
    app.query_one(f"#{input_id}", Input).value = value
    await pilot.pause()
    await pilot.pause()


async def fill_card(app, pilot) -> None:
    await type_into(app, pilot, "name-input", "Ada")
    await type_into(app, pilot, "hobby-input", "Math")
    await type_into(app, pilot, "age-input", "30")


class TestStartup:

    def test_starts_editing(self):
        async def scenario(app, pilot, toasts):
            view = app.card_view
            assert view.form.mode == Mode.EDITING
            assert app.query_one("#save-button", Button).disabled is False
            assert app.query_one("#edit-button", Button).disabled is True
            assert not app.query_one("#hint-banner", HintBanner).has_class("visible")

        run_app(scenario)

    def test_placeholders_when_blank(self):
        async def scenario(app, pilot, toasts):
            identity = app.query_one("#card-identity", CardIdentity)
            rendered = str(identity.render())
            assert "Your Name" in rendered
            assert "Your Hobby" in rendered

        run_app(scenario)


class TestInputs:

    def test_typing_updates_controller(self):
        async def scenario(app, pilot, toasts):
            await type_into(app, pilot, "name-input", "Ada")
            assert app.card_view.form.fields.get(Field.NAME) == "Ada"
            identity = app.query_one("#card-identity", CardIdentity)
            assert identity.name_text == "Ada"

        run_app(scenario)

    def test_non_digit_age_is_undone(self):
        async def scenario(app, pilot, toasts):
            await type_into(app, pilot, "age-input", "3a0")
            assert app.card_view.form.fields.age == ""
            assert app.query_one("#age-input", Input).value == ""

            await type_into(app, pilot, "age-input", "30")
            assert app.card_view.form.fields.age == "30"

        run_app(scenario)


class TestSave:

    def test_empty_save_warns_and_stays_editing(self):
        async def scenario(app, pilot, toasts):
            await pilot.press("f2")
            await pilot.pause()
            assert app.card_view.form.mode == Mode.EDITING
            assert toasts[-1][0] == "Please enter: Name, Hobby, Age"
            assert toasts[-1][1].get("severity") == "warning"

        run_app(scenario)

    def test_full_save_locks_and_shows_banner(self):
        async def scenario(app, pilot, toasts):
            await fill_card(app, pilot)
            await pilot.press("f2")
            await pilot.pause()

            assert app.card_view.form.mode == Mode.LOCKED
            assert toasts[-1][0] == "Saved successfully!"
            assert app.query_one("#name-input", Input).disabled is True
            assert app.query_one("#save-button", Button).disabled is True
            assert app.query_one("#edit-button", Button).disabled is False
            assert app.query_one("#hint-banner", HintBanner).has_class("visible")
            assert app.query_one("#age-warning").display is False

        run_app(scenario)

    def test_banner_hides_after_delay(self):
        async def scenario(app, pilot, toasts):
            await fill_card(app, pilot)
            await pilot.press("f2")
            await pilot.pause()
            banner = app.query_one("#hint-banner", HintBanner)
            assert banner.has_class("visible")

            await pilot.pause(0.6)
            assert not banner.has_class("visible")
            assert app.card_view.form.mode == Mode.LOCKED

        run_app(scenario, hint_seconds=0.2)


class TestEditAndLock:

    def test_edit_unlocks_inputs(self):
        async def scenario(app, pilot, toasts):
            await fill_card(app, pilot)
            await pilot.press("f2")
            await pilot.press("f3")
            await pilot.pause()
            assert app.card_view.form.mode == Mode.EDITING
            assert app.query_one("#name-input", Input).disabled is False

        run_app(scenario)

    def test_status_chip_toggles_without_validation(self):
        async def scenario(app, pilot, toasts):
            await pilot.click("#status-chip")
            await pilot.pause()
            assert app.card_view.form.mode == Mode.LOCKED
            chip = app.query_one("#status-chip", StatusChip)
            assert "Locked" in str(chip.label)
            assert toasts == []

            await pilot.press("f4")
            await pilot.pause()
            assert app.card_view.form.mode == Mode.EDITING
            assert "Editing" in str(chip.label)

        run_app(scenario)


class TestTheme:

    def test_f12_toggles_theme(self):
        async def scenario(app, pilot, toasts):
            assert app.theme == CARD_DARK.name
            await pilot.press("f12")
            await pilot.pause()
            assert app.theme == CARD_LIGHT.name
            assert app.card_view.card_theme is CARD_LIGHT

        run_app(scenario)
