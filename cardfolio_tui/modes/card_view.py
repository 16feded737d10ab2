"""
Card View - The business card screen

Renders whatever the CardFormController reports and forwards user intents
back to it:
- Header: display name, hobby and the Editing/Locked status chip
- Name, Hobby and Age inputs (disabled while locked)
- Edit and Save buttons
- Hint banner after a successful lock

Colors come from the CardTheme passed in by the app.
"""

from rich.markup import escape
from textual.app import ComposeResult
from textual.color import Color
from textual.containers import Container, Horizontal, Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Button, Input, Static

from ..card_form import CardFormController, Field, SaveResult
from ..constants import (
    AGE_WARNING, APP_TITLE, EDITING_STATUS, HINT_BANNER_SECONDS,
    HINT_BANNER_TEXT, HOBBY_PLACEHOLDER, ICON_CHECK, ICON_EDIT, ICON_HEART,
    ICON_INFO, ICON_LOCK, ICON_PERSON, LOCKED_STATUS, NAME_PLACEHOLDER,
)
from ..theme import CardTheme


# Input widget id for each field
INPUT_IDS = {
    Field.NAME: "name-input",
    Field.HOBBY: "hobby-input",
    Field.AGE: "age-input",
}
FIELD_FOR_INPUT = {input_id: f for f, input_id in INPUT_IDS.items()}

INPUT_ICONS = {
    Field.NAME: ICON_PERSON,
    Field.HOBBY: ICON_HEART,
    Field.AGE: ICON_INFO,
}


# =============================================================================
# MESSAGES
# =============================================================================

class CardSaved(Message):
    """Message sent after every save request, accepted or not."""

    def __init__(self, result: SaveResult) -> None:
        self.result = result
        super().__init__()


# =============================================================================
# WIDGETS
# =============================================================================

class CardTitle(Static):
    """App title above the card"""

    DEFAULT_CSS = """
    CardTitle {
        width: 100%;
        height: 1;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def render(self) -> str:
        return APP_TITLE


class CardIdentity(Static):
    """Name and hobby as shown on the card, with placeholders when blank"""

    DEFAULT_CSS = """
    CardIdentity {
        width: 1fr;
        height: 2;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.name_text = ""
        self.hobby_text = ""

    def set_identity(self, name: str, hobby: str) -> None:
        self.name_text = name
        self.hobby_text = hobby
        self.refresh()

    def render(self) -> str:
        name = self.name_text if self.name_text.strip() else NAME_PLACEHOLDER
        hobby = self.hobby_text if self.hobby_text.strip() else HOBBY_PLACEHOLDER
        return f"[bold]{escape(name)}[/]\n[dim]{escape(hobby)}[/]"


class StatusChip(Button):
    """Editing/Locked chip. Pressing it toggles the lock without validation."""

    DEFAULT_CSS = """
    StatusChip {
        width: auto;
        min-width: 14;
        height: 3;
    }
    """

    def set_editing(self, editing: bool) -> None:
        if editing:
            self.label = f"{ICON_EDIT} {EDITING_STATUS}"
        else:
            self.label = f"{ICON_LOCK} {LOCKED_STATUS}"


class HintBanner(Static):
    """Short-lived tip shown after the card locks"""

    DEFAULT_CSS = """
    HintBanner {
        width: 100%;
        height: 3;
        padding: 0 1;
        content-align: center middle;
        border: round $accent;
        color: $accent;
        display: none;
    }

    HintBanner.visible {
        display: block;
    }
    """

    def render(self) -> str:
        return f"{ICON_INFO}  {HINT_BANNER_TEXT}"


class CardView(Container):
    """
    The card screen.

    Holds the CardFormController for its lifetime. The banner timer runs on
    this widget's timers, and the controller is closed on unmount so a
    pending timer can never call back into a dead screen.
    """

    DEFAULT_CSS = """
    CardView {
        width: 100%;
        height: 100%;
        align: center middle;
    }

    #card-column {
        width: auto;
        height: auto;
    }

    #card {
        width: 64;
        height: auto;
        background: $surface;
        border: round $primary;
        padding: 0 1;
    }

    #card-header {
        width: 100%;
        height: 3;
        margin-bottom: 1;
    }

    #card-header CardIdentity {
        padding: 0 1;
    }

    #card-fields Input {
        width: 100%;
    }

    .field-label {
        width: 100%;
        height: 1;
        color: $text-muted;
    }

    #age-warning {
        width: 100%;
        height: 1;
        color: $warning;
    }

    #card-actions {
        width: 100%;
        height: 3;
        align: right middle;
        margin-top: 1;
    }

    #card-actions Button {
        margin-left: 1;
    }
    """

    def __init__(
        self,
        card_theme: CardTheme,
        hint_seconds: float = HINT_BANNER_SECONDS,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.card_theme = card_theme
        self.form = CardFormController(schedule=self.set_timer, hint_seconds=hint_seconds)
        self.form.on_change(self.refresh_from_form)

    def compose(self) -> ComposeResult:
        with Vertical(id="card-column"):
            yield CardTitle(id="card-title")
            with Vertical(id="card"):
                with Horizontal(id="card-header"):
                    yield CardIdentity(id="card-identity")
                    yield StatusChip(f"{ICON_EDIT} {EDITING_STATUS}", id="status-chip")
                with Vertical(id="card-fields"):
                    for f in Field:
                        yield Static(f"{INPUT_ICONS[f]}  {f.label}", classes="field-label")
                        yield Input(placeholder=f.label, id=INPUT_IDS[f])
                    yield Static(AGE_WARNING, id="age-warning")
                with Horizontal(id="card-actions"):
                    yield Button(f"{ICON_EDIT} Edit", id="edit-button", disabled=True)
                    yield Button(f"{ICON_CHECK} Save", id="save-button", variant="primary")
                yield HintBanner(id="hint-banner")

    def on_mount(self) -> None:
        self.apply_theme(self.card_theme)
        self.refresh_from_form()
        try:
            self.query_one(f"#{INPUT_IDS[Field.NAME]}", Input).focus()
        except NoMatches:
            pass

    def on_unmount(self) -> None:
        self.form.close()

    # -- theme --

    def apply_theme(self, card_theme: CardTheme) -> None:
        """Apply the backdrop colors of card_theme"""
        self.card_theme = card_theme
        self.styles.background = Color.parse(card_theme.gradient_top)
        try:
            title = self.query_one("#card-title", CardTitle)
            title.styles.color = Color.parse(card_theme.textual_theme.primary)
            card = self.query_one("#card")
            card.styles.border = ("round", Color.parse(card_theme.gradient_bottom))
        except NoMatches:
            pass

    # -- intents --

    def save(self) -> SaveResult:
        """Validate and lock, then tell the app so it can show a toast"""
        result = self.form.request_save()
        self.post_message(CardSaved(result))
        return result

    def edit(self) -> None:
        self.form.request_edit()

    def toggle_lock(self) -> None:
        self.form.toggle_mode()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle card buttons"""
        event.stop()
        if event.button.id == "status-chip":
            self.toggle_lock()
        elif event.button.id == "edit-button":
            self.edit()
        elif event.button.id == "save-button":
            self.save()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Forward typing to the controller, then show what it kept"""
        which = FIELD_FOR_INPUT.get(event.input.id)
        if which is None:
            return
        event.stop()
        self.form.set_field(which, event.value)

        # Rejected input (non-digit age, or typing while locked) is undone
        kept = self.form.fields.get(which)
        if event.value != kept:
            event.input.value = kept

    # -- rendering --

    def refresh_from_form(self) -> None:
        """Sync every widget to the controller's current state"""
        if not self.is_mounted:
            return

        fields = self.form.fields
        editing = self.form.is_editing
        try:
            self.query_one("#card-identity", CardIdentity).set_identity(fields.name, fields.hobby)
            self.query_one("#status-chip", StatusChip).set_editing(editing)

            for f, input_id in INPUT_IDS.items():
                widget = self.query_one(f"#{input_id}", Input)
                if widget.value != fields.get(f):
                    widget.value = fields.get(f)
                widget.disabled = not editing

            self.query_one("#age-warning").display = editing
            self.query_one("#edit-button", Button).disabled = editing
            self.query_one("#save-button", Button).disabled = not editing
            self.query_one("#hint-banner", HintBanner).set_class(
                self.form.banner_visible, "visible"
            )
        except NoMatches:
            pass
