"""
Cardfolio: Card Form Controller

Owns everything the card screen can change:
- Field values (name, hobby, age), with age restricted to digits
- Edit/lock mode
- Hint banner visibility and its single auto-hide timer

Pure logic with no UI imports. The timer is created through an injected
scheduler so tests can drive time deterministically.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Protocol

from .constants import HINT_BANNER_SECONDS, MISSING_PREFIX, SAVED_MESSAGE

logger = logging.getLogger(__name__)


# ============================================================================
# State Types
# ============================================================================

class Field(Enum):
    """The three card fields, in the order missing fields are reported."""
    NAME = "Name"
    HOBBY = "Hobby"
    AGE = "Age"

    @property
    def label(self) -> str:
        return self.value


class Mode(Enum):
    """Whether the card can be changed"""
    EDITING = 1  # Fields accept input
    LOCKED = 2   # Display only


@dataclass
class FormFields:
    """Current text of each card field. Age only ever holds digits."""
    name: str = ""
    hobby: str = ""
    age: str = ""

    def get(self, which: Field) -> str:
        return getattr(self, which.name.lower())

    def set(self, which: Field, value: str) -> None:
        setattr(self, which.name.lower(), value)

    def missing(self) -> list[Field]:
        """Blank fields (empty or whitespace), in Name, Hobby, Age order."""
        return [f for f in Field if not self.get(f).strip()]


@dataclass
class HintBannerState:
    visible: bool = False


@dataclass(frozen=True)
class SaveResult:
    """
    Outcome of a save request.

    accepted is True when every field was filled in. Otherwise
    missing_fields lists the blank ones.
    """
    accepted: bool
    missing_fields: tuple[Field, ...] = field(default_factory=tuple)

    @classmethod
    def rejected(cls, missing: list[Field]) -> "SaveResult":
        return cls(accepted=False, missing_fields=tuple(missing))

    @property
    def missing_labels(self) -> list[str]:
        return [f.label for f in self.missing_fields]


ACCEPTED = SaveResult(accepted=True)


def notification_for(result: SaveResult) -> str:
    """The toast text for a save outcome."""
    if result.accepted:
        return SAVED_MESSAGE
    return MISSING_PREFIX + ", ".join(result.missing_labels)


def is_digits(value: str) -> bool:
    """True if every character is a decimal digit. Empty counts."""
    return all(c in "0123456789" for c in value)


# ============================================================================
# Scheduling
# ============================================================================

class TimerHandle(Protocol):
    """Anything with stop(), e.g. a textual.timer.Timer"""

    def stop(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


# ============================================================================
# Controller
# ============================================================================

class CardFormController:
    """
    State machine behind the card screen.

    Usage:
        form = CardFormController(schedule=widget.set_timer)
        form.on_change(widget.refresh_from_form)
        form.set_field(Field.NAME, "Ada")
        result = form.request_save()   # SaveResult
        form.close()                   # cancels the banner timer

    The hint banner is shown whenever the card goes from editing to locked
    (by save or by toggle) with all three fields filled in. It hides itself
    after hint_seconds. If it is triggered again while still showing, the
    pending timer is cancelled and a fresh full-length one starts.

    Args:
        schedule: Creates a one-shot timer: schedule(delay, callback) -> handle
        hint_seconds: How long the banner stays visible
    """

    def __init__(
        self,
        schedule: Scheduler,
        hint_seconds: float = HINT_BANNER_SECONDS,
    ):
        self._schedule = schedule
        self.hint_seconds = hint_seconds

        self._fields = FormFields()
        self._mode = Mode.EDITING
        self._banner = HintBannerState()
        self._banner_timer: Optional[TimerHandle] = None
        self._banner_generation = 0
        self._closed = False

        self._listeners: list[Callable[[], None]] = []

    # -- read-only view for the rendering layer --

    @property
    def fields(self) -> FormFields:
        """A copy of the current field values"""
        return FormFields(self._fields.name, self._fields.hobby, self._fields.age)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def is_editing(self) -> bool:
        return self._mode == Mode.EDITING

    @property
    def banner_visible(self) -> bool:
        return self._banner.visible

    @property
    def is_complete(self) -> bool:
        """True when no field is blank"""
        return not self._fields.missing()

    @property
    def closed(self) -> bool:
        return self._closed

    def on_change(self, callback: Callable[[], None]) -> None:
        """Register callback for any change to fields, mode or banner."""
        self._listeners.append(callback)

    def _changed(self) -> None:
        for callback in list(self._listeners):
            callback()

    # -- intents --

    def set_field(self, which: Field, value: str) -> None:
        """
        Update one field. Never raises.

        Ignored while locked. For age, a value containing any non-digit is
        dropped and the previous value kept.
        """
        if self._closed or self._mode == Mode.LOCKED:
            return

        if which == Field.AGE and not is_digits(value):
            logger.debug("Rejected non-digit age input %r", value)
            return

        if self._fields.get(which) == value:
            return

        self._fields.set(which, value)
        self._changed()

    def toggle_mode(self) -> None:
        """Flip between editing and locked, no validation (status chip)."""
        if self._closed:
            return
        new_mode = Mode.LOCKED if self._mode == Mode.EDITING else Mode.EDITING
        self._set_mode(new_mode)
        self._changed()

    def request_save(self) -> SaveResult:
        """
        Validate and lock.

        Returns a rejected result listing blank fields (mode unchanged), or
        ACCEPTED after locking the card. A closed controller never accepts:
        it returns a rejected result listing whatever is blank, possibly
        nothing.
        """
        missing = self._fields.missing()
        if self._closed:
            return SaveResult.rejected(missing)

        if missing:
            logger.info("Save rejected, missing: %s", ", ".join(f.label for f in missing))
            return SaveResult.rejected(missing)

        logger.info("Save accepted")
        if self._mode == Mode.EDITING:
            self._set_mode(Mode.LOCKED)
            self._changed()
        return ACCEPTED

    def request_edit(self) -> None:
        """Unlock the card. Does nothing if already editing."""
        if self._closed or self._mode == Mode.EDITING:
            return
        self._set_mode(Mode.EDITING)
        self._changed()

    def close(self) -> None:
        """Tear down: cancel the banner timer and ignore further intents."""
        if self._closed:
            return
        self._closed = True
        self._cancel_banner_timer()
        self._listeners.clear()

    # -- internals --

    def _set_mode(self, new_mode: Mode) -> None:
        old_mode = self._mode
        self._mode = new_mode
        logger.debug("Mode %s -> %s", old_mode.name, new_mode.name)

        if old_mode == Mode.EDITING and new_mode == Mode.LOCKED and self.is_complete:
            self._show_banner()

    def _show_banner(self) -> None:
        # Restart policy: a new trigger replaces any pending timer
        self._cancel_banner_timer()
        self._banner.visible = True
        self._banner_generation += 1
        generation = self._banner_generation
        self._banner_timer = self._schedule(
            self.hint_seconds, lambda: self._hide_banner(generation)
        )

    def _hide_banner(self, generation: int) -> None:
        """Timer callback. Only ever touches banner visibility."""
        # A replaced timer that fires late must not hide the new banner
        if self._closed or generation != self._banner_generation:
            return
        self._banner_timer = None
        if self._banner.visible:
            self._banner.visible = False
            self._changed()

    def _cancel_banner_timer(self) -> None:
        if self._banner_timer is not None:
            self._banner_timer.stop()
            self._banner_timer = None
