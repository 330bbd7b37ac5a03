# app/client/controller.py
"""
Publisher controller: picks a date, loads its assignment and publishes edits.

State lives in an explicit ``PublisherState`` that is passed to every call.
``render`` is pure: it turns a state (plus today's date and the current
time) into a ``PublisherView``. The async handlers mutate the state and
talk to the API; callers re-render afterwards.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Protocol, Tuple

import httpx

from app.client.api_client import AssignmentAPIError
from app.services.dates import add_months, format_date, parse_date, weekday_name

logger = logging.getLogger(__name__)

PILL_DAYS_BACK = 7
PILL_DAYS_FORWARD = 7
PICKER_MONTHS_AHEAD = 3
STATUS_DURATION = timedelta(seconds=3)
PUBLISHED_FLASH_DURATION = timedelta(seconds=2)


class AssignmentSource(Protocol):
    async def get_assignment(self, day: str) -> dict:
        ...

    async def update_assignment(self, day: str, content: str) -> dict:
        ...


@dataclass
class StatusMessage:
    text: str
    kind: str  # "success" or "error"
    expires_at: datetime

    def visible(self, now: datetime) -> bool:
        return now < self.expires_at


@dataclass
class PublisherState:
    selected_date: date
    input_text: str = ""
    saved_text: str = ""
    picker_open: bool = False
    picker_value: str = ""
    publishing: bool = False
    published_until: Optional[datetime] = None
    status: Optional[StatusMessage] = None


@dataclass(frozen=True)
class DatePill:
    date: str
    day: int
    weekday: str
    is_today: bool
    is_active: bool


@dataclass(frozen=True)
class PublisherView:
    title: str
    date_label: str
    selected_date: str
    pills: Tuple[DatePill, ...]
    picker_open: bool
    picker_value: str
    picker_min: str
    picker_max: str
    input_text: str
    submit_label: str
    submit_disabled: bool
    submit_success: bool
    unsaved_input: bool
    status: Optional[StatusMessage]


def initial_state(today: date) -> PublisherState:
    return PublisherState(selected_date=today)


def date_pills(selected: date, today: date) -> Tuple[DatePill, ...]:
    """The strip of days from a week before today to a week after."""
    pills = []
    for offset in range(-PILL_DAYS_BACK, PILL_DAYS_FORWARD + 1):
        day = today + timedelta(days=offset)
        pills.append(
            DatePill(
                date=format_date(day),
                day=day.day,
                weekday=weekday_name(day, "short"),
                is_today=day == today,
                is_active=day == selected,
            )
        )
    return tuple(pills)


def picker_bounds(today: date) -> Tuple[str, str]:
    return format_date(today), format_date(add_months(today, PICKER_MONTHS_AHEAD))


def render(state: PublisherState, today: date, now: datetime) -> PublisherView:
    selected = state.selected_date
    flashing = state.published_until is not None and now < state.published_until
    picker_min, picker_max = picker_bounds(today)

    if state.publishing:
        submit_label = "Publishing..."
    elif flashing:
        submit_label = "Published"
    else:
        submit_label = "Publish"

    status = state.status if state.status and state.status.visible(now) else None

    return PublisherView(
        title="Today's assignment" if selected == today else "Assignment",
        date_label=f"{weekday_name(selected, 'long')} {format_date(selected)}",
        selected_date=format_date(selected),
        pills=date_pills(selected, today),
        picker_open=state.picker_open,
        picker_value=state.picker_value or format_date(selected),
        picker_min=picker_min,
        picker_max=picker_max,
        input_text=state.input_text,
        submit_label=submit_label,
        submit_disabled=state.publishing or flashing,
        submit_success=flashing,
        unsaved_input=has_unsaved_input(state),
        status=status,
    )


def show_message(state: PublisherState, text: str, kind: str, now: datetime) -> None:
    state.status = StatusMessage(text=text, kind=kind, expires_at=now + STATUS_DURATION)


def has_unsaved_input(state: PublisherState) -> bool:
    """True when the editor holds text that differs from what was last loaded or published."""
    text = state.input_text.strip()
    return bool(text) and text != state.saved_text.strip()


# ---------------------------------------------------
# EVENT HANDLERS
# ---------------------------------------------------

async def load_assignment(state: PublisherState, api: AssignmentSource, now: datetime) -> None:
    """Fill the input with the stored content for the selected date."""
    try:
        result = await api.get_assignment(format_date(state.selected_date))
    except (AssignmentAPIError, httpx.HTTPError) as e:
        logger.error(f"Failed to load assignment: {e}")
        show_message(state, "Failed to load assignment, please retry", "error", now)
        state.input_text = ""
        state.saved_text = ""
        return

    data = result.get("data") if result.get("success") else None
    state.input_text = (data or {}).get("content") or ""
    state.saved_text = state.input_text


async def select_date(state: PublisherState, api: AssignmentSource, day: date, now: datetime) -> None:
    state.selected_date = day
    await load_assignment(state, api, now)


async def load_current_date(state: PublisherState, api: AssignmentSource, today: date, now: datetime) -> None:
    await select_date(state, api, today, now)


def open_picker(state: PublisherState) -> None:
    state.picker_open = True
    state.picker_value = format_date(state.selected_date)


def close_picker(state: PublisherState) -> None:
    state.picker_open = False


async def confirm_picker(state: PublisherState, api: AssignmentSource, value: str, now: datetime) -> None:
    """Jump to the picked date; anything unparseable just closes the picker."""
    picked = parse_date(value)
    if picked is not None:
        await select_date(state, api, picked, now)
    close_picker(state)


async def publish(state: PublisherState, api: AssignmentSource, now: datetime) -> bool:
    """
    PUT the trimmed input for the selected date.

    Returns True on success. The input is never cleared on failure, so an
    unsaved draft survives a failed request.
    """
    if state.publishing:
        return False

    content = state.input_text.strip()
    if not content:
        show_message(state, "Please enter the assignment content", "error", now)
        return False

    state.publishing = True
    try:
        await api.update_assignment(format_date(state.selected_date), content)
    except AssignmentAPIError as e:
        show_message(state, e.message or "Publish failed, please retry", "error", now)
        return False
    except httpx.HTTPError as e:
        logger.error(f"Publish failed: {e}")
        show_message(state, "Publish failed, please retry", "error", now)
        return False
    finally:
        state.publishing = False

    state.saved_text = content
    state.published_until = now + PUBLISHED_FLASH_DURATION
    show_message(state, "Assignment published!", "success", now)
    return True
