"""
Breeding event service.

This module stores breeding events per user and derives the herd-level
breeding dashboard (pregnant, lactating and open counts) from them.

Typical usage:
    events = get_breeding_events(user_id)
    dashboard = get_breeding_dashboard_data(user_id)
    print(f"{dashboard.pregnant} of {dashboard.breeding_females} pregnant")
"""
from datetime import date, timedelta
from typing import Iterable, List, Optional, Set

from src.models.breeding import (
    BreedingDashboardData,
    BreedingEvent,
    BreedingEventInsert,
    BreedingEventType,
    BreedingEventUpdate,
)
from src.services.constants import LACTATION_WINDOW_DAYS
from src.services.records import UserRecordRepository
from src.utils.logging import logger, log_exception

breeding_events = UserRecordRepository("breeding_event", BreedingEvent)


def get_breeding_events(user_id: str) -> List[BreedingEvent]:
    """Get all breeding events for a user, newest first."""
    events = breeding_events.list(user_id)
    return sorted(events, key=lambda e: e.date, reverse=True)


def get_breeding_event(event_id: str, user_id: str) -> BreedingEvent:
    """Get a single breeding event owned by the user."""
    return breeding_events.get(event_id, user_id)


def create_breeding_event(user_id: str, event: BreedingEventInsert) -> BreedingEvent:
    """Record a new breeding event for a user."""
    return breeding_events.create(user_id, event)


def update_breeding_event(event_id: str, user_id: str, event: BreedingEventUpdate) -> BreedingEvent:
    """Update a breeding event owned by the user."""
    return breeding_events.update(event_id, user_id, event)


def delete_breeding_event(event_id: str, user_id: str) -> None:
    """Delete a breeding event owned by the user."""
    breeding_events.delete(event_id, user_id)


def find_pregnant_animals(events: List[BreedingEvent]) -> Set[str]:
    """
    Find animals with a pregnancy confirmation not yet followed by a birth.

    A birth only resolves a confirmation when it is dated strictly after it;
    a birth on the same day as the confirmation leaves the animal pregnant.

    Args:
        events: All breeding events of one user, in any order

    Returns:
        Set of pregnant animal IDs
    """
    pregnant = set()
    for confirmation in events:
        if confirmation.event_type != BreedingEventType.PREGNANCY_CONFIRMATION:
            continue
        has_later_birth = any(
            e.event_type == BreedingEventType.BIRTH
            and e.animal_id == confirmation.animal_id
            and e.date > confirmation.date
            for e in events
        )
        if not has_later_birth:
            pregnant.add(confirmation.animal_id)
    return pregnant


def find_lactating_animals(events: Iterable[BreedingEvent], today: date) -> Set[str]:
    """
    Find animals that gave birth within the lactation window.

    The window is inclusive at both ends: [today - 60 days, today].
    """
    window_start = today - timedelta(days=LACTATION_WINDOW_DAYS)
    return {
        e.animal_id for e in events
        if e.event_type == BreedingEventType.BIRTH and window_start <= e.date <= today
    }


def calculate_breeding_status(
    events: List[BreedingEvent],
    today: Optional[date] = None
) -> BreedingDashboardData:
    """
    Calculate breeding counters from a user's complete set of events.

    Args:
        events: Every breeding event of one user, in any order
        today: Date to evaluate the lactation window against, defaults to today

    Returns:
        BreedingDashboardData where ``open`` is floored at zero. An animal
        that is both pregnant and lactating is counted in both, which can
        push the raw open count below zero.
    """
    if not events:
        return BreedingDashboardData()

    today = today or date.today()
    breeding_females = len({e.animal_id for e in events})
    pregnant = len(find_pregnant_animals(events))
    lactating = len(find_lactating_animals(events, today))

    return BreedingDashboardData(
        breeding_females=breeding_females,
        pregnant=pregnant,
        lactating=lactating,
        open=max(0, breeding_females - pregnant - lactating)
    )


def get_breeding_dashboard_data(user_id: str, today: Optional[date] = None) -> BreedingDashboardData:
    """
    Fetch a user's breeding events and summarize them for the dashboard.

    A failed fetch never reaches the caller: it is logged and the
    all-zero dashboard is returned instead.

    Args:
        user_id: Owning user's identifier
        today: Optional date to evaluate against, defaults to today

    Returns:
        BreedingDashboardData for the user
    """
    try:
        events = breeding_events.list(user_id)
    except Exception:
        log_exception(logger, "Error fetching breeding dashboard data", extra={
            "user_id": user_id
        })
        return BreedingDashboardData()

    dashboard = calculate_breeding_status(events, today)
    logger.info("Breeding dashboard calculated", extra={
        "user_id": user_id,
        "events_analyzed": len(events),
        **dashboard.model_dump()
    })
    return dashboard
