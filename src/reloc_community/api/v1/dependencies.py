"""Shared API dependencies for database sessions and background fan-out."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from reloc_community.db.session import get_db
from reloc_community.services.fanout import EventSink

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_event_sink(request: Request) -> EventSink | None:
    """Return the application's notification dispatcher.

    The dispatcher is created on startup; before that (or after shutdown)
    events are simply not published.
    """
    return getattr(request.app.state, "notification_dispatcher", None)


# Type alias for the fan-out dependency
EventSinkDep = Annotated[EventSink | None, Depends(get_event_sink)]
