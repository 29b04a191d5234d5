"""Best-effort notification fan-out for new messages, comments and posts.

Primary writes publish a small event after they commit. The
``NotificationDispatcher`` queues those events in-process and a background
task hands each one to ``NotificationFanout``, which works out who should be
told and writes one notification per recipient. Nothing in this module ever
raises back into the code that published the event: failures are logged and
dropped, and one recipient failing does not stop the others.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ClassVar, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reloc_community.models.notification import (
    NOTIFICATION_TYPE_COMMENT,
    NOTIFICATION_TYPE_MESSAGE,
    NOTIFICATION_TYPE_POST,
)
from reloc_community.models.user import User
from reloc_community.repositories import NotificationRepository, PostRepository, UserRepository

logger = logging.getLogger(__name__)

ANONYMOUS_ACTOR = "Someone"

SessionFactory = Callable[[], AbstractContextManager[Session]]


@dataclass(frozen=True)
class MessageCreated:
    """A direct message was stored."""

    trigger: ClassVar[str] = NOTIFICATION_TYPE_MESSAGE

    message_id: int
    sender_id: str
    receiver_id: str
    post_id: int | None = None

    @property
    def actor_id(self) -> str:
        return self.sender_id


@dataclass(frozen=True)
class CommentCreated:
    """A comment was added to a post."""

    trigger: ClassVar[str] = NOTIFICATION_TYPE_COMMENT

    comment_id: int
    post_id: int
    commenter_id: str

    @property
    def actor_id(self) -> str:
        return self.commenter_id


@dataclass(frozen=True)
class PostCreated:
    """A new post was published."""

    trigger: ClassVar[str] = NOTIFICATION_TYPE_POST

    post_id: int
    author_id: str

    @property
    def actor_id(self) -> str:
        return self.author_id


FanoutEvent = MessageCreated | CommentCreated | PostCreated


@dataclass(frozen=True)
class NotificationDraft:
    """A notification planned for one recipient but not yet written."""

    user_id: str
    type: str
    title: str
    message: str
    sender_id: str
    post_id: int | None = None
    comment_id: int | None = None


class EventSink(Protocol):
    """Anything that accepts fan-out events without blocking."""

    def enqueue(self, event: FanoutEvent) -> bool:
        ...


def actor_display_name(user: User | None) -> str:
    """Return the name shown in notification copy for the acting user."""
    if user is None:
        return ANONYMOUS_ACTOR
    return user.label or ANONYMOUS_ACTOR


def publish(sink: EventSink | None, event: FanoutEvent) -> None:
    """Hand an event to ``sink``, swallowing any failure to do so."""
    if sink is None:
        return
    try:
        sink.enqueue(event)
    except Exception:  # noqa: BLE001 - publishing must never fail the primary write
        logger.error("Could not enqueue %s fan-out event %r", event.trigger, event, exc_info=True)


class NotificationFanout:
    """Compute recipients for an event and write their notifications."""

    def __init__(self, session_factory: SessionFactory) -> None:
        """Initialize the fan-out.

        Args:
            session_factory: Callable returning a context-managed session. Each
                dispatch opens its own session, separate from the request that
                produced the event.
        """
        self._session_factory = session_factory

    def plan(self, event: FanoutEvent, db: Session) -> list[NotificationDraft]:
        """Return one draft per recipient of ``event``."""
        users = UserRepository(db)
        actor = actor_display_name(users.get_by_id(event.actor_id))

        if isinstance(event, MessageCreated):
            return [
                NotificationDraft(
                    user_id=event.receiver_id,
                    type=NOTIFICATION_TYPE_MESSAGE,
                    title="New message",
                    message=f"{actor} sent you a message",
                    sender_id=event.sender_id,
                    post_id=event.post_id,
                )
            ]

        if isinstance(event, CommentCreated):
            post = PostRepository(db).get_by_id(event.post_id)
            if post is None or post.user_id == event.commenter_id:
                return []
            return [
                NotificationDraft(
                    user_id=post.user_id,
                    type=NOTIFICATION_TYPE_COMMENT,
                    title="New comment",
                    message=f"{actor} commented on your post",
                    sender_id=event.commenter_id,
                    post_id=event.post_id,
                    comment_id=event.comment_id,
                )
            ]

        return [
            NotificationDraft(
                user_id=user.id,
                type=NOTIFICATION_TYPE_POST,
                title="New post",
                message=f"{actor} shared a new post",
                sender_id=event.author_id,
                post_id=event.post_id,
            )
            for user in users.list_all()
            if user.id != event.author_id
        ]

    def dispatch(self, event: FanoutEvent) -> int:
        """Write notifications for ``event``; returns how many were stored."""
        with self._session_factory() as db:
            try:
                drafts = self.plan(event, db)
            except Exception:  # noqa: BLE001 - fan-out is best effort
                self._rollback(db)
                logger.error(
                    "Fan-out for %s event %r could not resolve recipients",
                    event.trigger,
                    event,
                    exc_info=True,
                )
                return 0

            written = 0
            for draft in drafts:
                if self._write(db, event, draft):
                    written += 1
            logger.debug(
                "Fan-out for %s event wrote %d of %d notifications",
                event.trigger,
                written,
                len(drafts),
            )
            return written

    def _write(self, db: Session, event: FanoutEvent, draft: NotificationDraft) -> bool:
        """Insert and commit a single notification in its own unit of work."""
        try:
            NotificationRepository(db).create(
                user_id=draft.user_id,
                type=draft.type,
                title=draft.title,
                message=draft.message,
                post_id=draft.post_id,
                comment_id=draft.comment_id,
                sender_id=draft.sender_id,
            )
            db.commit()
        except SQLAlchemyError as exc:
            self._rollback(db)
            logger.warning(
                "Fan-out for %s event skipped recipient %s: %s",
                event.trigger,
                draft.user_id,
                exc,
            )
            return False
        except Exception:  # noqa: BLE001 - fan-out is best effort
            self._rollback(db)
            logger.error(
                "Fan-out for %s event failed for recipient %s",
                event.trigger,
                draft.user_id,
                exc_info=True,
            )
            return False
        return True

    @staticmethod
    def _rollback(db: Session) -> None:
        try:
            db.rollback()
        except SQLAlchemyError as exc:
            logger.warning("Rollback after fan-out failure also failed: %s", exc)


def _running_in(loop: asyncio.AbstractEventLoop) -> bool:
    try:
        return asyncio.get_running_loop() is loop
    except RuntimeError:
        return False


class NotificationDispatcher:
    """In-process queue feeding events to a ``NotificationFanout`` in the background.

    ``enqueue`` never blocks and never raises. It may be called on the event
    loop or from the threadpool that serves synchronous request handlers;
    calls from other threads are handed to the loop. The worker runs each
    dispatch in a thread so database I/O does not stall the loop.
    """

    def __init__(self, fanout: NotificationFanout, *, max_queue_size: int = 1000) -> None:
        """Initialize the dispatcher.

        Args:
            fanout: Fan-out used to process queued events.
            max_queue_size: Events beyond this backlog are dropped with a warning.
        """
        self.fanout = fanout
        self._queue: asyncio.Queue[FanoutEvent] = asyncio.Queue(maxsize=max_queue_size)
        self._task: asyncio.Task[None] | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._closed = False
        self._stopped = False

    @property
    def pending(self) -> int:
        """Number of events waiting to be processed."""
        return self._queue.qsize()

    def enqueue(self, event: FanoutEvent) -> bool:
        """Queue an event; returns False if it had to be dropped.

        From a thread other than the loop's, the event is handed over with
        ``call_soon_threadsafe`` and True only means it was handed over.
        """
        if self._closed:
            logger.warning("Dispatcher closed; dropping %s event %r", event.trigger, event)
            return False
        loop = self._loop
        if loop is None or _running_in(loop):
            return self._put(event)
        try:
            loop.call_soon_threadsafe(self._put, event)
        except RuntimeError:
            logger.warning("Event loop closed; dropping %s event %r", event.trigger, event)
            return False
        return True

    def _put(self, event: FanoutEvent) -> bool:
        if self._stopped:
            logger.warning("Dispatcher stopped; dropping late %s event %r", event.trigger, event)
            return False
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            logger.warning("Notification queue full; dropping %s event %r", event.trigger, event)
            return False
        return True

    async def start(self) -> None:
        """Start the background dispatch loop."""
        self._closed = False
        self._stopped = False
        self._loop = asyncio.get_running_loop()
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run())

    async def stop(self, timeout: float | None = 30.0) -> None:
        """Stop accepting events and return once everything queued has been written.

        The background loop is given up to ``timeout`` seconds to finish the
        event in flight and the backlog before it is cancelled. Whatever is
        left afterwards, including events handed over from other threads
        while stopping, is processed inline.
        """
        self._closed = True
        if self._task is not None:
            try:
                await asyncio.wait_for(self._queue.join(), timeout)
            except TimeoutError:
                logger.warning(
                    "Notification queue not idle after %ss; %d events still pending",
                    timeout,
                    self.pending,
                )
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        # Let threadsafe hand-overs scheduled before closing reach the queue.
        await asyncio.sleep(0)
        await self.drain()
        self._stopped = True

    async def wait_idle(self) -> None:
        """Wait until the background loop has processed everything queued so far."""
        await self._queue.join()

    async def drain(self) -> int:
        """Process every queued event now; returns how many were handled."""
        handled = 0
        while True:
            try:
                event = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return handled
            try:
                await self._handle(event)
            finally:
                self._queue.task_done()
            handled += 1

    async def _run(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                await self._handle(event)
            finally:
                self._queue.task_done()

    async def _handle(self, event: FanoutEvent) -> int:
        try:
            return await asyncio.to_thread(self.fanout.dispatch, event)
        except Exception:  # noqa: BLE001 - keep the worker alive
            logger.error("Notification fan-out for %s event crashed", event.trigger, exc_info=True)
            return 0
