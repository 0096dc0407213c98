"""A thread-safe message queue with handlers that consume its messages."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable

MESSAGE_QUEUE_LOOP_QUIT_FLAG = 19900909


class QueueAborted(Exception):
    """Raised when a queue has been aborted."""


@dataclass
class Message:
    """A message with a code, two integer arguments and an optional payload."""

    what: int = 0
    arg1: int = 0
    arg2: int = 0
    obj: Any = None
    handler: "Handler | None" = field(default=None, repr=False, compare=False)

    def execute(self) -> int:
        """Dispatch to the handler.

        Returns the quit flag for a quit message, 1 after the handler has run,
        and 0 when there is no handler.
        """
        if self.what == MESSAGE_QUEUE_LOOP_QUIT_FLAG:
            return MESSAGE_QUEUE_LOOP_QUIT_FLAG
        if self.handler is not None:
            self.handler.handle_message(self)
            return 1
        return 0


class MessageQueue:
    """FIFO of messages shared between threads."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._messages: deque[Message] = deque()
        self._condition = threading.Condition()
        self._aborted = False

    def size(self) -> int:
        """Number of queued messages."""
        with self._condition:
            return len(self._messages)

    def flush(self) -> None:
        """Drop every queued message."""
        with self._condition:
            self._messages.clear()

    def enqueue(self, msg: Message) -> None:
        """Append a message; raises QueueAborted once the queue is aborted."""
        with self._condition:
            if self._aborted:
                raise QueueAborted(f"queue {self.name!r} is aborted")
            self._messages.append(msg)
            self._condition.notify()

    def dequeue(self, block: bool = True) -> Message | None:
        """Take the oldest message.

        Without ``block`` an empty queue yields None; with it the call waits
        for a message. Raises QueueAborted once the queue is aborted.
        """
        with self._condition:
            while True:
                if self._aborted:
                    raise QueueAborted(f"queue {self.name!r} is aborted")
                if self._messages:
                    return self._messages.popleft()
                if not block:
                    return None
                self._condition.wait()

    def abort(self) -> None:
        """Abort the queue and wake any waiting consumer."""
        with self._condition:
            self._aborted = True
            self._condition.notify_all()


class Handler:
    """Posts messages to a queue and handles them when they are executed.

    Subclasses override ``handle_message``; alternatively a callback may be
    given, which the default ``handle_message`` calls with each message.
    """

    def __init__(
        self,
        queue: MessageQueue,
        callback: Callable[[Message], None] | None = None,
    ) -> None:
        self.queue = queue
        self.callback = callback

    def post_message(self, msg: Message) -> None:
        """Attach this handler to the message and enqueue it."""
        msg.handler = self
        self.queue.enqueue(msg)

    def handle_message(self, msg: Message) -> None:
        """Process a message by passing it to the callback, if one was given."""
        if self.callback is not None:
            self.callback(msg)