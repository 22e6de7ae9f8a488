"""Opt-in asynchronous delivery: queue records and drain them on a worker thread."""

import logging
import queue
import threading

from log_router.senders.base import SenderBase, require_sender

logger = logging.getLogger(__name__)


class BufferedSender(SenderBase):
    """Wrap a sender so ``send()`` only enqueues.

    Producer side (``send``) puts a shallow copy of the record on a bounded
    queue and returns. A daemon consumer thread takes records off the queue and
    hands them to the wrapped sender. Callers wanting delivery confirmation
    call ``flush()``, which blocks until the queue is drained.

    Failures of the wrapped sender are logged and counted; by then the
    original ``log()`` call has returned and there is nobody to raise to.
    """

    def __init__(self, sender, max_size: int = 10000, accepted_levels=None):
        super().__init__(accepted_levels)
        require_sender(sender, "BufferedSender")
        self._sender = sender
        self._queue: queue.Queue = queue.Queue(maxsize=max_size)
        self._idle = threading.Condition()
        self._pending = 0
        self._delivered = 0
        self._failed = 0
        self._dropped = 0
        self._closed = False
        self._worker = threading.Thread(
            target=self._consumer_loop, name="log-router-buffer", daemon=True
        )
        self._worker.start()

    @property
    def delivered(self) -> int:
        with self._idle:
            return self._delivered

    @property
    def failed(self) -> int:
        with self._idle:
            return self._failed

    @property
    def dropped(self) -> int:
        with self._idle:
            return self._dropped

    def write(self, level, message, context):
        with self._idle:
            if self._closed:
                self._dropped += 1
                logger.warning("Buffer closed, dropping log record at level %d", level)
                return
            # Enqueue under the lock so nothing lands behind the poison pill
            record = (level, message, dict(context) if context else {})
            try:
                self._queue.put_nowait(record)
            except queue.Full:
                self._dropped += 1
                logger.warning("Buffer full, dropping log record at level %d", level)
                return
            self._pending += 1

    def _consumer_loop(self):
        while True:
            item = self._queue.get()
            if item is None:
                return
            level, message, context = item
            ok = True
            try:
                self._sender.send(level, message, context)
            except Exception:
                ok = False
                logger.exception("Buffered delivery failed at level %d", level)
            with self._idle:
                if ok:
                    self._delivered += 1
                else:
                    self._failed += 1
                self._pending -= 1
                if self._pending == 0:
                    self._idle.notify_all()

    def _drop_queued(self):
        with self._idle:
            discarded = 0
            while True:
                try:
                    self._queue.get_nowait()
                except queue.Empty:
                    break
                discarded += 1
            self._pending -= discarded
            self._dropped += discarded
            self._queue.put_nowait(None)
            self._idle.notify_all()
        logger.warning("Buffer full on close, dropped %d queued record(s)", discarded)

    def flush(self, timeout: float | None = None) -> bool:
        """Block until every queued record was handed over. False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: self._pending == 0, timeout)

    def close(self, timeout: float = 5.0) -> None:
        """Deliver what is queued, then stop the worker thread.

        If the queue stays full for *timeout* seconds, the records still
        waiting in it are dropped so the worker can be stopped.
        """
        with self._idle:
            if self._closed:
                return
            self._closed = True
        try:
            self._queue.put(None, timeout=timeout)
        except queue.Full:
            self._drop_queued()
        self._worker.join(timeout=timeout)
        logger.info(
            "Buffered sender closed: delivered=%d, failed=%d, dropped=%d",
            self._delivered, self._failed, self._dropped,
        )
