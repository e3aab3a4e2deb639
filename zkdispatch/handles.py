"""
Async handles: one per in-flight coordination-service call.

A handle is the completion target handed to the transport. When the result
arrives it is classified once and delivered, on the reactor, to both
consumption styles:

- deferred style: ``on_success(cb)`` / ``on_failure(cb)``, ``result()``, ``await``
- node style: one ``observer(error, *values)`` callback

The two styles are not exclusive; a caller using both is notified in both.
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable, Generator, Mapping
from concurrent.futures import Future
from functools import partial
from typing import Any

from loguru import logger

from zkdispatch.config.access import get_config
from zkdispatch.core.errors import KeeperError, ObserverAlreadySetError
from zkdispatch.core.kinds import Classification, OperationKind, get_kind
from zkdispatch.core.protocol import ResultBundle
from zkdispatch.reactor import Reactor, get_reactor

Observer = Callable[..., Any]


class AsyncHandle:
    """Dual-style result delivery for one asynchronous call."""

    def __init__(
        self,
        kind: OperationKind | str,
        observer: Observer | None = None,
        *,
        reactor: Reactor | None = None,
    ):
        self._kind = get_kind(kind) if isinstance(kind, str) else kind
        self.reactor: Reactor = reactor if reactor is not None else get_reactor()
        # Opaque caller value for correlating deliveries with requests.
        self.context: Any = None
        self.classification: Classification | None = None
        self._req_id: Any = None
        self._observer: Observer | None = None
        self._future: Future[tuple[Any, ...]] = Future()
        self._success_callbacks: list[Callable[..., Any]] = []
        self._failure_callbacks: list[Callable[[KeeperError], Any]] = []
        self._lock = threading.Lock()
        self._delivered = False
        self._log_results = get_config().logging.log_results
        if observer is not None:
            self.on_result(observer)

    @property
    def kind(self) -> OperationKind:
        return self._kind

    @property
    def req_id(self) -> Any:
        """Request id reported by the transport at submission time."""
        return self._req_id

    def on_result(self, observer: Observer) -> AsyncHandle:
        """Register the node-style observer: ``observer(error)`` or ``observer(None, *values)``.

        Raises:
            ObserverAlreadySetError: an observer is already registered.
        """
        if self._observer is not None:
            raise ObserverAlreadySetError(self._kind.name)
        self._observer = observer
        return self

    # ------------------------------------------------------------------
    # Transport entry points
    # ------------------------------------------------------------------

    def check_submission(self, bundle: ResultBundle | Mapping[str, Any]) -> bool:
        """Record the request id and deliver now if the call was rejected before sending.

        Returns True when the call was accepted and a completion is still to come.
        """
        bundle = ResultBundle.coerce(bundle)
        self._req_id = bundle.req_id
        if self._log_results:
            logger.debug("{} submission: status={} req_id={}", self._kind.name, bundle.status, bundle.req_id)
        if self._kind.success(bundle.status):
            return True
        self.deliver(bundle)
        return False

    def __call__(self, bundle: ResultBundle | Mapping[str, Any]) -> None:
        """Completion callback invoked by the transport with the final result."""
        self.deliver(ResultBundle.coerce(bundle))

    def deliver(self, bundle: ResultBundle) -> bool:
        """Schedule delivery of ``bundle`` on the reactor. Only the first call counts."""
        with self._lock:
            if self._delivered:
                logger.warning(
                    "{} handle req_id={} already has a result; ignoring status={}",
                    self._kind.name,
                    self._req_id,
                    bundle.status,
                )
                return False
            self._delivered = True
        if self._log_results:
            logger.debug(
                "{} result: req_id={} context={!r} status={} fields={}",
                self._kind.name,
                self._req_id,
                self.context,
                bundle.status,
                sorted(bundle.fields),
            )
        self.reactor.schedule(partial(self._dispatch, bundle))
        return True

    def _dispatch(self, bundle: ResultBundle) -> None:
        outcome = self._kind.classify(bundle)
        with self._lock:
            self.classification = outcome
            callbacks = self._success_callbacks if outcome.succeeded else self._failure_callbacks
            self._success_callbacks = []
            self._failure_callbacks = []
        self._resolve(outcome)
        for callback in callbacks:
            self._fire(callback, outcome)
        self._notify(outcome)

    @staticmethod
    def _fire(callback: Callable[..., Any], outcome: Classification) -> None:
        if outcome.succeeded:
            callback(*outcome.values)
        else:
            callback(outcome.error)

    def _resolve(self, outcome: Classification) -> None:
        if not self._future.set_running_or_notify_cancel():
            logger.debug("{} handle req_id={}: deferred was cancelled by its consumer", self._kind.name, self._req_id)
            return
        if outcome.succeeded:
            self._future.set_result(outcome.values)
        else:
            self._future.set_exception(outcome.error)

    def _notify(self, outcome: Classification) -> None:
        observer = self._observer
        if observer is None:
            return
        if outcome.succeeded:
            observer(None, *outcome.values)
        else:
            observer(outcome.error)

    # ------------------------------------------------------------------
    # Deferred-style consumption
    # ------------------------------------------------------------------

    def on_success(self, callback: Callable[..., Any]) -> AsyncHandle:
        """Call ``callback(*values)`` on success.

        Pending handles run the callback inside the delivery unit, so an
        exception it raises is fatal to the reactor like an observer's. A
        handle that already succeeded runs it immediately on the caller's thread.
        """
        return self._subscribe(callback, self._success_callbacks, succeeded=True)

    def on_failure(self, callback: Callable[[KeeperError], Any]) -> AsyncHandle:
        """Call ``callback(error)`` on failure; same timing rules as on_success."""
        return self._subscribe(callback, self._failure_callbacks, succeeded=False)

    def _subscribe(self, callback: Callable[..., Any], pending: list, *, succeeded: bool) -> AsyncHandle:
        with self._lock:
            outcome = self.classification
            if outcome is None:
                pending.append(callback)
                return self
        if outcome.succeeded is succeeded:
            self._fire(callback, outcome)
        return self

    def done(self) -> bool:
        return self._future.done()

    @property
    def succeeded(self) -> bool:
        return self.classification is not None and self.classification.succeeded

    @property
    def failed(self) -> bool:
        return self.classification is not None and not self.classification.succeeded

    def result(self, timeout: float | None = None) -> tuple[Any, ...]:
        """Block until delivered; return the values or raise the KeeperError."""
        return self._future.result(timeout)

    def __await__(self) -> Generator[Any, None, tuple[Any, ...]]:
        return asyncio.wrap_future(self._future).__await__()

    def __repr__(self) -> str:
        if not self._future.done():
            state = "pending"
        elif self.succeeded:
            state = "succeeded"
        elif self.failed:
            state = "failed"
        else:
            state = "cancelled"
        return f"<AsyncHandle kind={self._kind.name} req_id={self._req_id!r} {state}>"
