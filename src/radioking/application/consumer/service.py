"""Consumer supervisor – TrackPlayConsumerService.

Owns the lifecycle of the consumption loop that feeds every
:class:`~radioking.domain.events.TrackPlayedEvent` to
:meth:`TrackPlayService.record_track_play`.

States::

    IDLE ──start()──▶ RUNNING ──stop()──▶ STOPPING ──consumer closed──▶ IDLE
                         │
                         └── cancel set / loop ended ──▶ IDLE

A watcher task waits for the first of the external *cancel* event, the
internal stop signal, or the loop task ending on its own. It then signals
the loop to stop and waits for it; at most the in-flight message finishes.
"""
from __future__ import annotations

import asyncio
import enum
import logging

from radioking.application.history import TrackPlayService
from radioking.domain.events import TrackPlayedEvent
from radioking.kernel.messaging import (
    ConsumerAlreadyRunningError,
    ConsumerStartError,
    EventConsumer,
)

logger = logging.getLogger(__name__)


class ConsumerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPING = "stopping"


class TrackPlayConsumerService:
    """Supervises one consumption loop at a time."""

    def __init__(
        self,
        consumer: EventConsumer[TrackPlayedEvent],
        track_plays: TrackPlayService,
    ) -> None:
        self._consumer = consumer
        self._track_plays = track_plays
        self._lock = asyncio.Lock()
        self._state = ConsumerState.IDLE
        self._stop_requested: asyncio.Event | None = None
        self._watcher: asyncio.Task[None] | None = None

    @property
    def state(self) -> ConsumerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ConsumerState.RUNNING

    async def start(self, cancel: asyncio.Event | None = None) -> None:
        """Register the recorder with the consumer and spawn the watcher.

        Raises:
            ConsumerAlreadyRunningError: the service is not idle.
            ConsumerStartError: the consumer refused the subscription.
        """
        async with self._lock:
            if self._state is not ConsumerState.IDLE:
                raise ConsumerAlreadyRunningError()
            self._state = ConsumerState.RUNNING

            loop_stop = asyncio.Event()
            self._stop_requested = asyncio.Event()
            try:
                loop_task = await self._consumer.consume(
                    self._track_plays.record_track_play, loop_stop
                )
            except Exception as exc:
                self._state = ConsumerState.IDLE
                self._stop_requested = None
                logger.error("consumer.start_failed exc=%r", exc)
                raise ConsumerStartError(f"failed to start consuming: {exc}") from exc

            self._watcher = asyncio.create_task(
                self._watch(loop_task, loop_stop, self._stop_requested, cancel),
                name="track-play-consumer-watcher",
            )
        logger.info("consumer.started")

    async def stop(self) -> None:
        """Stop the loop and close the consumer. No-op unless running."""
        async with self._lock:
            if self._state is not ConsumerState.RUNNING:
                return
            self._state = ConsumerState.STOPPING
            if self._stop_requested is not None:
                self._stop_requested.set()
            watcher = self._watcher

        try:
            if watcher is not None:
                await asyncio.wait({watcher})
            await self._consumer.close()
        finally:
            async with self._lock:
                self._state = ConsumerState.IDLE
        logger.info("consumer.closed")

    async def _watch(
        self,
        loop_task: asyncio.Task[None],
        loop_stop: asyncio.Event,
        stop_requested: asyncio.Event,
        cancel: asyncio.Event | None,
    ) -> None:
        signals: dict[asyncio.Future[object], str] = {
            asyncio.ensure_future(stop_requested.wait()): "stop",
        }
        if cancel is not None:
            signals[asyncio.ensure_future(cancel.wait())] = "cancel"
        try:
            done, _ = await asyncio.wait(
                {loop_task, *signals}, return_when=asyncio.FIRST_COMPLETED
            )
            reason = "loop_ended"
            for future, name in signals.items():
                if future in done:
                    reason = name
                    break

            loop_stop.set()
            await asyncio.wait({loop_task})
            if loop_task.cancelled():
                logger.warning("consumer.loop_cancelled")
            elif (exc := loop_task.exception()) is not None:
                logger.error("consumer.loop_failed exc=%r", exc)
            logger.info("consumer.stopped reason=%s", reason)
        finally:
            for future in signals:
                future.cancel()
            self._watcher = None
            # stop() owns the STOPPING -> IDLE transition once the consumer is closed.
            if self._state is ConsumerState.RUNNING:
                self._state = ConsumerState.IDLE


__all__ = ["ConsumerState", "TrackPlayConsumerService"]
