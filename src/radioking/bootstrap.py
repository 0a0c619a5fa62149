"""Application assembly – wiring of adapters and services, FastAPI factory."""
from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import logging
from typing import AsyncIterator

from fastapi import FastAPI

from radioking import __version__
from radioking.adapters.fastapi import (
    FastAPICorrelationIdMiddleware,
    FastAPIExceptionMapper,
    FastAPIHealthRouter,
    FastAPISecurityMiddleware,
    PlaylistRouter,
)
from radioking.adapters.keycloak import JWKSClient, OIDCTokenVerifier, realm_jwks_uri
from radioking.adapters.rabbitmq import RabbitMQEventConsumer, RabbitMQEventPublisher
from radioking.adapters.sqlalchemy import (
    Base,
    SqlAlchemyPlaylistRepository,
    SqlAlchemySessionFactory,
    SqlAlchemyTrackPlayRepository,
)
from radioking.application.consumer import TrackPlayConsumerService
from radioking.application.history import TrackPlayService
from radioking.application.playback import PlaylistPlayService
from radioking.application.playlists import PlaylistService
from radioking.config import RadioKingSettings
from radioking.domain.events import TrackPlayedEvent
from radioking.kernel.messaging import EventConsumer, EventPublisher

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Container:
    """Everything the HTTP app and the consumer pipeline share."""

    settings: RadioKingSettings
    session_factory: SqlAlchemySessionFactory
    publisher: EventPublisher[TrackPlayedEvent]
    consumer: EventConsumer[TrackPlayedEvent]
    playlists: PlaylistService
    player: PlaylistPlayService
    track_plays: TrackPlayService
    consumer_service: TrackPlayConsumerService
    verifier: OIDCTokenVerifier | None = None


def build_container(
    settings: RadioKingSettings,
    *,
    publisher: EventPublisher[TrackPlayedEvent] | None = None,
    consumer: EventConsumer[TrackPlayedEvent] | None = None,
) -> Container:
    """Wire production adapters; *publisher* / *consumer* override the broker side."""
    session_factory = SqlAlchemySessionFactory(settings.database_url)

    if publisher is None:
        publisher = RabbitMQEventPublisher(
            settings.rabbitmq_url,
            exchange=settings.rabbitmq_exchange,
            routing_key=settings.rabbitmq_routing_key,
        )
    if consumer is None:
        consumer = RabbitMQEventConsumer(
            settings.rabbitmq_url,
            exchange=settings.rabbitmq_exchange,
            queue=settings.rabbitmq_queue,
            routing_key=settings.rabbitmq_routing_key,
            prefetch_count=settings.rabbitmq_prefetch_count,
        )

    playlists = PlaylistService(SqlAlchemyPlaylistRepository(session_factory))
    track_plays = TrackPlayService(SqlAlchemyTrackPlayRepository(session_factory))

    verifier: OIDCTokenVerifier | None = None
    if settings.auth_enabled:
        jwks = JWKSClient(realm_jwks_uri(settings.auth_keycloak_url, settings.auth_realm))
        verifier = OIDCTokenVerifier(jwks, audience=settings.auth_audience)

    return Container(
        settings=settings,
        session_factory=session_factory,
        publisher=publisher,
        consumer=consumer,
        playlists=playlists,
        player=PlaylistPlayService(playlists, publisher),
        track_plays=track_plays,
        consumer_service=TrackPlayConsumerService(consumer, track_plays),
        verifier=verifier,
    )


def create_app(container: Container) -> FastAPI:
    """Build the FastAPI app; its lifespan owns the broker connections."""

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        cancel = asyncio.Event()
        # Each release is registered before its acquire, so a failed startup
        # still closes whatever was opened. Callbacks run in reverse order.
        async with contextlib.AsyncExitStack() as stack:
            stack.callback(logger.info, "app.stopped")
            stack.push_async_callback(container.session_factory.dispose)
            await container.session_factory.create_all(Base)
            stack.push_async_callback(container.publisher.close)
            await container.publisher.connect()
            stack.push_async_callback(container.consumer.close)
            await container.consumer.connect()
            stack.push_async_callback(container.consumer_service.stop)
            stack.callback(cancel.set)
            await container.consumer_service.start(cancel)
            logger.info("app.started version=%s", __version__)
            yield

    app = FastAPI(title="radioking", version=__version__, lifespan=lifespan)
    FastAPIExceptionMapper().register(app)

    async def database() -> bool:
        return await container.session_factory.ping()

    async def broker() -> bool:
        return container.publisher.is_connected

    app.include_router(FastAPIHealthRouter(readiness_checks=[database, broker]))
    app.include_router(PlaylistRouter(container.playlists, container.player, container.track_plays))

    # Starlette applies middleware in reverse order: correlation runs first.
    if container.verifier is not None:
        app.add_middleware(FastAPISecurityMiddleware, verifier=container.verifier.verify)
    app.add_middleware(FastAPICorrelationIdMiddleware)
    return app


__all__ = ["Container", "build_container", "create_app"]
