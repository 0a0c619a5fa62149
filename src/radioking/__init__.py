"""
radioking – playlist service with asynchronous play-history recording.

Import path convention::

    from radioking.kernel.errors import NotFoundError
    from radioking.application.playback import PlaylistPlayService
    from radioking.adapters.rabbitmq import RabbitMQEventPublisher
    from radioking.bootstrap import build_container, create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
