"""Adapters – RabbitMQ, SQLAlchemy, FastAPI and Keycloak implementations of the ports."""
