import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models.base import Base
from app.models import rental  # noqa: F401  registers the rentals table

logger = logging.getLogger(__name__)


def create_session_factory(database_url: str) -> sessionmaker:
    engine_kwargs = {"future": True, "echo": False}
    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **engine_kwargs)
    Base.metadata.create_all(engine)
    logger.info(f"Rental database ready at {engine.url.render_as_string(hide_password=True)}")

    return sessionmaker(engine, expire_on_commit=False)
