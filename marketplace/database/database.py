from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import logging

from marketplace.config import DATABASE_URL
from marketplace.models.database_models import Base


logger = logging.getLogger(__name__)

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=_connect_args)
sessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=engine):
    """Create the Product, Order and Review tables if they are missing."""
    logger.info("Creating tables on %s", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind)


def get_db():
    db = sessionLocal()
    try:
        yield db
    finally:
        db.close()
