# client_admin/adapters/outbound/persistence/models/base_model.py

from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base

# Parent class of every ORM model, owner of the shared metadata
Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
