# client_admin/adapters/outbound/persistence/models/resource_model.py

"""
Resources a client can be granted access to.

Identity resources and api scopes together form the set of scope names a
client may request.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, func

from client_admin.adapters.outbound.persistence.models.base_model import Base, utcnow


class IdentityResource(Base):
    __tablename__ = "identity_resources"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), unique=True, nullable=False, index=True)
    display_name = Column(String(200))
    description = Column(String(1000))
    enabled = Column(Boolean, nullable=False, default=True)
    required = Column(Boolean, nullable=False, default=False)
    emphasize = Column(Boolean, nullable=False, default=False)
    show_in_discovery_document = Column(Boolean, nullable=False, default=True)
    created = Column(DateTime, nullable=False, server_default=func.now())
    updated = Column(DateTime, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<IdentityResource(name={self.name})>"


class ApiResource(Base):
    __tablename__ = "api_resources"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), unique=True, nullable=False, index=True)
    display_name = Column(String(200))
    description = Column(String(1000))
    enabled = Column(Boolean, nullable=False, default=True)
    show_in_discovery_document = Column(Boolean, nullable=False, default=True)
    created = Column(DateTime, nullable=False, server_default=func.now())
    updated = Column(DateTime, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<ApiResource(name={self.name})>"


class ApiScope(Base):
    __tablename__ = "api_scopes"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), unique=True, nullable=False, index=True)
    display_name = Column(String(200))
    description = Column(String(1000))
    enabled = Column(Boolean, nullable=False, default=True)
    required = Column(Boolean, nullable=False, default=False)
    emphasize = Column(Boolean, nullable=False, default=False)
    show_in_discovery_document = Column(Boolean, nullable=False, default=True)
    created = Column(DateTime, nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<ApiScope(name={self.name})>"
