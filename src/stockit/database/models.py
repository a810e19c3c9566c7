"""SQLAlchemy models for stockit database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    CheckConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

Base = declarative_base()

# In-memory SQLite URLs; each new connection would otherwise get a fresh database.
MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Product(Base):
    """Catalog product model."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    category = Column(String, default="", nullable=False)
    price = Column(Numeric(12, 2), default=0, nullable=False)
    quantity = Column(Integer, default=0, nullable=False)
    reorder_level = Column(Integer, default=10, nullable=False)

    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted product,
    # which would silently re-attach orphaned history to a new product.
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
        {"sqlite_autoincrement": True},
    )


class Purchase(Base):
    """Purchase (stock intake) model."""

    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True)
    # Plain column, not a foreign key: history outlives deleted products.
    product_id = Column(Integer, nullable=True)
    quantity = Column(Integer, nullable=False)
    purchase_price = Column(Numeric(12, 2), nullable=False)
    purchase_date = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("ix_purchases_product_id", "product_id"),
        {"sqlite_autoincrement": True},
    )


class Sale(Base):
    """Sale (stock outflow) model."""

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, nullable=True)
    quantity = Column(Integer, nullable=False)
    selling_price = Column(Numeric(12, 2), nullable=False)
    sale_date = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("ix_sales_product_id", "product_id"),
        {"sqlite_autoincrement": True},
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine_kwargs = {}
    if database_url.startswith("sqlite"):
        # Sessions are serialized by the database lock, not by thread.
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in MEMORY_URLS:
            engine_kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, echo=False, **engine_kwargs)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
