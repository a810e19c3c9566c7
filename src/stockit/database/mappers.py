"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the services only ever see the
frozen entities from stockit.domain.entities.
"""

from decimal import Decimal
from typing import Optional

from stockit.domain import entities as domain
from stockit.database.models import (
    Product as ORMProduct,
    Purchase as ORMPurchase,
    Sale as ORMSale,
)


def _amount(value) -> Decimal:
    # Numeric yields Decimal on SQLite; other drivers may return float.
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def product_to_domain(orm_product: ORMProduct) -> domain.Product:
    """Convert SQLAlchemy Product model to domain Product entity."""
    return domain.Product(
        id=orm_product.id,
        name=orm_product.name,
        category=orm_product.category or "",
        price=_amount(orm_product.price),
        quantity=orm_product.quantity,
        reorder_level=orm_product.reorder_level,
    )


def purchase_to_domain(orm_purchase: ORMPurchase) -> domain.Purchase:
    """Convert SQLAlchemy Purchase model to domain Purchase entity."""
    return domain.Purchase(
        id=orm_purchase.id,
        product_id=orm_purchase.product_id,
        quantity=orm_purchase.quantity,
        purchase_price=_amount(orm_purchase.purchase_price),
        purchase_date=orm_purchase.purchase_date,
    )


def sale_to_domain(orm_sale: ORMSale) -> domain.Sale:
    """Convert SQLAlchemy Sale model to domain Sale entity."""
    return domain.Sale(
        id=orm_sale.id,
        product_id=orm_sale.product_id,
        quantity=orm_sale.quantity,
        selling_price=_amount(orm_sale.selling_price),
        sale_date=orm_sale.sale_date,
    )


def purchase_listing_to_domain(
    orm_purchase: ORMPurchase, product_name: Optional[str]
) -> domain.PurchaseListing:
    """Pair a purchase with its resolved product name (or the placeholder)."""
    return domain.PurchaseListing(
        purchase=purchase_to_domain(orm_purchase),
        product_name=product_name if product_name is not None else domain.UNKNOWN_PRODUCT_NAME,
    )


def sale_listing_to_domain(orm_sale: ORMSale, product_name: Optional[str]) -> domain.SaleListing:
    """Pair a sale with its resolved product name (or the placeholder)."""
    return domain.SaleListing(
        sale=sale_to_domain(orm_sale),
        product_name=product_name if product_name is not None else domain.UNKNOWN_PRODUCT_NAME,
    )
