"""Utility for resolving product references to IDs."""

from stockit.domain.errors import NotFoundError, ValidationError, product_not_found
from stockit.domain.product import ProductService


def resolve_product(product_service: ProductService, product: str | int) -> int:
    """Resolve a product ID or name to a product ID.

    Names match case-insensitively. Product names are not unique, so a name
    shared by several products is rejected rather than guessed. An all-digit
    reference is tried as an ID first and as a name when no such ID exists.

    Args:
        product_service: ProductService instance
        product: Product ID (int or numeric string) or exact name

    Returns:
        Product ID

    Raises:
        NotFoundError: If no product matches
        ValidationError: If the name matches more than one product
    """
    if isinstance(product, int):
        return product_service.require_product(product).id

    text = product.strip()
    if text.isdigit():
        found = product_service.get_product(int(text))
        if found is not None:
            return found.id

    matches = [p for p in product_service.list_products() if p.name.lower() == text.lower()]
    if not matches:
        if text.isdigit():
            raise NotFoundError(product_not_found(int(text)))
        raise NotFoundError(f"Product '{text}' not found")
    if len(matches) > 1:
        ids = ", ".join(str(p.id) for p in matches)
        raise ValidationError(f"Product name '{text}' is ambiguous (IDs: {ids}); use an ID")
    return matches[0].id
