"""Domain layer for stockit application."""

__all__ = [
    "ProductService",
    "LedgerService",
    "ReportService",
]


# Services are imported lazily: the database layer imports
# stockit.domain.entities, and the services import the database layer.
def __getattr__(name):
    if name == "ProductService":
        from stockit.domain.product import ProductService
        return ProductService
    if name == "LedgerService":
        from stockit.domain.ledger import LedgerService
        return LedgerService
    if name == "ReportService":
        from stockit.domain.report import ReportService
        return ReportService
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
