"""Constants for dashboard refresh and product display."""


class PollingState:
    """Background polling timer states."""
    STOPPED = "stopped"
    ARMED = "armed"


class ErrorCode:
    """Error codes reported by the product store client."""
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class DefaultMessage:
    """Fallback messages when the store sends none."""
    FETCH = "Failed to fetch products"
    CREATE = "Failed to create product"
    UPDATE = "Failed to update product"
    DELETE = "Failed to delete product"
    NETWORK = "Network error occurred"


class StockStatus:
    """Stock status labels and colors."""
    OUT_OF_STOCK = "Out of Stock"
    LOW_STOCK = "Low Stock"
    IN_STOCK = "In Stock"

    COLOR_ERROR = "error"
    COLOR_WARNING = "warning"
    COLOR_SUCCESS = "success"

    LOW_STOCK_THRESHOLD = 10


class SortDirection:
    ASC = "asc"
    DESC = "desc"


SORTABLE_FIELDS = (
    "name",
    "price",
    "stock_quantity",
    "created_at",
    "sold_count",
    "sold_sum",
)
