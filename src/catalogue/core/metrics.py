from prometheus_client import Counter

CATALOGUE_OPERATIONS = Counter(
    "catalogue_operations_total",
    "Total number of catalogue operations",
    ["operation", "outcome"],
)

BATCH_PRODUCTS_ADDED = Counter(
    "catalogue_batch_products_added_total",
    "Total number of products inserted through batch additions",
)

REORDER_FLAGGED = Counter(
    "catalogue_reorder_flagged_total",
    "Total number of product ids reported as needing a reorder",
)
