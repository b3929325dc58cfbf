from prometheus_client import Counter, Histogram

# Business Metrics
pizza_orders_placed_total = Counter(
    "pizza_orders_placed_total",
    "Total pizza orders persisted",
    ["pizza"] # Labels: catalog name, or 'unknown' for ids outside the catalog
)

pizza_customers_created_total = Counter(
    "pizza_customers_created_total",
    "Customers created on their first order"
)

pizza_order_total_price = Histogram(
    "pizza_order_total_price",
    "Total price charged per order",
    buckets=(0, 200, 400, 800, 1600, 3200, 6400)
)
