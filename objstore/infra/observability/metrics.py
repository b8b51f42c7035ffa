from prometheus_client import Counter, Histogram

# operation 取客户端方法名（put_object 等），基数固定
STORAGE_OPERATIONS = Counter(
    "storage_operations_total",
    "Total object storage operations",
    ["operation", "outcome"],
)

STORAGE_LATENCY = Histogram(
    "storage_operation_duration_seconds",
    "Object storage operation latency in seconds",
    ["operation"],
)


def record_operation(operation: str, outcome: str, duration_s: float) -> None:
    STORAGE_OPERATIONS.labels(operation=operation, outcome=outcome).inc()
    STORAGE_LATENCY.labels(operation=operation).observe(duration_s)
