"""Host-facing infrastructure: filesystem access and logging."""
