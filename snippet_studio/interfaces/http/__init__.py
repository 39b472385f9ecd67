"""HTTP interface: FastAPI routers and dependency providers."""
