from .client import TestClient

__all__ = ["TestClient"]
