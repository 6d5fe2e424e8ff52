from .security import Security, to_decimal

__all__ = ["Security", "to_decimal"]
