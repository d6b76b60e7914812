from .convert_number import ConvertNumber

__all__ = ["ConvertNumber"]
