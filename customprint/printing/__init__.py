from .printer import CustomPrinter

__all__ = ["CustomPrinter"]
