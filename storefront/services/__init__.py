# Services Module
from .money import to_decimal, add, subtract, multiply, format_money, percent_label

__all__ = ["to_decimal", "add", "subtract", "multiply", "format_money", "percent_label"]
