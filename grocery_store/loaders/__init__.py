"""
Loaders package
"""
from grocery_store.loaders.csv_loader import CsvLoader, parse_products

__all__ = ["CsvLoader", "parse_products"]
