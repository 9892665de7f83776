"""Catalog API - categories, products, collections and settings over JSON files."""
