"""
Ingredient normalization and recipe pricing
"""
