"""
Core domain types: enums, exceptions and models.
"""
