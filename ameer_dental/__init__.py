"""
Ameer Dental: patient records, dental charts and appointment scheduling.
"""

__version__ = "1.0.0"
