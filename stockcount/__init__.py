# stockcount/__init__.py
"""
In-memory stock count service.

Start RFID stock counts per location / product category and record tag reads
against them over a small REST API.
"""

__version__ = "1.0.0"
