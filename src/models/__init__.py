# src/models/__init__.py

from .invoices import *
# import every model file here
