"""Target language adapters."""

from .base import BaseAdapter
from .swift import SwiftAdapter
from .swift_printer import SwiftPrinter

__all__ = [
    'BaseAdapter',
    'SwiftAdapter',
    'SwiftPrinter',
]
