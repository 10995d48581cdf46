"""itemvault - typed keyed repositories and the record-keeping samples built on them.

Samples:
- Warehouse stock (electronics and groceries)
- Healthcare patients and prescriptions
- Inventory log persisted to JSON
- Student grading from flat files
- Finance transactions and accounts

Usage:
    itemvault warehouse
"""

from .repositories.memory_repository import KeyedRepository

__all__ = ['KeyedRepository']
