"""
Catalog Registry

A slot table of catalogs. A slot's index is the descriptor handed to
callers; slots are never renumbered, and a closed slot is reused by the
next open.
"""

from typing import List

from nlscat.errors import InvalidDescriptorError
from nlscat.parser.catalog_file import Catalog


class CatalogRegistry:
    """
    Owns open catalogs and the descriptors that name them.

    Not synchronized; MessageCatalogs wraps it in a lock.
    """

    def __init__(self):
        self._slots: List[Catalog] = []

    def __len__(self) -> int:
        """Number of slots ever allocated (open or closed)."""
        return len(self._slots)

    def open(self, catalog: Catalog) -> int:
        """Install catalog in the lowest closed slot, or a new one. Returns its descriptor."""
        catalog.is_open = True
        for descriptor, slot in enumerate(self._slots):
            if not slot.is_open:
                self._slots[descriptor] = catalog
                return descriptor
        self._slots.append(catalog)
        return len(self._slots) - 1

    def is_valid(self, descriptor: int) -> bool:
        return 0 <= descriptor < len(self._slots) and self._slots[descriptor].is_open

    def get(self, descriptor: int) -> Catalog:
        """Return the open catalog for descriptor."""
        if not self.is_valid(descriptor):
            raise InvalidDescriptorError(descriptor)
        return self._slots[descriptor]

    def close(self, descriptor: int) -> None:
        """Clear and close the catalog; the slot becomes reusable."""
        self.get(descriptor).close()

    def open_descriptors(self) -> List[int]:
        return [d for d, slot in enumerate(self._slots) if slot.is_open]
