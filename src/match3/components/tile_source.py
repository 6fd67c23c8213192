from dataclasses import dataclass
from typing import Any

from match3.errors import SupplierExhaustedError


@dataclass(slots=True)
class TileSource:
    """External tile-value supplier attached to the board entity.

    ``supplier`` is either an iterator or a zero-argument callable.
    """
    supplier: Any
    drawn: int = 0

    def next_value(self) -> Any:
        if callable(self.supplier) and not hasattr(self.supplier, "__next__"):
            value = self.supplier()
        else:
            try:
                value = next(self.supplier)
            except StopIteration as exc:
                raise SupplierExhaustedError(
                    f"Tile supplier exhausted after {self.drawn} values"
                ) from exc
        self.drawn += 1
        return value
