"""Price adapters - Implementations of FareSourcePort.

Available implementations:
- AviasalesFareSource: Aviasales fare calendar
"""

from .aviasales_adapter import AviasalesFareSource

__all__ = ["AviasalesFareSource"]
