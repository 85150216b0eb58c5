"""Currency adapters - Implementations of CurrencyRatePort.

Available implementations:
- CurrencyConverterApiRates: free.currencyconverterapi.com
"""

from .currency_converter_adapter import CurrencyConverterApiRates

__all__ = ["CurrencyConverterApiRates"]
