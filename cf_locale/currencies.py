"""Built-in currency reference data: code -> (symbol, subunit digits)."""

from __future__ import annotations

CURRENCIES: dict[str, tuple[str, int]] = {
    "AUD": ("$", 2),
    "BHD": ("BD", 3),
    "BRL": ("R$", 2),
    "CAD": ("$", 2),
    "CHF": ("CHF", 2),
    "CLP": ("$", 0),
    "CNY": ("¥", 2),
    "CZK": ("Kč", 2),
    "DKK": ("kr", 2),
    "EUR": ("€", 2),
    "GBP": ("£", 2),
    "HKD": ("$", 2),
    "HUF": ("Ft", 2),
    "ILS": ("₪", 2),
    "INR": ("₹", 2),
    "ISK": ("kr", 0),
    "JPY": ("¥", 0),
    "KRW": ("₩", 0),
    "KWD": ("KD", 3),
    "MXN": ("$", 2),
    "NOK": ("kr", 2),
    "NZD": ("$", 2),
    "PLN": ("zł", 2),
    "RUB": ("₽", 2),
    "SEK": ("kr", 2),
    "SGD": ("$", 2),
    "THB": ("฿", 2),
    "TND": ("DT", 3),
    "TRY": ("₺", 2),
    "USD": ("$", 2),
    "VND": ("₫", 0),
    "ZAR": ("R", 2),
}
