__version__ = "0.1.0"

from wallet_amount.domain.monetary.amount import Amount
from wallet_amount.domain.monetary.currency import Currency, CurrencyType
from wallet_amount.domain.monetary.display_options import DisplayOptions, RoundingMode

__all__ = ["Amount", "Currency", "CurrencyType", "DisplayOptions", "RoundingMode"]
