from wallet_amount.domain.monetary.currency import Currency, CurrencyType


# Fiat currencies
USD = Currency("USD", 2, "US Dollar", CurrencyType.FIAT)
EUR = Currency("EUR", 2, "Euro", CurrencyType.FIAT)
GBP = Currency("GBP", 2, "British Pound", CurrencyType.FIAT)
JPY = Currency("JPY", 0, "Japanese Yen", CurrencyType.FIAT, display_decimals=0)

# Crypto currencies
ETH = Currency("ETH", 18, "Ethereum", CurrencyType.CRYPTO)
BTC = Currency("BTC", 8, "Bitcoin", CurrencyType.CRYPTO)
YLD = Currency("YLD", 18, "Yield Token", CurrencyType.CRYPTO)
H1 = Currency("H1", 18, "H1 Token", CurrencyType.CRYPTO, fiat_convertible=False)

# Stablecoins
USDT = Currency("USDT", 6, "Tether", CurrencyType.STABLECOIN, display_decimals=4)
USDC = Currency("USDC", 6, "USD Coin", CurrencyType.STABLECOIN, display_decimals=4)
DAI = Currency("DAI", 18, "Dai", CurrencyType.STABLECOIN)

# Used when an amount refers to a symbol that is not registered
DEFAULT_CURRENCY = YLD

# Register all predefined currencies
Currency.register(USD, overwrite=True)
Currency.register(EUR, overwrite=True)
Currency.register(GBP, overwrite=True)
Currency.register(JPY, overwrite=True)
Currency.register(ETH, overwrite=True)
Currency.register(BTC, overwrite=True)
Currency.register(YLD, overwrite=True)
Currency.register(H1, overwrite=True)
Currency.register(USDT, overwrite=True)
Currency.register(USDC, overwrite=True)
Currency.register(DAI, overwrite=True)
