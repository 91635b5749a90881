from bankey.domain.monetary.currency import Currency


USD = Currency("USD", 2, "US Dollar", "$")
CAD = Currency("CAD", 2, "Canadian Dollar", "$")
EUR = Currency("EUR", 2, "Euro", "€")
GBP = Currency("GBP", 2, "British Pound", "£")
JPY = Currency("JPY", 0, "Japanese Yen", "¥")

# Register all predefined currencies
Currency.register(USD, overwrite=True)
Currency.register(CAD, overwrite=True)
Currency.register(EUR, overwrite=True)
Currency.register(GBP, overwrite=True)
Currency.register(JPY, overwrite=True)
