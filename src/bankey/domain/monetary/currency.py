from typing import Dict


class Currency:
    """Represents a currency with code, display symbol, and precision.

    Attributes:
        code (str): Currency code (e.g., "USD", "CAD").
        precision (int): Number of decimal places shown for amounts (0-18).
        name (str): Full currency name.
        symbol (str): Symbol drawn in front of the amount (e.g., "$").
    """

    # Class-level registry for predefined currencies
    _registry: Dict[str, "Currency"] = {}

    def __init__(self, code: str, precision: int, name: str, symbol: str):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "CAD").
            precision (int): Number of decimal places (0-18).
            name (str): Full currency name.
            symbol (str): Display symbol.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(symbol, str) or not symbol.strip():
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()
        self._symbol = symbol.strip()

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def precision(self) -> int:
        """Get the currency precision."""
        return self._precision

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.code] = currency

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """Get currency from registry by code.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The currency instance.

        Raises:
            ValueError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {list(cls._registry.keys())}")

        return cls._registry[code]

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}', '{self.symbol}')"
