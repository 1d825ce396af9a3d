"""
Ingredient price table and regional multipliers.

Base prices are approximate US grocery prices (USD) for the amount a typical
home recipe uses. Lookup is substring containment in declaration order, so
compound keys ("chicken broth", "olive oil", "eggplant") are declared before
the broader keys they contain ("chicken", "oil", "egg").
"""

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

DEFAULT_KEY = "default"

# Ordered (key, base_price_usd) pairs. Order is the tie-break.
DEFAULT_PRICES: List[Tuple[str, float]] = [
    # Compound keys that contain a broader key
    ("chicken broth", 2.50),
    ("beef broth", 2.50),
    ("vegetable broth", 2.50),
    ("chicken breast", 5.00),
    ("chicken thigh", 3.50),
    ("ground beef", 6.00),
    ("sweet potato", 1.25),
    ("bell pepper", 2.00),
    ("green bean", 3.00),
    ("sour cream", 3.00),
    ("peanut butter", 3.50),
    ("peanut", 4.00),
    ("peppercorn", 3.00),
    ("butternut squash", 2.50),
    ("chickpea", 1.50),
    ("peach", 0.75),
    ("pear", 0.75),
    ("coconut milk", 2.50),
    ("olive oil", 8.00),
    ("vegetable oil", 3.00),
    ("soy sauce", 3.00),
    ("eggplant", 2.00),
    ("pineapple", 3.00),

    # Proteins
    ("chicken", 4.50),
    ("beef", 8.00),
    ("steak", 12.00),
    ("pork", 5.00),
    ("bacon", 7.00),
    ("ham", 5.00),
    ("sausage", 5.50),
    ("salmon", 12.00),
    ("tuna", 8.00),
    ("shrimp", 10.00),
    ("fish", 8.00),
    ("turkey", 4.00),
    ("lamb", 10.00),
    ("tofu", 2.50),
    ("egg", 0.25),
    ("bean", 1.50),
    ("lentil", 1.50),

    # Vegetables
    ("tomato", 0.50),
    ("onion", 1.00),
    ("garlic", 0.50),
    ("carrot", 1.50),
    ("celery", 1.50),
    ("potato", 1.00),
    ("mushroom", 4.00),
    ("spinach", 3.00),
    ("lettuce", 2.00),
    ("broccoli", 2.50),
    ("cauliflower", 2.50),
    ("zucchini", 2.00),
    ("cucumber", 1.00),
    ("corn", 1.50),
    ("pea", 2.00),
    ("avocado", 1.50),
    ("cabbage", 1.50),
    ("kale", 3.00),

    # Fruit
    ("apple", 0.75),
    ("banana", 0.30),
    ("lemon", 0.50),
    ("lime", 0.50),
    ("orange", 0.75),
    ("berr", 4.00),

    # Dairy
    ("milk", 3.50),
    ("cheese", 5.00),
    ("butter", 4.00),
    ("cream", 4.00),
    ("yogurt", 4.00),

    # Grains & starches
    ("rice", 2.00),
    ("pasta", 2.00),
    ("noodle", 2.00),
    ("bread", 3.00),
    ("tortilla", 2.50),
    ("flour", 1.50),
    ("oat", 2.00),
    ("quinoa", 5.00),

    # Pantry
    ("oil", 3.00),
    ("vinegar", 3.00),
    ("honey", 6.00),
    ("sugar", 2.00),
    ("salt", 0.50),
    ("pepper", 2.00),
    ("herb", 2.50),
    ("spice", 3.00),

    (DEFAULT_KEY, 2.00),
]

# ISO-3166 alpha-2 -> cost-of-groceries multiplier relative to the US
DEFAULT_MULTIPLIERS: Dict[str, float] = {
    "US": 1.0,
    "CA": 1.15,
    "MX": 0.55,
    "BR": 0.6,
    "AR": 0.5,
    "GB": 1.1,
    "IE": 1.15,
    "FR": 1.1,
    "DE": 1.05,
    "ES": 0.9,
    "IT": 1.0,
    "NL": 1.05,
    "CH": 1.6,
    "NO": 1.45,
    "SE": 1.2,
    "PL": 0.65,
    "TR": 0.45,
    "IN": 0.35,
    "PK": 0.3,
    "CN": 0.65,
    "JP": 1.2,
    "KR": 1.3,
    "SG": 1.2,
    "TH": 0.55,
    "ID": 0.45,
    "PH": 0.55,
    "AU": 1.25,
    "NZ": 1.2,
    "ZA": 0.55,
    "NG": 0.4,
    "EG": 0.35,
    "AE": 1.05,
    DEFAULT_KEY: 1.0,
}


class IngredientPriceTable:
    """
    Ordered ingredient price table plus country multipliers.

    Entries are checked in the order given; the first key contained in the
    ingredient wins. Both tables must carry a "default" entry.
    """

    def __init__(
        self,
        prices: Optional[Iterable[Tuple[str, float]]] = None,
        multipliers: Optional[Mapping[str, float]] = None,
    ):
        entries = list(prices if prices is not None else DEFAULT_PRICES)
        regions = dict(multipliers if multipliers is not None else DEFAULT_MULTIPLIERS)

        seen = set()
        self._entries: List[Tuple[str, float]] = []
        default_price = None
        for key, price in entries:
            key = key.strip().lower()
            if key in seen:
                raise ValueError(f"Duplicate price table key: '{key}'")
            seen.add(key)
            if key == DEFAULT_KEY:
                default_price = float(price)
            else:
                self._entries.append((key, float(price)))

        if default_price is None:
            raise ValueError("Price table requires a 'default' entry")
        self.default_price = default_price

        self._multipliers: Dict[str, float] = {}
        for code, value in regions.items():
            if value <= 0:
                raise ValueError(f"Multiplier for '{code}' must be positive, got {value}")
            normalized_code = DEFAULT_KEY if code == DEFAULT_KEY else code.upper()
            self._multipliers[normalized_code] = float(value)

        if DEFAULT_KEY not in self._multipliers:
            raise ValueError("Multiplier table requires a 'default' entry")
        self.default_multiplier = self._multipliers[DEFAULT_KEY]

    def lookup(self, normalized_ingredient: str) -> float:
        """Base USD price of the first key contained in the ingredient"""
        for key, price in self._entries:
            if key in normalized_ingredient:
                return price
        return self.default_price

    def multiplier(self, country_code: str) -> float:
        """Regional multiplier, or the default multiplier for unknown codes"""
        if not country_code or country_code == DEFAULT_KEY:
            return self.default_multiplier
        return self._multipliers.get(country_code.upper(), self.default_multiplier)

    @property
    def keys(self) -> List[str]:
        """Price keys in lookup order, excluding the default"""
        return [key for key, _ in self._entries]
