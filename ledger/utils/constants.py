"""Shared constants and defaults."""

SIDES = ["Long", "Short"]

# Wildcard for the pair filter
ALL_PAIRS = "all"

# Fixed export column order, external (camelCase) name -> TradeRead attribute
CSV_COLUMNS: dict[str, str] = {
    "id": "id",
    "date": "date",
    "pair": "pair",
    "side": "side",
    "entry": "entry",
    "exit": "exit",
    "size": "size",
    "leverage": "leverage",
    "takeProfit": "take_profit",
    "stopLoss": "stop_loss",
    "notes": "notes",
    "profit": "profit",
    "roi": "roi",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

# Fields the store owns; patches may carry them but they are never applied
ENGINE_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at", "createdAt", "updatedAt"})
