"""Trade query result shape."""

# [bookDisplayName, instrumentName, quantity, tradeId, counterpartyDisplayName]
TradeRow = tuple[str, str, int, int, str]
