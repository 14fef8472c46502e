from dataclasses import dataclass
from decimal import Decimal

SUPPORTED_PAIRS: tuple[str, ...] = (
    "USDT-INR",
    "USDC-INR",
    "BTC-INR",
    "ETH-INR",
    "USDT-USD",
    "USDC-USD",
)

# Served when the upstream instrument listing can't be reached
FALLBACK_INSTRUMENTS: tuple[str, ...] = (
    "USDT.INR",
    "USDT.USD",
    "USDT.EUR",
    "USDT.GBP",
    "USDT.CAD",
    "USDT.AUD",
)


@dataclass(frozen=True)
class Coin:
    symbol: str
    name: str
    type: str
    base_price: Decimal


COINS: tuple[Coin, ...] = (
    Coin("USDT", "Tether", "stablecoin", Decimal("1.00")),
    Coin("USDC", "USD Coin", "stablecoin", Decimal("1.00")),
    Coin("USDE", "USD Digital", "stablecoin", Decimal("0.99")),
    Coin("FDUSD", "First Digital USD", "stablecoin", Decimal("1.00")),
    Coin("USDS", "USD Stablecoin", "stablecoin", Decimal("1.00")),
    Coin("DAI", "Multi-Collateral Dai", "stablecoin", Decimal("1.00")),
    Coin("BTC", "Bitcoin", "crypto", Decimal("45000")),
    Coin("ETH", "Ethereum", "crypto", Decimal("2800")),
    Coin("BNB", "Binance Coin", "crypto", Decimal("320")),
    Coin("SOL", "Solana", "crypto", Decimal("95")),
)

# Display colour per provider on the coin board
PROVIDER_COLORS: dict[str, str] = {
    "Zodia": "bg-blue-500",
    "TransFi": "bg-green-500",
    "Ramp": "bg-purple-500",
}
