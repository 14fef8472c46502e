from datetime import UTC, datetime, timedelta

# Returned in place of upstream account data when the account API can't be reached
FALLBACK_NOTE = "Using mock data due to API error"

TRANSFER_FIELDS: tuple[str, ...] = ("from", "to", "amount", "ccy", "accountGroupUuid")

FALLBACK_ACCOUNT: dict = {
    "account": {
        "primary": {"available": 10000.00, "balance": 10000.00, "currency": "USD"},
        "brokerage": {"available": 5000.00, "balance": 5000.00, "currency": "USD"},
        "tradeAheadBalance": 1000.00,
        "availableBalance": 15000.00,
        "balance": 15000.00,
    }
}

FALLBACK_LIMITS: dict = {
    "limits": {
        "daily": 100000.00,
        "monthly": 1000000.00,
        "currency": "USD",
        "remaining": {"daily": 75000.00, "monthly": 850000.00},
    }
}


def fallback_transactions(now: datetime | None = None) -> dict:
    now = now or datetime.now(tz=UTC)
    return {
        "transactions": [
            {
                "id": "TXN_001",
                "transactionClass": "RFSTRADE",
                "transactionState": "PROCESSED",
                "transactionType": "TRADE_CREDIT",
                "amount": 1000.00,
                "currency": "USD",
                "timestamp": now.isoformat(),
                "description": "BTC purchase",
            },
            {
                "id": "TXN_002",
                "transactionClass": "COIN",
                "transactionState": "PROCESSED",
                "transactionType": "DEPOSIT",
                "amount": 0.05,
                "currency": "BTC",
                "timestamp": (now - timedelta(days=1)).isoformat(),
                "description": "BTC deposit",
            },
        ]
    }


def fallback_transfers(now: datetime | None = None) -> dict:
    now = now or datetime.now(tz=UTC)
    return {
        "transfers": [
            {
                "id": "TRF_001",
                "fromType": "AVAILABLE",
                "toType": "BROKERAGE",
                "amount": 5000.00,
                "currency": "USD",
                "timestamp": now.isoformat(),
                "status": "COMPLETED",
            },
            {
                "id": "TRF_002",
                "fromType": "BROKERAGE",
                "toType": "AVAILABLE",
                "amount": 1000.00,
                "currency": "USD",
                "timestamp": (now - timedelta(days=1)).isoformat(),
                "status": "COMPLETED",
            },
        ]
    }
