from .account_service import AccountLookup, AccountService
from .coin_service import CoinListing, CoinService
from .order_service import OrderService
from .rate_service import RateService

__all__ = ['AccountLookup', 'AccountService', 'CoinListing', 'CoinService', 'OrderService', 'RateService']
