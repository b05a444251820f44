from .coindesk import CoinDeskProvider

__all__ = ['CoinDeskProvider']
