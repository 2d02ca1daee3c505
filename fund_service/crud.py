"""Read operations for fund data."""
from typing import Any, Dict, List

from .database import Database

FUND_DATA_BY_TICKER = "SELECT * FROM fund_data WHERE ticker = %s"


async def get_fund_data_by_ticker(db: Database, ticker: str) -> List[Dict[str, Any]]:
    """Get every fund_data row whose ticker equals the given value."""
    return await db.execute(FUND_DATA_BY_TICKER, (ticker,))
