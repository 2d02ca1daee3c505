"""Stock API endpoints."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from .. import crud
from ..database import Database, QueryError, get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Stock"])


@router.get("/stock/{ticker}")
async def get_stock_api(ticker: str, db: Database = Depends(get_db)):
    """Fund data rows for a ticker; an empty list when none match."""
    try:
        return await crud.get_fund_data_by_ticker(db, ticker)
    except QueryError:
        logger.exception("Fund data lookup failed for ticker %r", ticker)
        return PlainTextResponse("Server error", status_code=500)
