"""
FastAPI application exposing the reconciliation engine.
Receives receipts and transactions from the caller and returns matches as JSON.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import AliasChoices, BaseModel, Field
import structlog

from .config import get_settings
from .exceptions import ContractViolationError
from .logging_config import setup_logging
from .reconciliation import ReconciliationEngine

logger = structlog.get_logger()
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging(settings)
    logger.info("Starting Expense Reconciliation API", env=settings.app_env)
    yield
    logger.info("Shutting down Expense Reconciliation API")


app = FastAPI(
    title="Expense Reconciliation",
    description="Matches receipts to bank statement transactions",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


# Request/Response models
class MatchRequest(BaseModel):
    receipts: Optional[List[Any]] = None
    transactions: Optional[List[Any]] = None
    user_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("user_id", "userId"),
    )


class MatchOut(BaseModel):
    receipt_id: str
    transaction_id: str
    confidence_score: float
    matching_factors: List[str]
    receipt: Dict[str, Any]
    transaction: Dict[str, Any]


class SummaryOut(BaseModel):
    total_receipts: int
    total_transactions: int
    matched_count: int
    unmatched_receipts: int


class MatchResponse(BaseModel):
    matches: List[MatchOut]
    summary: SummaryOut


# API Endpoints
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.post("/api/match-transactions", response_model=MatchResponse)
def match_transactions(request: MatchRequest):
    """Match receipts to transactions and return matches with a summary."""
    engine = ReconciliationEngine(settings)

    try:
        result = engine.run(request.receipts, request.transactions, user_id=request.user_id)
    except ContractViolationError as e:
        logger.warning("Rejected match request", error=str(e))
        raise HTTPException(400, str(e))
    except Exception:
        logger.exception("Error matching transactions")
        raise

    return result.to_dict()
