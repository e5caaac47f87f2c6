"""Issuance statistics."""

from fastapi import APIRouter, Depends

from utils.timestamp import format_timestamp
from api.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["stats"])

# These will be set by app.py
_minter = None
_audit = None


def init(minter, audit):
    """Initialize with minter and audit logger references."""
    global _minter, _audit
    _minter = minter
    _audit = audit


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return issuance counters and audit logger stats (requires basic auth)."""
    return {
        "timestamp": format_timestamp(),
        "minter": _minter.get_stats(),
        "audit": _audit.get_stats(),
    }
