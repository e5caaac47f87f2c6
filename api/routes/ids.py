"""Identifier minting and verification routes."""

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from core.errors import BatchExhausted, InvalidCount

router = APIRouter(prefix="/api/v1/ids", tags=["ids"])

# These will be set by app.py
_minter = None
_max_batch = None


def init(minter, max_batch):
    """Initialize with the minter and the largest batch a request may ask for."""
    global _minter, _max_batch
    _minter = minter
    _max_batch = max_batch


class VerifyRequest(BaseModel):
    id: str


@router.get("")
async def mint(count: int | None = Query(default=None)):
    """One id, or a sorted batch of ``count`` distinct ids."""
    if count is None:
        return {"id": _minter.mint()}
    if _max_batch is not None and count > _max_batch:
        raise HTTPException(status_code=422,
                            detail=f"Count must not exceed {_max_batch}")
    try:
        return {"ids": _minter.mint_batch(count)}
    except InvalidCount as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except BatchExhausted as exc:
        raise HTTPException(status_code=503, detail=str(exc))


@router.get("/random")
async def random_suffix():
    """A bare random suffix, without prefix or timestamp."""
    return {"random": _minter.random()}


@router.post("/verify")
async def verify(body: VerifyRequest):
    """Whether the id parses under the service's generator settings."""
    return {"id": body.id, "valid": _minter.verify(body.id)}
