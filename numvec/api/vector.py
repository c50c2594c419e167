import logging

from fastapi import APIRouter

from numvec.services.analysis import combine, dot_product, normalized, vector_summary
from numvec.api.schemas import (
    NormalizedOut,
    ScalarOut,
    VectorIn,
    VectorOut,
    VectorPairIn,
    VectorSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vector")

# Vector errors raised below propagate to the handler registered in numvec.main,
# which turns them into 400 responses.


@router.post("/summary", response_model=VectorSummary, response_model_exclude_none=True)
async def summary(body: VectorIn):
    """
    Accepts a JSON body with 'values'.
    Returns length, sum, product, mean, median, min, max and magnitude.
    Min and max carry either 'value' or, on a tie, 'indices'.
    """
    logger.debug("summary of %d values", len(body.values))
    return VectorSummary(**vector_summary(body.values))


@router.post("/normalize", response_model=NormalizedOut)
async def normalize(body: VectorIn):
    return NormalizedOut(**normalized(body.values))


@router.post("/dot", response_model=ScalarOut)
async def dot(body: VectorPairIn):
    return ScalarOut(result=dot_product(body.u, body.v))


async def _combine(operation: str, body: VectorPairIn) -> VectorOut:
    logger.debug("%s of vectors with %d and %d values", operation, len(body.u), len(body.v))
    return VectorOut(values=combine(operation, body.u, body.v))


@router.post("/cross", response_model=VectorOut)
async def cross(body: VectorPairIn):
    """Cross product; vectors must have equal length of at least 3."""
    return await _combine("cross", body)


@router.post("/add", response_model=VectorOut)
async def add(body: VectorPairIn):
    return await _combine("add", body)


@router.post("/subtract", response_model=VectorOut)
async def subtract(body: VectorPairIn):
    return await _combine("subtract", body)


@router.post("/concat", response_model=VectorOut)
async def concat(body: VectorPairIn):
    return await _combine("concat", body)
