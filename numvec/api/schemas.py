from typing import List, Optional
from pydantic import BaseModel, field_validator

from numvec.config import get_settings


def _check_max_length(values: List[float]) -> List[float]:
    # Reject bodies longer than the configured limit before any vector is built
    limit = get_settings().max_vector_length
    if len(values) > limit:
        raise ValueError(f'vectors are limited to {limit} elements')
    return values


# Input schema for single-vector endpoints
class VectorIn(BaseModel):
    values: List[float]  # Vector elements in order

    @field_validator('values')
    def check_values_length(cls, v):
        return _check_max_length(v)

    model_config = {"extra": "forbid"}  # Forbid extra fields in input


# Input schema for two-vector endpoints
class VectorPairIn(BaseModel):
    u: List[float]  # Left operand
    v: List[float]  # Right operand

    @field_validator('u', 'v')
    def check_operand_length(cls, v):
        return _check_max_length(v)

    model_config = {"extra": "forbid"}


# Either the unique extreme value or the indices of a tie
class ExtremumOut(BaseModel):
    value: Optional[float] = None
    indices: Optional[List[int]] = None


# Output schema for /vector/summary
class VectorSummary(BaseModel):
    length: int          # Number of elements
    sum: float           # Sum of elements
    product: float       # Product of elements
    mean: float          # Arithmetic mean
    median: float        # Median value
    min: ExtremumOut     # Minimum (value or tied indices)
    max: ExtremumOut     # Maximum (value or tied indices)
    magnitude: float     # Euclidean length


# Output schema for endpoints returning a vector
class VectorOut(BaseModel):
    values: List[float]


# Output schema for /vector/normalize
class NormalizedOut(BaseModel):
    values: List[float]  # Unit vector (unchanged for a zero vector)
    magnitude: float     # Magnitude before normalization


# Output schema for /vector/dot
class ScalarOut(BaseModel):
    result: float
