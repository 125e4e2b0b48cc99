"""Strict decoding of aggregation responses.

The caller picks the decoder for the shape it asked for; a response that does
not match is a :class:`DecodeError`, never an empty or zero default.
"""

from __future__ import annotations

import logging
from typing import List, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import DecodeError
from .schemas import Bucket, CardinalityResponse, TermsResponse

logger = logging.getLogger(__name__)

RawResponse = Union[bytes, str]

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _validate(model: Type[_ModelT], raw: RawResponse) -> _ModelT:
    if not isinstance(raw, (bytes, str)):
        raise DecodeError(
            f"expected raw JSON bytes or text, got {type(raw).__name__}"
        )
    try:
        parsed = model.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(f"cannot decode {model.__name__}: {exc}") from exc
    if parsed.timed_out:
        logger.warning("Search timed out; %s holds partial results", model.__name__)
    return parsed


def decode_terms(raw: RawResponse) -> List[Bucket]:
    """Return the buckets of a terms aggregation in backend order."""
    return list(_validate(TermsResponse, raw).aggregations.terms.buckets)


def decode_cardinality(raw: RawResponse) -> int:
    """Return the value of a cardinality aggregation."""
    return _validate(CardinalityResponse, raw).aggregations.cardinality.value
