from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


class Bucket(BaseModel):
    key: StrictStr
    doc_count: StrictInt = Field(ge=0)


class TermsAggregation(BaseModel):
    buckets: List[Bucket]


class TermsAggregations(BaseModel):
    terms: TermsAggregation = Field(alias="2")


class TermsResponse(BaseModel):
    took: Optional[int] = None
    timed_out: bool = False
    aggregations: TermsAggregations


class CardinalityAggregation(BaseModel):
    value: StrictInt = Field(ge=0)


class CardinalityAggregations(BaseModel):
    cardinality: CardinalityAggregation = Field(alias="1")


class CardinalityResponse(BaseModel):
    took: Optional[int] = None
    timed_out: bool = False
    aggregations: CardinalityAggregations
