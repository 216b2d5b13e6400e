from pydantic import BaseModel, Field


class RerankRequest(BaseModel):
    query: str
    documents: list[str]
    model: str | None = None
    # Accepted for client compatibility, never used to truncate results.
    top_n: int | None = Field(default=None, ge=0)


class RerankResult(BaseModel):
    index: int
    relevance_score: float


class RerankResponse(BaseModel):
    results: list[RerankResult]


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
