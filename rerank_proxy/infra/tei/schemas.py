from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class TEIRerankRequest(BaseModel):
    query: str
    texts: list[str]


class TEIRankResult(BaseModel):
    model_config = ConfigDict(strict=True)

    index: int = Field(ge=0)
    # NaN/Infinity literals are not JSON.
    score: float = Field(allow_inf_nan=False)


TEIRerankResponse = TypeAdapter(list[TEIRankResult])
