from pydantic import BaseModel, ConfigDict, Field


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    author: str
    text: str = Field(min_length=1)
    lang: str
    category: str


class Dataset(BaseModel):
    """Quotes loaded at startup together with the ETag of their source bytes."""

    model_config = ConfigDict(frozen=True)

    quotes: tuple[Quote, ...]
    etag: str


class FilterSpec(BaseModel):
    """Per request filter. Empty string means no constraint on that field."""

    model_config = ConfigDict(frozen=True)

    quote_id: str = ""
    lang: str = ""
    category: str = ""


class QuoteResponse(BaseModel):
    count: int
    result: list[Quote]

