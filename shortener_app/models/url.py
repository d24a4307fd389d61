from pydantic import BaseModel, ConfigDict, Field


class URLPair(BaseModel):
    """
    A single short code -> original URL mapping.

    Pairs are immutable: once stored they are never updated or removed,
    they only live until the process exits.
    """
    original: str = Field(..., min_length=1, description="The original URL")
    short: str = Field(..., min_length=1, description="Generated short code")

    model_config = ConfigDict(frozen=True)
