from pydantic import BaseModel, Field


class ShortURLCreate(BaseModel):
    """Request body for creating a short URL

    long_url is kept as a plain string: it is hashed exactly as sent, so no
    normalization (trailing slashes etc.) may happen before derivation.
    """
    long_url: str = Field(..., min_length=1, description="The original URL to be shortened")
    user_id: str = Field(..., min_length=1, description="Identifier of the user creating the link")


class ShortURLCreated(BaseModel):
    message: str = "short url created successfully"
    short_url: str


class ShortURLInfo(BaseModel):
    short_url: str
    long_url: str
