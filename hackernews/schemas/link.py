from pydantic import BaseModel


# Pydantic schema for creating a Link
class LinkCreate(BaseModel):
    url: str
    description: str
