from pydantic import BaseModel, NonNegativeInt


# Pydantic schema for creating a Comment on an existing Link
class CommentCreate(BaseModel):
    body: str
    link_id: NonNegativeInt
