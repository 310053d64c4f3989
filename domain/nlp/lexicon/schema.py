from pydantic import BaseModel


class NLPToken(BaseModel):
    form: str  # surface form as it appears in the text
