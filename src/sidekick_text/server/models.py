from pydantic import BaseModel, Field
from typing import List, Optional

class SummarizeRequest(BaseModel):
    text: str
    max_sentences: Optional[int] = Field(None, ge=1)

class SummarizeResponse(BaseModel):
    ok: bool = True
    sentences: List[str]
    result: str

class GrammarRequest(BaseModel):
    text: str

class GrammarResponse(BaseModel):
    ok: bool = True
    suggestions: List[str]
    rewrite: str
    result: str
