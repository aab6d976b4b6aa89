from __future__ import annotations
from pydantic import BaseModel, StrictStr
from typing import List, Optional

class AnalyzeRequest(BaseModel):
    # strict: numbers or lists are rejected instead of coerced
    text: StrictStr

class AnalyzeResult(BaseModel):
    # None when no other word is known
    value: Optional[str] = None
    lexical: Optional[str] = None

class WordList(BaseModel):
    count: int
    words: List[str]
