from __future__ import annotations
from pydantic import BaseModel, Field

class ProcessRequest(BaseModel):
    url: str = Field(..., description="Page to scrape, chunk and index")
    query: str = Field(..., description="Question answered from the indexed page")

class ProcessResult(BaseModel):
    url: str
    query: str
    answer: str
    chunk_count: int = 0
