# schema_suggest.py
from pydantic import BaseModel
from typing import List, Literal, Optional

class Message(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str

class SuggestRequest(BaseModel):
    messages: Optional[List[Message]] = None
    entityDefinitions: Optional[List[str]] = None
