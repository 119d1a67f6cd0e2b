from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field

Syntax = Literal["boolexpr", "spdx"]


class EvaluateRequest(BaseModel):
    expression: str
    context: Dict[str, bool] = Field(default_factory=dict)
    syntax: Syntax = "boolexpr"


class EvaluateResponse(BaseModel):
    expression: str
    result: bool


class CheckRequest(BaseModel):
    # dependency -> license expression
    licenses: Dict[str, str]
    allowed: List[str] = Field(default_factory=list)
    disallowed: List[str] = Field(default_factory=list)
    syntax: Syntax = "boolexpr"
    write_report: bool = False


class CheckResponse(BaseModel):
    passed: bool
    allowed: Dict[str, List[str]]
    disallowed: Dict[str, List[str]]
    unknown: Dict[str, List[str]]
    report_path: Optional[str] = None
