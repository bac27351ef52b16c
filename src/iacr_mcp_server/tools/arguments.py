"""Argument models for the IACR tools.

Each tool has one pydantic model; ``validate_arguments`` turns the raw
argument bag from the client into the matching model or raises
``ValidationError`` naming the bad fields.
"""

from typing import Any, Literal

import pydantic
from pydantic import BaseModel, Field

from ..config import Settings
from ..errors import UnknownToolError, ValidationError

settings = Settings()


class SearchPapersArgs(BaseModel):
    query: str = Field(min_length=1, strict=True)
    year: int | None = Field(default=None, strict=True)
    # Accepted for compatibility; matching ignores it.
    category: str | None = Field(default=None, strict=True)
    max_results: int = Field(default=settings.DEFAULT_MAX_RESULTS, ge=0, strict=True)


class GetPaperDetailsArgs(BaseModel):
    paper_id: str = Field(strict=True)


class DownloadPaperArgs(BaseModel):
    paper_id: str = Field(strict=True)
    format: Literal["pdf", "txt"] = "pdf"


ToolArguments = SearchPapersArgs | GetPaperDetailsArgs | DownloadPaperArgs

ARGUMENT_MODELS: dict[str, type[BaseModel]] = {
    "search_papers": SearchPapersArgs,
    "get_paper_details": GetPaperDetailsArgs,
    "download_paper": DownloadPaperArgs,
}


def validate_arguments(name: str, arguments: dict[str, Any] | None) -> ToolArguments:
    """Validate and default the arguments for tool ``name``."""
    model = ARGUMENT_MODELS.get(name)
    if model is None:
        raise UnknownToolError(name)
    try:
        return model.model_validate(arguments or {})
    except pydantic.ValidationError as e:
        fields = {}
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"]) or "arguments"
            fields[field] = err["msg"]
        raise ValidationError(name, fields) from e
