"""Document models for the dashboard."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.core.exceptions import ValidationError

MIN_PROMPT_LENGTH = 10
MAX_TAGS = 5


class DocumentType(str, Enum):
    """Kind of artifact a document represents."""

    DOCUMENT = "document"
    SLIDE = "slide"
    SPREADSHEET = "spreadsheet"


class DocumentCategory(str, Enum):
    """Audience a document is written for."""

    BUSINESS = "business"
    PERSONAL = "personal"
    ACADEMIC = "academic"


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=False)


class Document(CamelModel):
    """Document model representing a generated or authored artifact."""

    id: str
    title: str = Field(..., min_length=1)
    type: DocumentType
    category: DocumentCategory
    content: str
    created_at: str
    ai_generated: bool = False
    tags: List[str] = Field(default_factory=list, max_length=MAX_TAGS)


class DocumentUpdate(CamelModel):
    """Mutable document fields.

    Identity, type, category, creation time and tags are fixed once a
    document exists, so they are not accepted here.
    """

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    ai_generated: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """Reject blank titles."""
        if v is not None and not v.strip():
            raise ValueError("Title is required")
        return v.strip() if v is not None else v


class CreateDocumentRequest(CamelModel):
    """Request for a new AI-generated document."""

    title: str
    type: DocumentType
    prompt: str
    category: DocumentCategory

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject blank titles."""
        if not v.strip():
            raise ValueError("Title is required")
        return v.strip()

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        """Require a prompt long enough to generate from."""
        if not v.strip():
            raise ValueError("Prompt is required")
        if len(v.strip()) < MIN_PROMPT_LENGTH:
            raise ValueError(
                f"Prompt must be at least {MIN_PROMPT_LENGTH} characters")
        return v.strip()


def parse_create_request(data: dict) -> CreateDocumentRequest:
    """
    Validate a raw create payload.

    Args:
        data: Request body.

    Returns:
        Validated create request.

    Raises:
        ValidationError: If a field is missing or invalid.
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    missing = [
        name for name in ("title", "type", "prompt", "category")
        if not data.get(name)
    ]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}")

    try:
        return CreateDocumentRequest.model_validate(data)
    except PydanticValidationError as e:
        messages = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            messages.append(f"{field}: {error['msg']}")
        raise ValidationError("; ".join(messages)) from e
