"""Prompt construction and post-processing for document generation."""

import re

from app.models.document import CreateDocumentRequest, DocumentCategory, DocumentType

TYPE_INSTRUCTIONS = {
    DocumentType.DOCUMENT: "Create a well-structured document with clear headings, paragraphs, and professional formatting.",
    DocumentType.SLIDE: "Create content suitable for a presentation with bullet points, clear sections, and engaging headlines.",
    DocumentType.SPREADSHEET: "Create structured data with clear columns, rows, and organized information suitable for a spreadsheet.",
}

CATEGORY_CONTEXT = {
    DocumentCategory.BUSINESS: "Focus on professional language, business terminology, and corporate standards.",
    DocumentCategory.PERSONAL: "Use a friendly, personal tone while maintaining clarity and usefulness.",
    DocumentCategory.ACADEMIC: "Use formal academic language with proper citations and scholarly approach.",
}

DOCUMENT_PROMPT_TEMPLATE = """Create a {doc_type} titled "{title}" for {category} use.

{type_instructions}
{category_context}

User prompt: {prompt}

Please generate comprehensive, high-quality content that is relevant, well-organized, up to date and professional.
The content should be substantial enough to be useful while being clear and concise.

CRITICAL INSTRUCTIONS:
- Do NOT include any specific dates, timestamps, or date signatures in the content
- Do NOT add date footers like "Date: [specific date]"
- Use relative terms like "recently", "this quarter", "current period", "latest analysis" instead
- Focus only on the main content without any date metadata
"""

# Best-effort patterns: other date formats pass through, and any
# "<word> <1-2 digits>, <4 digits>" sequence is removed even when it is not a date.
DATE_SIGNATURE_PATTERN = re.compile(
    r"\*?Date:\s*[A-Za-z]+\s+\d{1,2},?\s+\d{4}\*?", re.IGNORECASE)
MONTH_DAY_YEAR_PATTERN = re.compile(r"\b[A-Za-z]+\s+\d{1,2},?\s+\d{4}\b")
SLASH_DATE_PATTERN = re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}\b")
ISO_DATE_PATTERN = re.compile(r"\b\d{4}-\d{2}-\d{2}\b")
BLANK_LINE_RUN_PATTERN = re.compile(r"\n\s*\n(?:\s*\n)+")


def build_prompt(request: CreateDocumentRequest) -> str:
    """
    Build the natural-language generation prompt for a request.

    Args:
        request: Validated create request.

    Returns:
        Prompt text.
    """
    return DOCUMENT_PROMPT_TEMPLATE.format(
        doc_type=request.type.value,
        title=request.title,
        category=request.category.value,
        type_instructions=TYPE_INSTRUCTIONS[request.type],
        category_context=CATEGORY_CONTEXT[request.category],
        prompt=request.prompt,
    )


def clean_generated_content(content: str) -> str:
    """
    Strip literal dates from generated text and normalize blank lines.

    Args:
        content: Raw model output.

    Returns:
        Cleaned text.
    """
    cleaned = DATE_SIGNATURE_PATTERN.sub("", content)
    cleaned = MONTH_DAY_YEAR_PATTERN.sub("", cleaned)
    cleaned = SLASH_DATE_PATTERN.sub("", cleaned)
    cleaned = ISO_DATE_PATTERN.sub("", cleaned)
    cleaned = BLANK_LINE_RUN_PATTERN.sub("\n\n", cleaned)
    return cleaned.strip()
