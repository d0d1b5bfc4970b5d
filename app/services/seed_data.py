"""Sample documents used when no collection has been persisted yet."""

from typing import List

from app.models.document import Document

SEED_DOCUMENTS = [
    {
        "id": "1",
        "title": "Marketing Strategy Q1 2025",
        "type": "document",
        "category": "business",
        "content": "This comprehensive marketing strategy outlines our approach for Q1 2025, "
        "focusing on digital transformation and customer engagement initiatives.",
        "createdAt": "2025-01-15T10:30:00Z",
        "aiGenerated": True,
        "tags": ["marketing", "strategy", "Q1"],
    },
    {
        "id": "2",
        "title": "Product Launch Presentation",
        "type": "slide",
        "category": "business",
        "content": "Slide deck for the upcoming product launch event, including market analysis, "
        "product features, and go-to-market strategy.",
        "createdAt": "2025-01-14T14:20:00Z",
        "aiGenerated": True,
        "tags": ["product", "launch", "presentation"],
    },
    {
        "id": "3",
        "title": "Budget Analysis 2025",
        "type": "spreadsheet",
        "category": "business",
        "content": "Detailed financial analysis and budget projections for the fiscal year 2025, "
        "including revenue forecasts and expense breakdowns.",
        "createdAt": "2025-01-13T09:15:00Z",
        "aiGenerated": False,
        "tags": ["budget", "finance", "2025"],
    },
    {
        "id": "4",
        "title": "Research Paper: AI in Education",
        "type": "document",
        "category": "academic",
        "content": "Academic research paper exploring the impact of artificial intelligence on "
        "modern education systems and learning methodologies.",
        "createdAt": "2025-01-12T16:45:00Z",
        "aiGenerated": True,
        "tags": ["AI", "education", "research"],
    },
    {
        "id": "5",
        "title": "Personal Goal Tracker",
        "type": "spreadsheet",
        "category": "personal",
        "content": "Personal goal tracking spreadsheet for 2025, including health, career, "
        "and personal development objectives.",
        "createdAt": "2025-01-11T11:30:00Z",
        "aiGenerated": False,
        "tags": ["goals", "personal", "tracking"],
    },
]


def seed_documents() -> List[Document]:
    """Return fresh copies of the sample documents."""
    return [Document.model_validate(doc) for doc in SEED_DOCUMENTS]
