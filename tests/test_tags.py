"""Tests for tag inference."""

from app.services.tags import extract_meaningful_words, extract_tags


def test_meaningful_words_filters_stop_words_and_numbers():
    words = extract_meaningful_words("Create the 2025 Budget-plan for a team!")
    assert words == ["budget", "plan", "team"]


def test_meaningful_words_length_bounds():
    words = extract_meaningful_words("go cat supercalifragilistic elephant")
    assert words == ["cat", "elephant"]


def test_meaningful_words_limited_to_ten():
    text = " ".join(f"word{chr(97 + i)}" for i in range(15))
    words = extract_meaningful_words(text)
    assert len(words) == 10
    assert words[0] == "worda"
    assert words[-1] == "wordj"


def test_title_then_prompt_then_category_and_type():
    tags = extract_tags("Travel", "Packing list for mountains", "academic", "slide")
    assert tags == ["travel", "packing", "list", "mountains", "academic"]


def test_personal_document_adds_no_metadata_tags():
    tags = extract_tags("Morning Routine", "Daily habits worth keeping", "personal", "document")
    assert tags == ["morning", "routine", "daily", "habits", "worth"]
    assert "personal" not in tags
    assert "document" not in tags


def test_type_tag_added_when_room_remains():
    tags = extract_tags("Roadmap", "Quarterly milestones", "personal", "spreadsheet")
    assert tags == ["roadmap", "quarterly", "milestones", "spreadsheet"]


def test_duplicates_across_title_and_prompt_are_merged():
    tags = extract_tags("Budget Plan", "budget plan details", "personal", "document")
    assert tags == ["budget", "plan", "details"]


def test_budget_plan_scenario_is_capped_at_five():
    tags = extract_tags(
        "Budget Plan",
        "Generate a budget tracking template with income and expense categories",
        "business",
        "spreadsheet",
    )
    assert tags == ["budget", "plan", "tracking", "template", "business"]


def test_tags_are_deterministic():
    args = ("Launch Plan", "Outline product launch milestones and owners", "business", "slide")
    assert extract_tags(*args) == extract_tags(*args)


def test_tags_never_exceed_five():
    samples = [
        ("", "", "business", "slide"),
        ("One Two Three Four", "five six seven eight nine ten eleven", "academic", "spreadsheet"),
        ("Alpha Beta", "gamma delta epsilon zeta", "business", "slide"),
    ]
    for sample in samples:
        assert len(extract_tags(*sample)) <= 5


def test_empty_text_yields_only_metadata_tags():
    assert extract_tags("", "", "business", "slide") == ["business", "slide"]
