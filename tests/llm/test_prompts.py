"""Tests for prompt template rendering."""

import pytest
from pydantic import ValidationError

from datasight.llm.prompts import PromptRenderer, PromptTemplate


def test_available_templates(renderer):
    assert renderer.available() == ["custom_analysis", "data_insights"]


def test_loads_templates(renderer):
    template = renderer.load_template("data_insights")

    assert template.name == "data_insights"
    assert template.system_prompt
    assert template.inputs["data_summary"].required
    assert template.placeholders == {"data_summary", "analysis_results"}


def test_renders_data_insights(renderer):
    rendered = renderer.render("data_insights", {"data_summary": '{"total_rows": 3}'})

    assert rendered.system
    assert '{"total_rows": 3}' in rendered.user
    # Default for the optional input
    assert "None provided." in rendered.user
    # Doubled braces become literal JSON braces
    assert '"executiveSummary"' in rendered.user
    assert rendered.temperature == pytest.approx(0.2)


def test_renders_custom_analysis(renderer):
    rendered = renderer.render(
        "custom_analysis", {"data_summary": "{}", "question": "Which region sells most?"}
    )
    assert "Which region sells most?" in rendered.user


def test_context_values_are_not_reformatted(renderer):
    rendered = renderer.render("data_insights", {"data_summary": "{not_a_field}"})
    assert "{not_a_field}" in rendered.user


def test_missing_required_input(renderer):
    with pytest.raises(ValueError, match="question"):
        renderer.render("custom_analysis", {"data_summary": "{}"})


def test_missing_template(renderer):
    with pytest.raises(FileNotFoundError, match="data_insights"):
        renderer.load_template("nope")


def test_undeclared_placeholder_is_rejected(tmp_path):
    (tmp_path / "broken.yaml").write_text(
        "name: broken\nversion: '1'\ndescription: x\nuser_prompt: 'Hello {who}'\n"
    )
    with pytest.raises(ValidationError, match="who"):
        PromptRenderer(tmp_path).load_template("broken")


def test_placeholders_from_inline_template():
    template = PromptTemplate(
        name="t",
        version="1",
        description="",
        user_prompt="[{note}]",
        inputs={"note": {"required": False}},
    )
    assert template.placeholders == {"note"}


def test_templates_are_cached(renderer):
    assert renderer.load_template("data_insights") is renderer.load_template("data_insights")
    renderer.clear_cache()
    assert renderer._templates == {}
