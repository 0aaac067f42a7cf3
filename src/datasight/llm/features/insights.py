"""Data insights feature - LLM-powered analysis of a loaded table."""

import json
from typing import Any

from pydantic import ValidationError

from datasight.core.logging import get_logger
from datasight.core.models.base import Result
from datasight.llm.features._base import LLMFeature
from datasight.llm.features.models import DataInsights
from datasight.llm.summary import summarize_table
from datasight.table import Table

logger = get_logger(__name__)


def strip_code_fences(content: str) -> str:
    """Remove a surrounding markdown code block, if the model added one."""
    text = content.strip()
    if not text.startswith("```"):
        return text
    lines = text.splitlines()[1:]
    if lines and lines[-1].strip().startswith("```"):
        lines = lines[:-1]
    return "\n".join(lines).strip()


class InsightsFeature(LLMFeature):
    """LLM-powered insights over a table summary.

    Two entry points share one response shape:
    - generate_insights: general business analysis
    - answer_question: analysis focused on a user question
    """

    async def generate_insights(
        self,
        table: Table,
        analysis_results: str = "",
    ) -> Result[DataInsights]:
        """Generate insights for a table.

        Args:
            table: Table to analyze
            analysis_results: Optional text of prior statistical results

        Returns:
            Result containing DataInsights
        """
        feature_config = self.config.features.data_insights
        if not feature_config.enabled:
            return Result.fail("Data insights feature is disabled in config")

        context = {"data_summary": self._summary_json(table)}
        if analysis_results:
            context["analysis_results"] = analysis_results
        return await self._run(
            "data_insights",
            feature_config.prompt_file or "data_insights",
            feature_config.model_tier,
            context,
        )

    async def answer_question(self, table: Table, question: str) -> Result[DataInsights]:
        """Answer a free-form question about a table."""
        feature_config = self.config.features.custom_analysis
        if not feature_config.enabled:
            return Result.fail("Custom analysis feature is disabled in config")
        if not question.strip():
            return Result.fail("Question must not be empty")

        context = {
            "data_summary": self._summary_json(table),
            "question": question,
        }
        return await self._run(
            "custom_analysis",
            feature_config.prompt_file or "custom_analysis",
            feature_config.model_tier,
            context,
        )

    def _summary_json(self, table: Table) -> str:
        summary = summarize_table(
            table,
            max_rows=self.config.limits.max_rows,
            privacy=self.config.privacy,
        )
        return summary.to_prompt_json(max_chars=self.config.limits.max_summary_chars)

    async def _run(
        self,
        feature_name: str,
        template_name: str,
        model_tier: str,
        context: dict[str, Any],
    ) -> Result[DataInsights]:
        try:
            rendered = self.renderer.render(template_name, context)
        except Exception as e:
            return Result.fail(f"Failed to render prompt: {e}")

        response_result = await self._call_llm(
            feature_name=feature_name,
            prompt=rendered.user,
            temperature=rendered.temperature,
            model_tier=model_tier,
            system=rendered.system,
        )
        if not response_result.success or not response_result.value:
            return Result.fail(response_result.error if response_result.error else "Unknown Error")

        response = response_result.value
        try:
            parsed = json.loads(strip_code_fences(response.content))
        except json.JSONDecodeError as e:
            logger.warning("llm_response_not_json", feature=feature_name, error=str(e))
            return Result.fail(f"Failed to parse LLM response as JSON: {e}")

        if not isinstance(parsed, dict):
            return Result.fail("LLM response is not a JSON object")

        try:
            insights = DataInsights.model_validate(parsed)
        except ValidationError as e:
            return Result.fail(f"Failed to parse insights: {e}")

        return Result.ok(
            insights.model_copy(update={"model": response.model, "cached": response.cached})
        )
