from __future__ import annotations

from typing import Any, Dict, List

PROMPT_TEMPLATE = """
You are a specialist content quality analyst. Your task is to compare feedback for a specific module from two different teaching periods.
First, analyze each period's feedback independently. Then, provide a comparative summary and a final list of consolidated action points.

IMPORTANT: Your analysis for both periods must focus exclusively on the quality of the content. Ignore any comments related to the trainer, instructor, presenter, or teaching style.

**Analysis for Teaching Period 1 (using the first CSV):**
1.  **Sentiment Analysis:** Calculate the percentage of positive, neutral, and negative sentiment for all content-related comments.
2.  **Thematic Analysis:** Identify the top 3-5 recurring themes related to the module's content.
3.  **Content Strengths:** Identify 2-3 key strengths of the content, supported by direct quotes.
4.  **Areas for Improvement:** Identify the top 2-3 critical areas for content improvement, with suggestions and direct quotes.

**Analysis for Teaching Period 2 (using the second CSV):**
1.  **Sentiment Analysis:** Calculate sentiment percentages.
2.  **Thematic Analysis:** Identify top recurring themes.
3.  **Content Strengths:** Identify key strengths with quotes.
4.  **Areas for Improvement:** Identify critical areas for improvement with quotes.

**Then, provide a Comparative Summary:**
Synthesize the findings from both periods. Highlight key trends, changes in sentiment, recurring vs. new themes, and whether issues from Period 1 were addressed or persisted in Period 2.

**Finally, provide Consolidated Action Points:**
Based on the *entire* analysis of both periods, create a list of the 3-5 most critical, actionable steps that should be taken to improve the module's content. For each action point, provide a brief rationale explaining why it's important, drawing from the feedback.

Return your complete analysis in the specified JSON format.

Teaching Period 1 CSV:
```csv
{period1_csv}
```

Teaching Period 2 CSV:
```csv
{period2_csv}
```
"""


def _string() -> Dict[str, Any]:
    return {"type": "STRING"}


def _string_list() -> Dict[str, Any]:
    return {"type": "ARRAY", "items": _string()}


def _object(properties: Dict[str, Any], required: List[str]) -> Dict[str, Any]:
    # required lists must match the required fields of domain/models.py
    return {"type": "OBJECT", "properties": properties, "required": required}


SENTIMENT_SCHEMA: Dict[str, Any] = _object(
    {
        "positive": {"type": "NUMBER"},
        "neutral": {"type": "NUMBER"},
        "negative": {"type": "NUMBER"},
    },
    ["positive", "neutral", "negative"],
)

THEME_SCHEMA: Dict[str, Any] = _object({"theme": _string(), "summary": _string()}, ["theme", "summary"])

STRENGTH_SCHEMA: Dict[str, Any] = _object({"strength": _string(), "quotes": _string_list()}, ["strength"])

IMPROVEMENT_SCHEMA: Dict[str, Any] = _object(
    {"area": _string(), "suggestion": _string(), "quotes": _string_list()},
    ["area", "suggestion"],
)

ACTION_POINT_SCHEMA: Dict[str, Any] = _object(
    {"action": _string(), "rationale": _string()}, ["action", "rationale"]
)

PERIOD_ANALYSIS_SCHEMA: Dict[str, Any] = _object(
    {
        "sentiment": SENTIMENT_SCHEMA,
        "thematicAnalysis": {"type": "ARRAY", "items": THEME_SCHEMA},
        "contentStrengths": {"type": "ARRAY", "items": STRENGTH_SCHEMA},
        "improvementAreas": {"type": "ARRAY", "items": IMPROVEMENT_SCHEMA},
    },
    [],
)

RESPONSE_SCHEMA: Dict[str, Any] = _object(
    {
        "comparativeSummary": _string(),
        "period1Analysis": PERIOD_ANALYSIS_SCHEMA,
        "period2Analysis": PERIOD_ANALYSIS_SCHEMA,
        "actionPoints": {"type": "ARRAY", "items": ACTION_POINT_SCHEMA},
    },
    ["comparativeSummary", "period1Analysis", "period2Analysis"],
)


def build_prompt(period1_csv: str, period2_csv: str) -> str:
    return PROMPT_TEMPLATE.format(period1_csv=period1_csv, period2_csv=period2_csv)
