from __future__ import annotations

import json
import logging
from typing import Any

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You help a couple choose a station to live near. "
    "Each of them commutes to a different workplace. "
    "For every candidate station you are given, write one short, friendly "
    "sentence explaining why it suits them, mentioning commute balance, "
    "rent and safety where relevant. Do not change the order.\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{"explanations": [{"id": "<station_id>", "reason": "<one sentence>"}]}\n'
    "Include only stations from the provided list."
)


def _build_user_message(
    preferences: dict[str, Any],
    candidates: list[dict[str, Any]],
) -> str:
    lines = ["## Preferences"]
    lines.append(f"- Workplace A: {preferences.get('workplace_a')}")
    lines.append(f"- Workplace B: {preferences.get('workplace_b')}")
    if preferences.get("budget") is not None:
        lines.append(f"- Monthly rent budget: {preferences['budget']}")
    if preferences.get("ratio") is not None:
        lines.append(f"- Weighting (0 = favour A, 100 = favour B): {preferences['ratio']}")
    if preferences.get("lambda") is not None:
        lines.append(f"- Fairness (0 = total time, 1 = longer commute): {preferences['lambda']}")

    lines.append("\n## Ranked Stations")
    lines.append("| ID | Name | A (min) | B (min) | Rent | Safety | Score |")
    lines.append("|---|---|---|---|---|---|---|")
    for c in candidates:
        lines.append(
            f"| {c['id']} | {c['name']} | {c['time_a']} | {c['time_b']} "
            f"| {c.get('rent', '?')} | {c.get('safety_score', '?')}/5 | {c.get('score', '?')} |"
        )

    return "\n".join(lines)


def explain_recommendations(
    preferences: dict[str, Any],
    candidates: list[dict[str, Any]],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> dict[str, str]:
    """
    Ask the Groq LLM for a one-sentence explanation per ranked station.

    Returns a dict mapping station id -> reason string.
    Returns empty dict on any failure (timeout, bad JSON, API error).
    """
    if not config.enabled or not config.api_key:
        return {}

    if not candidates:
        return {}

    known_ids = {str(c["id"]) for c in candidates}

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": _build_user_message(preferences, candidates),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content or ""
        parsed = json.loads(content)

        results: dict[str, str] = {}
        for item in parsed.get("explanations", []):
            sid = str(item.get("id", ""))
            reason = str(item.get("reason", "")).strip()
            if sid in known_ids and reason:
                results[sid] = reason

        return results

    except Exception:
        logger.warning("Groq LLM call failed, falling back to template explanations", exc_info=True)
        return {}
