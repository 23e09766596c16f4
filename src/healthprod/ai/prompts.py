"""Prompt builders for AI gateway requests."""

import json
from collections.abc import Sequence

from ..activities.models import Activity
from ..tasks.models import Task

JSON_ONLY = "Respond with only the JSON, no surrounding prose."

MEAL_ANALYSIS_PROMPT = (
    "Analyze this meal. Estimate the total calories and provide a brief nutritional "
    "breakdown (protein, carbs, fats). Present it clearly."
)


def _activity_line(activity: Activity, with_notes: bool = False) -> str:
    line = (
        f"- {activity.type.value}: {activity.start_time:%Y-%m-%d %H:%M} to "
        f"{activity.end_time:%Y-%m-%d %H:%M} ({activity.duration_hours:.1f} hours)"
    )
    if with_notes:
        line += f". Notes: {activity.notes or 'N/A'}"
    return line


def insights_prompt(activities: Sequence[Activity]) -> str:
    """Prompt asking for lifestyle insights over recent activities."""
    lines = "\n".join(_activity_line(a) for a in activities)
    return (
        "As a lifestyle habit coach, analyze the following daily activities and provide "
        "personalized, actionable insights and recommendations. Focus on patterns in sleep, "
        "meals, study, work, and exercise. The tone should be encouraging and helpful. "
        "Format the output as clean markdown.\n\n"
        f"Here are the activities from the last few days:\n{lines}"
    )


def daily_report_prompt(activities: Sequence[Activity]) -> str:
    """Prompt asking for a JSON end-of-day report."""
    lines = "\n".join(_activity_line(a, with_notes=True) for a in activities)
    return (
        "Analyze the following activities from a single day and generate a comprehensive "
        "end-of-day report in JSON format.\n\n"
        f"Activities:\n{lines}\n\n"
        "The JSON object must have these keys:\n"
        '1. "productivityScore": a number from 0 to 100 representing overall productivity. '
        "High scores for focused work/study, balanced with breaks and exercise. Low scores "
        "for too much distraction or imbalance.\n"
        '2. "summary": a short, encouraging paragraph (2-3 sentences) summarizing the '
        "day's accomplishments and patterns.\n"
        '3. "recommendations": a brief point about one area for potential improvement '
        "(e.g., sleep schedule, break frequency).\n"
        '4. "nextDayTodoList": an array of 3 suggested, actionable to-do items for the '
        "next day based on today's activities.\n\n"
        f"{JSON_ONLY}"
    )


def prioritize_prompt(tasks: Sequence[Task]) -> str:
    """Prompt asking for a priority per task, in input order."""
    payload = [{"description": t.description, "deadline": t.deadline} for t in tasks]
    return (
        "As an expert productivity assistant, analyze the following list of tasks. For each "
        "task, assign a priority level: 'Urgent', 'High', 'Medium', or 'Low'. Base your "
        "decision on keywords related to deadlines, importance, and effort. Return a JSON "
        "array in the same order as the input, where each object has the original "
        "'description' and 'deadline', plus the new 'priority' you assigned.\n\n"
        f"Tasks to prioritize:\n{json.dumps(payload, indent=2)}\n\n"
        f"{JSON_ONLY}"
    )


def knowledge_card_prompt() -> str:
    """Prompt asking for one knowledge feed card."""
    return (
        "Generate a single, bite-sized piece of content for a user's daily knowledge feed "
        "in a productivity app. The content should be interesting and actionable. Choose "
        "one of the following categories: 'Productivity Hack', 'Fun Fact' (related to tech "
        "or science), 'Quote' (inspirational), or 'Challenge' (a small, one-day task). "
        'Return a single JSON object with the keys "title", "content" and "category".\n\n'
        f"{JSON_ONLY}"
    )


__all__ = [
    "MEAL_ANALYSIS_PROMPT",
    "daily_report_prompt",
    "insights_prompt",
    "knowledge_card_prompt",
    "prioritize_prompt",
]
