SUMMARY_INSTRUCTION = "以下の字幕を要約してください。"
FOCUS_POINTS_CLAUSE = "以下の点に注目してください：{focus_points}"
TRANSCRIPT_LABEL = "字幕："


def get_summary_prompt(transcript: str, focus_points: str | None = None) -> str:
    """Build the summarization prompt for a caption transcript.

    The focus clause is left out entirely when no focus points are given.
    """
    focus_clause = FOCUS_POINTS_CLAUSE.format(focus_points=focus_points) if focus_points and focus_points.strip() else ""

    prompt_lines = [
        f"{SUMMARY_INSTRUCTION}{focus_clause}",
        "",
        TRANSCRIPT_LABEL,
        transcript,
    ]

    return "\n".join(prompt_lines)
