"""Keyword-based next-step suggestions for improvement notes."""

SHORT_NOTE_LENGTH = 10

_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("procrast", "delay", "拖延"),
        "Break the task into 10-minute steps and start the first one now.",
    ),
    (
        ("sleep", "熬夜", "晚睡"),
        "Set an alarm to wind down 30 minutes earlier and keep a fixed bedtime.",
    ),
    (
        ("exercise", "運動", "健身", "跑步"),
        "Schedule 20 minutes of light exercise tomorrow and put it in your calendar.",
    ),
    (
        ("communicat", "溝通", "衝突", "誤會"),
        "Open with an I-statement that states the facts and what you need.",
    ),
    (
        ("focus", "專注", "分心"),
        "Work in 25/5 pomodoros with notifications off, one task at a time.",
    ),
)
_TOO_VAGUE = "Make the note more specific about the behavior and its next step."
_DEFAULT = "Pin down the next step and a 10-minute first move for it."


def suggest_next_step(text: str | None) -> str:
    """Return a short actionable tip for an improvement note."""
    lowered = (text or "").lower()
    for keywords, suggestion in _RULES:
        if any(keyword in lowered for keyword in keywords):
            return suggestion
    if len(lowered) < SHORT_NOTE_LENGTH:
        return _TOO_VAGUE
    return _DEFAULT
