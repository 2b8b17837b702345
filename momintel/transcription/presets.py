"""Scripted transcript chunks used for demo and test simulations."""

DEFAULT_PRESET = "daily-standup"

PRESETS: dict[str, tuple[str, ...]] = {
    "daily-standup": (
        "PM: Agenda: status updates and blockers",
        "Dev1: I completed the API endpoint for notifications",
        "Dev2: Decision: keep the existing auth middleware",
        "PM: Action: Dev2 should publish the rollout checklist by Friday",
        "QA: Next step is regression testing before release",
    ),
    "planning": (
        "Manager: Agenda: finalize sprint scope for next two weeks",
        "Lead: We decided to prioritize onboarding flow improvements",
        "Manager: Action: Rahul will estimate the analytics tasks",
        "Designer: Follow up on updated Figma review by tomorrow",
        "Lead: Deadline for final plan is Thursday EOD",
    ),
}


def get_preset_chunks(preset: str | None = None) -> list[str]:
    """Chunks for a preset; unknown names fall back to the default."""
    return list(PRESETS.get(preset or DEFAULT_PRESET, PRESETS[DEFAULT_PRESET]))
