"""MoM snapshot history and line-level diffing."""

import structlog

from momintel.errors import InsufficientVersionsError, VersionNotFoundError
from momintel.models.meeting import Meeting
from momintel.models.mom_version import MomDiff, MomVersion

logger = structlog.get_logger()

DEFAULT_HISTORY_LIMIT = 50
DIFF_LINE_LIMIT = 30


def diff_mom_text(old_text: str | None, new_text: str | None) -> MomDiff:
    """Set-membership line diff.

    A line counts as removed when it appears nowhere in the new text and as
    added when it appears nowhere in the old text, so lines that only moved
    are not reported.
    """
    old_lines = (old_text or "").split("\n")
    new_lines = (new_text or "").split("\n")
    old_set = set(old_lines)
    new_set = set(new_lines)

    return MomDiff(
        removed=[line for line in old_lines if line not in new_set][:DIFF_LINE_LIMIT],
        added=[line for line in new_lines if line not in old_set][:DIFF_LINE_LIMIT],
    )


class VersionStore:
    """Append-only, capped MoM snapshot history kept on the meeting."""

    def __init__(self, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self._history_limit = history_limit

    def append(self, meeting: Meeting, text: str, reason: str = "update") -> MomVersion:
        """Snapshot ``text`` unless it equals the latest stored version.

        Returns:
            The new snapshot, or the unchanged latest one
        """
        latest = meeting.latest_version
        if latest is not None and latest.text == text:
            return latest

        snapshot = MomVersion(text=text, reason=reason)
        meeting.mom_versions.append(snapshot)
        if len(meeting.mom_versions) > self._history_limit:
            del meeting.mom_versions[: -self._history_limit]

        logger.info(
            "mom version stored",
            meeting_id=str(meeting.id),
            version_id=str(snapshot.id),
            reason=reason,
            history=len(meeting.mom_versions),
        )
        return snapshot

    def get(self, meeting: Meeting, version_id) -> MomVersion:
        """Look up a snapshot by id.

        Raises:
            VersionNotFoundError: If no snapshot has that id
        """
        for version in meeting.mom_versions:
            if str(version.id) == str(version_id):
                return version
        raise VersionNotFoundError(f"MoM version not found: {version_id}")

    def diff(self, meeting: Meeting, old_id, new_id) -> MomDiff:
        """Diff two stored snapshots by id."""
        return diff_mom_text(
            self.get(meeting, old_id).text,
            self.get(meeting, new_id).text,
        )

    def compare_latest(self, meeting: Meeting) -> MomDiff:
        """Diff the two most recent snapshots.

        Raises:
            InsufficientVersionsError: With fewer than two stored snapshots
        """
        if len(meeting.mom_versions) < 2:
            raise InsufficientVersionsError(
                "At least two MoM versions are required for comparison"
            )
        previous, latest = meeting.mom_versions[-2:]
        return diff_mom_text(previous.text, latest.text)
