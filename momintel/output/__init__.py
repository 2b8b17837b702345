"""MoM rendering and version history."""

from momintel.output.renderer import MomRenderer
from momintel.output.schemas import MomContext
from momintel.output.versioning import VersionStore, diff_mom_text

__all__ = ["MomContext", "MomRenderer", "VersionStore", "diff_mom_text"]
