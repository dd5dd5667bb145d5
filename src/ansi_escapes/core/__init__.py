"""Core building blocks shared by every sequence module."""

from ansi_escapes.core.constants import BEL, CSI, ESC, OSC, ST
from ansi_escapes.core.sequence import csi, osc, repeat

__all__ = ["BEL", "CSI", "ESC", "OSC", "ST", "csi", "osc", "repeat"]
