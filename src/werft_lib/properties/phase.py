# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from enum import Enum
from typing import Self

from werft_lib.core.config import CFG
from werft_lib.core.logger import get_logger

logger = get_logger(__name__)


class JobPhase(Enum):
    """
    Lifecycle phase of a job as reported by the werft service.
    """

    PHASE_UNKNOWN = 0
    PHASE_PREPARING = 1
    PHASE_STARTING = 2
    PHASE_RUNNING = 3
    PHASE_DONE = 4

    def __str__(self) -> str:
        """
        Return the short lowercase name of the phase.

        Returns:
            str: The name of the phase without the prefix, e.g. `running`.
        """
        return self.name.removeprefix("PHASE_").lower()

    @classmethod
    def isKnown(cls, name: str) -> bool:
        """
        Check whether `name` is the full name of a job phase.

        Args:
            name (str): Name including the `PHASE_` prefix, e.g. `PHASE_RUNNING`.

        Returns:
            bool: True if the name matches a phase exactly.
        """
        return name in cls.__members__

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding JobPhase enum variant.

        Both full (`PHASE_RUNNING`) and short (`running`) names are accepted,
        case-insensitively.

        Args:
            s (str): String representation of the phase.

        Returns:
            JobPhase: Corresponding enum variant. Returns PHASE_UNKNOWN if no match is found.
        """
        name = s.upper()
        if not name.startswith("PHASE_"):
            name = f"PHASE_{name}"

        try:
            return cls[name]
        except KeyError:
            logger.debug(f"Unknown job phase '{s}'.")
            return cls.PHASE_UNKNOWN

    @property
    def color(self) -> str:
        """
        Return the display color associated with this JobPhase.

        Returns:
            str: A string representing the color for presentation purposes.
        """
        return getattr(CFG.phase_colors, str(self))


class JobTrigger(Enum):
    """
    Event that started a job.
    """

    TRIGGER_UNKNOWN = 0
    TRIGGER_MANUAL = 1
    TRIGGER_PUSH = 2

    def __str__(self) -> str:
        return self.name.removeprefix("TRIGGER_").lower()

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding JobTrigger, returning TRIGGER_UNKNOWN for unknown values.
        """
        name = s.upper()
        if not name.startswith("TRIGGER_"):
            name = f"TRIGGER_{name}"

        return cls.__members__.get(name, cls.TRIGGER_UNKNOWN)
