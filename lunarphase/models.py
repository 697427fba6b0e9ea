from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Mapping, Optional, Union
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class LunarPhase(str, Enum):
    """The eight named phases of the synodic month.

    Exactly one phase applies to any lunar age. NEW covers both ends of the
    cycle, the few days either side of conjunction.
    """
    NEW = "New"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL = "Full"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"

    @classmethod
    def coerce(cls, value: Any) -> "LunarPhase":
        """Accept a member, its value ("Waxing Crescent") or its name ("WAXING_CRESCENT").

        Raises:
            InvalidLunarPhaseError: If value names no phase
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        raise InvalidLunarPhaseError(value)


class Hemisphere(str, Enum):
    """Observer hemisphere. Only changes which emoji are shown.

    Supported values:
    - NORTHERN: crescents lit on the right while waxing (default)
    - SOUTHERN: the same shapes mirrored
    """
    NORTHERN = "Northern"
    SOUTHERN = "Southern"


class InvalidLunarPhaseError(ValueError):
    """Raised when an emoji is requested for something that is not a lunar phase."""

    def __init__(self, phase: Any):
        self.phase = phase
        super().__init__(f"Invalid lunar phase of {phase} specified")


class MoonOptions(BaseModel):
    """Options shared by the emoji functions.

    Attributes:
        hemisphere: Hemisphere the moon is viewed from, Northern by default.
            Accepts a Hemisphere member, or its value or name in any case.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    hemisphere: Hemisphere = Hemisphere.NORTHERN

    @field_validator("hemisphere", mode="before")
    @classmethod
    def _match_hemisphere(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Hemisphere):
            wanted = value.strip().lower()
            for member in Hemisphere:
                if wanted in (member.value.lower(), member.name.lower()):
                    return member
        return value


class MoonSnapshot(BaseModel):
    """Every derived lunar quantity for a single instant."""
    model_config = ConfigDict(frozen=True)

    julian_day: float
    age: float
    age_percent: float
    lunation_number: int
    distance: float
    phase: LunarPhase
    emoji: str
    is_waxing: bool
    is_waning: bool


def resolve_options(options: Optional[Union[MoonOptions, Mapping[str, Any]]] = None) -> MoonOptions:
    """Merge caller options over the defaults.

    Args:
        options: None, a MoonOptions instance or a mapping with any subset of
            the recognised keys. Unknown keys are ignored.

    Returns:
        A fully populated MoonOptions

    Raises:
        pydantic.ValidationError: If a recognised key holds an invalid value
    """
    if options is None:
        return MoonOptions()
    if isinstance(options, MoonOptions):
        return options

    unknown = set(options) - set(MoonOptions.model_fields)
    if unknown:
        logger.debug(f"Ignoring unrecognised moon options: {sorted(unknown)}")
    return MoonOptions.model_validate(dict(options))
