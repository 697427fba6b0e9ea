"""Moon phase calculations based on Julian day arithmetic."""

from .constants import (
    ANOMALISTIC_MONTH,
    LUNATION_BASE_JULIAN_DAY,
    SYNODIC_MONTH,
)
from .models import (
    Hemisphere,
    InvalidLunarPhaseError,
    LunarPhase,
    MoonOptions,
    MoonSnapshot,
    resolve_options,
)
from .emoji import emoji_for_lunar_phase, NORTHERN_HEMISPHERE_EMOJI, SOUTHERN_HEMISPHERE_EMOJI
from .moon import (
    is_waning,
    is_waxing,
    lunar_age,
    lunar_age_percent,
    lunar_distance,
    lunar_phase,
    lunar_phase_emoji,
    lunation_number,
    moon_snapshot,
)

__all__ = [
    'ANOMALISTIC_MONTH',
    'LUNATION_BASE_JULIAN_DAY',
    'SYNODIC_MONTH',
    'Hemisphere',
    'InvalidLunarPhaseError',
    'LunarPhase',
    'MoonOptions',
    'MoonSnapshot',
    'resolve_options',
    'emoji_for_lunar_phase',
    'NORTHERN_HEMISPHERE_EMOJI',
    'SOUTHERN_HEMISPHERE_EMOJI',
    'is_waning',
    'is_waxing',
    'lunar_age',
    'lunar_age_percent',
    'lunar_distance',
    'lunar_phase',
    'lunar_phase_emoji',
    'lunation_number',
    'moon_snapshot',
]
