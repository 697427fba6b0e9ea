from types import MappingProxyType
from typing import Any, Mapping, Optional, Union
import logging

from .models import Hemisphere, InvalidLunarPhaseError, LunarPhase, MoonOptions, resolve_options

logger = logging.getLogger(__name__)

NORTHERN_HEMISPHERE_EMOJI = MappingProxyType({
    LunarPhase.NEW: "🌑",
    LunarPhase.WAXING_CRESCENT: "🌒",
    LunarPhase.FIRST_QUARTER: "🌓",
    LunarPhase.WAXING_GIBBOUS: "🌔",
    LunarPhase.FULL: "🌕",
    LunarPhase.WANING_GIBBOUS: "🌖",
    LunarPhase.LAST_QUARTER: "🌗",
    LunarPhase.WANING_CRESCENT: "🌘",
})

# Seen from the south the lit side is mirrored
SOUTHERN_HEMISPHERE_EMOJI = MappingProxyType({
    LunarPhase.NEW: "🌑",
    LunarPhase.WAXING_CRESCENT: "🌘",
    LunarPhase.FIRST_QUARTER: "🌗",
    LunarPhase.WAXING_GIBBOUS: "🌖",
    LunarPhase.FULL: "🌕",
    LunarPhase.WANING_GIBBOUS: "🌔",
    LunarPhase.LAST_QUARTER: "🌓",
    LunarPhase.WANING_CRESCENT: "🌒",
})

EMOJI_BY_HEMISPHERE = MappingProxyType({
    Hemisphere.NORTHERN: NORTHERN_HEMISPHERE_EMOJI,
    Hemisphere.SOUTHERN: SOUTHERN_HEMISPHERE_EMOJI,
})


def emoji_for_lunar_phase(
    phase: Union[LunarPhase, str],
    options: Optional[Union[MoonOptions, Mapping[str, Any]]] = None
) -> str:
    """Emoji for a lunar phase as seen from the configured hemisphere.

    Args:
        phase: A LunarPhase, or its value or name as a string
        options: MoonOptions or a mapping such as {"hemisphere": "Southern"}

    Returns:
        The emoji glyph for the phase

    Raises:
        InvalidLunarPhaseError: If phase is not one of the eight phases
    """
    hemisphere = resolve_options(options).hemisphere

    try:
        phase = LunarPhase.coerce(phase)
    except InvalidLunarPhaseError as e:
        logger.error(f"Error looking up lunar emoji: {e}")
        raise

    return EMOJI_BY_HEMISPHERE[hemisphere][phase]
