"""
Blend mode registry.

Validates symbolic blend mode identifiers against the closed set of
compositing operators supported by the rendering backend. See
:py:class:`~overlay_tools.constants.BlendMode`.
"""

import logging
from typing import Any, List, Optional, Union

from overlay_tools.constants import DEFAULT_BLEND_MODE, BlendMode
from overlay_tools.errors import UnsupportedBlendMode

logger = logging.getLogger(__name__)

# Alternate spellings accepted on input.
_ALIASES = {
    "color_dodge": BlendMode.COLOUR_DODGE,
    "color_burn": BlendMode.COLOUR_BURN,
    "normal": BlendMode.OVER,
}

BLEND_MODES = {mode.value: mode for mode in BlendMode}
BLEND_MODES.update(_ALIASES)


def validate_blend_mode(mode: Optional[Union[BlendMode, str]]) -> BlendMode:
    """
    Normalize a blend mode identifier.

    Args:
        mode: :py:class:`~overlay_tools.constants.BlendMode` member, its name
            in any case, with hyphens or underscores, or ``None`` for the
            default ``over``.

    Returns:
        The canonical :py:class:`~overlay_tools.constants.BlendMode`.

    Raises:
        UnsupportedBlendMode: If the identifier is not a supported mode.

    Examples:
        >>> validate_blend_mode("Hard-Light")
        <BlendMode.HARD_LIGHT: 'hard_light'>
        >>> validate_blend_mode(None)
        <BlendMode.OVER: 'over'>
    """
    if mode is None:
        return DEFAULT_BLEND_MODE
    if isinstance(mode, BlendMode):
        return mode
    if not isinstance(mode, str):
        raise UnsupportedBlendMode(mode)
    key = mode.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return BLEND_MODES[key]
    except KeyError:
        raise UnsupportedBlendMode(mode) from None


def is_supported(mode: Any) -> bool:
    """Return ``True`` when ``mode`` validates."""
    try:
        validate_blend_mode(mode)
    except UnsupportedBlendMode:
        return False
    return True


def supported_blend_modes() -> List[str]:
    """Canonical names of all supported blend modes."""
    return [mode.value for mode in BlendMode]
