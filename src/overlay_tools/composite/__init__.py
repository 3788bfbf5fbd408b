"""
Composition planning and mask geometry.

This subpackage holds the backend independent parts of overlay_tools. Nothing
here touches pixels; every function returns plain values that a rendering
engine (see :py:mod:`overlay_tools.api.protocols`) turns into images.

Key modules:

- :py:mod:`overlay_tools.composite.planner`: Composition planner
- :py:mod:`overlay_tools.composite.position`: Per-axis position resolution
- :py:mod:`overlay_tools.composite.blend`: Blend mode registry
- :py:mod:`overlay_tools.composite.mask`: Circle and rounded rectangle masks

Example usage::

    from overlay_tools.composite import OverlaySpec, plan

    result = plan((640, 480), [
        OverlaySpec(logo, 120, 40, x='right', y='top'),
        OverlaySpec(badge, 40, 40, x_baseline='left', dy=8),
    ])
    layers = result.unwrap()
"""

from overlay_tools.composite.blend import validate_blend_mode
from overlay_tools.composite.mask import Circle, MaskDescriptor, RoundedRectangle, generate
from overlay_tools.composite.planner import (
    Canvas,
    OverlaySpec,
    Plan,
    ResolvedLayer,
    build_overlay,
    plan,
    plan_single,
)
from overlay_tools.composite.position import resolve_axis

__all__ = [
    "Canvas",
    "Circle",
    "MaskDescriptor",
    "OverlaySpec",
    "Plan",
    "ResolvedLayer",
    "RoundedRectangle",
    "build_overlay",
    "generate",
    "plan",
    "plan_single",
    "resolve_axis",
    "validate_blend_mode",
]
