"""
Validation functions for attrs.
"""

import attr

from overlay_tools.errors import InvalidDimensions

__all__ = ["positive_"]


@attr.s(repr=False, slots=True, hash=True)
class _PositiveValidator(object):
    def __call__(self, inst, attribute, value):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDimensions(
                getattr(inst, "width", value),
                getattr(inst, "height", value),
                "'{name}' must be a positive integer".format(name=attribute.name),
            )

    def __repr__(self):
        return "<positive_ validator>"


def positive_():
    """
    A validator that raises
    :py:class:`~overlay_tools.errors.InvalidDimensions` if the initializer is
    called with anything but a positive integer. ``bool`` is rejected.
    """
    return _PositiveValidator()

