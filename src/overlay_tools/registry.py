"""
Registry helper for keyed handler tables.

Mask shape builders and engine rasterizers are looked up from small
dictionaries that are filled by a ``@register`` decorator next to each
handler::

    from overlay_tools.registry import new_registry

    BUILDERS, register = new_registry(attribute='shape')

    @register(Shape.CIRCLE)
    def _circle(width, height, **kwargs):
        ...

    BUILDERS[Shape.CIRCLE](100, 100)

Each key maps to exactly one handler; registering a key twice is an error
so two modules cannot silently replace each other's handler.
"""

from typing import Any, Callable, Dict, Optional, Tuple


def new_registry(attribute: Optional[str] = None) -> Tuple[Dict[Any, Callable], Callable]:
    """
    Returns an empty dict and a @register decorator.

    :param attribute: Optional attribute name; the key is stored on each
        registered handler under this name.
    :return: Tuple of (registry_dict, register_decorator)
    """
    registry: Dict[Any, Callable] = {}

    def register(key: Any) -> Callable[[Callable], Callable]:
        if key in registry:
            raise ValueError("%r is already registered to %s" % (key, registry[key].__name__))

        def decorator(handler: Callable) -> Callable:
            registry[key] = handler
            if attribute is not None:
                setattr(handler, attribute, key)
            return handler

        return decorator

    return registry, register
