"""Attach enumeration behaviors to SQLAlchemy mapped classes.

The behavior's marshal hook runs from the mapper's ``init`` event, which
receives the constructor keyword arguments and may alter them in place::

    class Article(Base):
        __tablename__ = "articles"
        STATUS_DRAFT = 0
        STATUS_PUBLISHED = 1
        id: Mapped[int] = mapped_column(primary_key=True)
        status: Mapped[int]

    attach_enum_behavior(Article, providers={"status": {"strategy": "const"}})
    Article(status="PUBLISHED").status   # 1
    Article.enum("status")               # {"DRAFT": 0, "PUBLISHED": 1}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from weakref import WeakKeyDictionary

from sqlalchemy import event
from sqlalchemy import inspect as sa_inspect

from enumeratio.foundation.application.behavior import EnumBehavior
from enumeratio.foundation.domain.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

BEHAVIOR_ATTRIBUTE = "__enum_behavior__"

_listeners: WeakKeyDictionary[type, Callable[..., None]] = WeakKeyDictionary()


def get_enum_behavior(model: type) -> EnumBehavior | None:
    """Return the behavior attached to ``model``, if any."""
    behavior = model.__dict__.get(BEHAVIOR_ATTRIBUTE)
    return behavior if isinstance(behavior, EnumBehavior) else None


def attach_enum_behavior(model: type, **behavior_kwargs: Any) -> EnumBehavior:
    """Build an EnumBehavior for ``model`` and hook it into the mapper.

    Args:
        model: A mapped class.
        **behavior_kwargs: Passed to :class:`EnumBehavior`.

    Returns:
        The attached behavior.

    Raises:
        ConfigurationError: If ``model`` is not mapped, already has a
            behavior, or a published method name is already taken.
    """
    if sa_inspect(model, raiseerr=False) is None:
        raise ConfigurationError(f"{model!r} is not a mapped class")
    if get_enum_behavior(model) is not None:
        raise ConfigurationError("Enum behavior already attached", owner=model.__name__)

    behavior = EnumBehavior(model, **behavior_kwargs)
    published = behavior.implemented_methods
    for name in published:
        if hasattr(model, name):
            raise ConfigurationError(
                f"Cannot publish {name!r}: attribute already defined",
                owner=model.__name__,
            )

    def marshal(target: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        behavior.before_marshal(kwargs)

    event.listen(model, "init", marshal)
    _listeners[model] = marshal
    for name, method in published.items():
        setattr(model, name, getattr(behavior, method))
    setattr(model, BEHAVIOR_ATTRIBUTE, behavior)

    logger.info(
        "enum_behavior_attached",
        extra={"owner": model.__name__, "providers": list(behavior.providers)},
    )
    return behavior


def detach_enum_behavior(model: type) -> None:
    """Remove the behavior, its ``init`` listener and published methods.

    Does nothing if no behavior is attached.
    """
    behavior = get_enum_behavior(model)
    if behavior is None:
        return
    listener = _listeners.pop(model, None)
    if listener is not None:
        event.remove(model, "init", listener)
    for name in behavior.implemented_methods:
        if name in model.__dict__:
            delattr(model, name)
    delattr(model, BEHAVIOR_ATTRIBUTE)
    logger.info("enum_behavior_detached", extra={"owner": model.__name__})
