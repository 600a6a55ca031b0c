"""
CRM Entity Hooks
Lifecycle callbacks attached to entities by name

Generated entity classes stay free of hand-written logic; behaviour that
reacts to persistence events is registered here instead:

    from crm_core.hooks import hooks, HookEvent

    @hooks.on("Deal", HookEvent.BEFORE_CREATE)
    async def default_probability(deal, **context):
        if deal.probability is None:
            deal.probability = 10

Hooks receive the entity instance plus keyword context (``repository``,
``user_id``, ``data``). Registering for ``"*"`` applies to every entity.
"""

import inspect
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import structlog

logger = structlog.get_logger()

ALL_ENTITIES = "*"


class HookEvent(str, Enum):
    """Persistence lifecycle events"""
    BEFORE_CREATE = "before_create"
    AFTER_CREATE = "after_create"
    BEFORE_UPDATE = "before_update"
    AFTER_UPDATE = "after_update"
    BEFORE_DELETE = "before_delete"
    AFTER_DELETE = "after_delete"
    AFTER_RESTORE = "after_restore"


HookFunc = Callable[..., Any]


class HookRegistry:
    """Registry of lifecycle callbacks keyed by entity name and event"""

    def __init__(self):
        self._hooks: Dict[Tuple[str, HookEvent], List[HookFunc]] = defaultdict(list)

    @staticmethod
    def _event(event: Union[str, HookEvent]) -> HookEvent:
        try:
            return HookEvent(event)
        except ValueError:
            raise ValueError(f"Unknown hook event: {event}") from None

    def register(self, entity: str, event: Union[str, HookEvent], func: HookFunc) -> HookFunc:
        event = self._event(event)
        self._hooks[(entity, event)].append(func)
        logger.debug("Hook registered", entity=entity, hook_event=event.value, hook=getattr(func, "__name__", repr(func)))
        return func

    def on(self, entity: str, event: Union[str, HookEvent]) -> Callable[[HookFunc], HookFunc]:
        """Decorator form of :meth:`register`"""
        event = self._event(event)

        def decorator(func: HookFunc) -> HookFunc:
            return self.register(entity, event, func)

        return decorator

    def hooks_for(self, entity: str, event: Union[str, HookEvent]) -> List[HookFunc]:
        event = self._event(event)
        return self._hooks.get((ALL_ENTITIES, event), []) + self._hooks.get((entity, event), [])

    async def run(self, entity: str, event: Union[str, HookEvent], instance: Any, **context: Any) -> None:
        """Run hooks in registration order, wildcard hooks first"""
        for func in self.hooks_for(entity, event):
            result = func(instance, **context)
            if inspect.isawaitable(result):
                await result

    def clear(self, entity: Optional[str] = None) -> None:
        if entity is None:
            self._hooks.clear()
            return
        for key in [key for key in self._hooks if key[0] == entity]:
            del self._hooks[key]


# Process-wide registry
hooks = HookRegistry()
