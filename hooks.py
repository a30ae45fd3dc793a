from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple


class HookError(Exception):
    pass


@dataclass(frozen=True)
class StepContext:
    step_index: int
    instruction: str
    code_pos: int
    tape_pos: int


@dataclass
class HookRegistry:
    # event -> list[(priority, handler)]
    _events: Dict[str, List[Tuple[int, Callable[..., None]]]] = field(default_factory=dict)
    # list[(every_n, handler, name)]
    _step_rules: List[Tuple[int, Callable[[Any, StepContext], None], str]] = field(default_factory=list)

    def on_event(self, event: str, handler: Callable[..., None], *, priority: int = 0) -> None:
        self._events.setdefault(event, []).append((priority, handler))
        self._events[event].sort(key=lambda t: t[0], reverse=True)

    def emit(self, event: str, *args: Any, **kwargs: Any) -> None:
        for _priority, handler in self._events.get(event, []):
            handler(*args, **kwargs)

    def add_step_rule(self, *, name: str, every_n: int, handler: Callable[[Any, StepContext], None]) -> None:
        if every_n <= 0:
            raise HookError("every_n_steps must be >= 1")
        self._step_rules.append((every_n, handler, name))

    def has_step_rules(self) -> bool:
        return bool(self._step_rules)

    def after_step(self, interpreter: Any, ctx: StepContext) -> None:
        for every_n, handler, _name in self._step_rules:
            if ctx.step_index % every_n == 0:
                handler(interpreter, ctx)


@dataclass
class RuntimeServices:
    hook_registry: HookRegistry = field(default_factory=HookRegistry)


def build_default_services() -> RuntimeServices:
    return RuntimeServices()
