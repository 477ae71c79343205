# donutviz/core/interaction.py
from __future__ import annotations
from typing import Any, Callable, List, Optional, Sequence

from .engine import label_at
from .surface import RenderSurface

HoverHandler = Callable[[int], None]

class InteractionDispatcher:
    def __init__(self, labels: Sequence[Any], surface: RenderSurface):
        self._labels = labels
        self._surface = surface
        self._handlers: List[HoverHandler] = []
        self.active_index: Optional[int] = None

    def subscribe(self, handler: HoverHandler) -> HoverHandler:
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: HoverHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def on_slice_hover_enter(self, index: int) -> None:
        handle = label_at(self._labels, index)
        if handle is not None:
            self._surface.set_label_active(handle, True)
            self.active_index = index
        for handler in list(self._handlers):
            handler(index)

    def on_slice_hover_leave(self, index: int) -> None:
        handle = label_at(self._labels, index)
        if handle is not None:
            self._surface.set_label_active(handle, False)
        if self.active_index == index:
            self.active_index = None
