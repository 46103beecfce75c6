"""Debounced live preview of a feature's shape."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from andercad.feature import Feature, FeatureState
from andercad.shape import Shape


class LivePreview:
    """Rebuilds a feature's preview shape a short delay after each change.

    Repeated updates within the delay collapse into one rebuild. Set
    ``on_preview_update`` to receive the new shape and ``on_preview_clear``
    to learn when the preview is removed. ``update_delay`` is in milliseconds.
    """

    def __init__(self, update_delay: int = 500) -> None:
        self.update_delay = update_delay
        self.on_preview_update: Optional[Callable[[Optional[Shape]], None]] = None
        self.on_preview_clear: Optional[Callable[[], None]] = None
        self._feature: Optional[Feature] = None
        self._active = False
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.RLock()

    @property
    def feature(self) -> Optional[Feature]:
        return self._feature

    @property
    def is_preview_active(self) -> bool:
        return self._active

    @property
    def is_pending(self) -> bool:
        """Whether a delayed rebuild is waiting to run."""
        with self._lock:
            return self._timer is not None

    def set_feature(self, feature: Optional[Feature]) -> None:
        self._feature = feature
        if self._active:
            self.update_preview()

    def start_preview(self) -> None:
        self._active = True
        self.update_preview()

    def stop_preview(self) -> None:
        self._active = False
        self._cancel()
        if self.on_preview_clear is not None:
            self.on_preview_clear()

    def set_preview_active(self, active: bool) -> None:
        if active:
            self.start_preview()
        else:
            self.stop_preview()

    def update_preview(self) -> None:
        """Schedule a rebuild, restarting the delay if one is pending."""
        if not self._active or self._feature is None:
            return
        with self._lock:
            self._cancel()
            timer = threading.Timer(self.update_delay / 1000.0, self._on_timer)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def flush(self) -> bool:
        """Run a pending rebuild now; return whether one ran."""
        with self._lock:
            if self._timer is None:
                return False
            self._cancel()
            return self._rebuild()

    def _cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _on_timer(self) -> None:
        with self._lock:
            if self._timer is not threading.current_thread():
                return
            self._timer = None
            self._rebuild()

    def _rebuild(self) -> bool:
        feature = self._feature
        if not self._active or feature is None:
            return False
        feature.state = FeatureState.PREVIEWING
        shape = feature.create_preview_shape()
        if self.on_preview_update is not None:
            self.on_preview_update(shape)
        return True