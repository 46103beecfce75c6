"""An ordered collection of features with execution and change callbacks."""

from __future__ import annotations

from typing import Callable, Optional

from andercad.feature import Feature, FeatureState

FeatureCallback = Callable[[Feature], None]


class FeatureManager:
    """Keeps the feature history in order and executes features.

    The ``on_feature_added``, ``on_feature_removed`` and ``on_feature_updated``
    attributes may be set to callables that receive the affected feature.
    """

    def __init__(self) -> None:
        self._features: list[Feature] = []
        self.on_feature_added: Optional[FeatureCallback] = None
        self.on_feature_removed: Optional[FeatureCallback] = None
        self.on_feature_updated: Optional[FeatureCallback] = None

    @property
    def features(self) -> tuple[Feature, ...]:
        return tuple(self._features)

    @property
    def feature_count(self) -> int:
        return len(self._features)

    def _index(self, feature: Feature) -> int:
        return next((i for i, f in enumerate(self._features) if f is feature), -1)

    def _notify(self, callback: Optional[FeatureCallback], feature: Feature) -> None:
        if callback is not None:
            callback(feature)

    def add_feature(self, feature: Feature) -> None:
        self._features.append(feature)
        self._notify(self.on_feature_added, feature)

    def remove_feature(self, feature: Feature) -> None:
        """Remove ``feature`` if it is managed here."""
        index = self._index(feature)
        if index >= 0:
            del self._features[index]
            self._notify(self.on_feature_removed, feature)

    def clear_features(self) -> None:
        self._features.clear()

    def feature_by_id(self, feature_id: int) -> Optional[Feature]:
        return next((f for f in self._features if f.id == feature_id), None)

    def feature_by_name(self, name: str) -> Optional[Feature]:
        return next((f for f in self._features if f.name == name), None)

    def execute_feature(self, feature: Optional[Feature]) -> bool:
        """Build the feature's shape and record whether that succeeded."""
        if feature is None or not feature.active:
            return False
        if not feature.validate_parameters():
            feature.state = FeatureState.FAILED
            return False
        if feature.create_shape() is None:
            feature.state = FeatureState.FAILED
            return False
        feature.state = FeatureState.EXECUTED
        self._notify(self.on_feature_updated, feature)
        return True

    def execute_all_features(self) -> bool:
        """Execute every feature in order; True only if all succeeded."""
        results = [self.execute_feature(f) for f in list(self._features)]
        return all(results)

    def set_feature_active(self, feature: Feature, active: bool) -> None:
        feature.active = active
        self._notify(self.on_feature_updated, feature)

    def set_all_features_active(self, active: bool) -> None:
        for feature in self._features:
            feature.active = active

    def move_feature_up(self, feature: Feature) -> None:
        index = self._index(feature)
        if index > 0:
            fs = self._features
            fs[index], fs[index - 1] = fs[index - 1], fs[index]
            self._notify(self.on_feature_updated, feature)

    def move_feature_down(self, feature: Feature) -> None:
        index = self._index(feature)
        if 0 <= index < len(self._features) - 1:
            fs = self._features
            fs[index], fs[index + 1] = fs[index + 1], fs[index]
            self._notify(self.on_feature_updated, feature)

    def move_feature_to_index(self, feature: Feature, index: int) -> None:
        """Move ``feature`` so that it ends up at position ``index``."""
        current = self._index(feature)
        if current >= 0 and 0 <= index < len(self._features):
            del self._features[current]
            self._features.insert(index, feature)
            self._notify(self.on_feature_updated, feature)

    def update_feature(self, feature: Feature) -> None:
        self.execute_feature(feature)

    def rebuild_all_features(self) -> None:
        self.execute_all_features()

    def is_empty(self) -> bool:
        return not self._features