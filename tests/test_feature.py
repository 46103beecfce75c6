import pytest

from andercad.commands import CreateBoxCommand
from andercad.feature import Feature, FeatureState, FeatureType
from andercad.shape import create_box


class _CubeFeature(Feature):
    def __init__(self, name="Cube"):
        super().__init__(FeatureType.EXTRUDE, name)
        self.set_parameter("size", 2.0)

    def validate_parameters(self):
        return self.get_parameter("size") > 0.0

    def create_shape(self):
        if not self.validate_parameters():
            return None
        size = self.get_parameter("size")
        return create_box(size, size, size)

    def create_command(self):
        size = self.get_parameter("size")
        return CreateBoxCommand(size, size, size)


def test_feature_is_abstract():
    with pytest.raises(TypeError):
        Feature(FeatureType.EXTRUDE, "x")


def test_defaults():
    feature = _CubeFeature("Block")
    assert feature.name == "Block"
    assert feature.type is FeatureType.EXTRUDE
    assert feature.state is FeatureState.CREATED
    assert feature.active is True
    assert Feature.get_parameter(feature, "size") == 2.0


def test_ids_are_unique_and_increasing():
    first = _CubeFeature()
    second = _CubeFeature()
    assert second.id > first.id
    Feature.set_parameter(second, "size", 3.0)
    assert Feature.get_parameter(first, "size") == 2.0
    assert Feature.get_parameter(second, "size") == 3.0


def test_missing_parameter_reads_zero():
    feature = _CubeFeature()
    assert Feature.get_parameter(feature, "nothing") == 0.0
    assert not Feature.has_parameter(feature, "nothing")


def test_set_parameter_overwrites():
    feature = _CubeFeature()
    assert Feature.has_parameter(feature, "size")
    Feature.set_parameter(feature, "size", 5.0)
    assert Feature.get_parameter(feature, "size") == 5.0
    assert feature.parameters == {"size": 5.0}


def test_preview_matches_shape():
    feature = _CubeFeature()
    preview = Feature.create_preview_shape(feature)
    assert preview.to_dict() == create_box(2.0, 2.0, 2.0).to_dict()


def test_invalid_parameters_give_no_shape():
    feature = _CubeFeature()
    Feature.set_parameter(feature, "size", -1.0)
    assert not feature.validate_parameters()
    assert Feature.create_preview_shape(feature) is None


def test_command_builds_same_volume():
    feature = _CubeFeature()
    command = feature.create_command()
    assert command.execute()
    assert command.created_shape.volume() == pytest.approx(create_box(2.0, 2.0, 2.0).volume())


def test_state_and_name_are_mutable():
    feature = _CubeFeature()
    feature.state = FeatureState.FAILED
    feature.name = "Renamed"
    feature.active = False
    assert (feature.state, feature.name, feature.active) == (
        FeatureState.FAILED,
        "Renamed",
        False,
    )
    preview = Feature.create_preview_shape(feature)
    assert preview.to_dict() == create_box(2.0, 2.0, 2.0).to_dict()