"""Tests for the metadata -> FeatureSchema loader."""

import pytest

from models.schemas.feature_schema import FeatureSchema
from services.errors import ConfigError
from services.pipeline.schema_loader import load_schema


class TestLoadSchema:
    def test_loads_from_file(self, session_metadata, write_json):
        path = write_json("model_metadata.json", session_metadata)
        schema = load_schema(path)

        assert isinstance(schema, FeatureSchema)
        assert schema.input_size == 9
        assert schema.num_classes == 3
        assert schema.target_classes == ("addtocart", "transaction", "view")
        assert schema.numerical_features[0] == "cart_abandonment"
        assert schema.categorical_features[-1] == "time_diff_category"

    def test_accepts_string_path(self, session_metadata, write_json):
        path = write_json("model_metadata.json", session_metadata)
        assert load_schema(str(path)).input_size == 9

    def test_feature_order_is_numerical_then_categorical(self, make_metadata):
        schema = load_schema(make_metadata(["a", "b"], ["c"]))
        assert schema.feature_order == ("a", "b", "c")
        assert schema.numerical_count == 2

    def test_missing_preprocessing_defaults_to_empty(self):
        doc = {
            "model_info": {
                "input_size": 0,
                "num_classes": 3,
                "target_classes": ["addtocart", "transaction", "view"],
            }
        }
        schema = load_schema(doc)
        assert schema.numerical_features == ()
        assert schema.categorical_features == ()

    def test_missing_categorical_group_defaults_to_empty(self, make_metadata):
        doc = make_metadata(["cart_abandonment"])
        del doc["preprocessing"]["categorical_features"]
        schema = load_schema(doc)
        assert schema.categorical_features == ()
        assert schema.input_size == 1

    def test_schema_is_frozen(self, make_metadata):
        schema = load_schema(make_metadata(["a"]))
        with pytest.raises(Exception):
            schema.input_size = 5


class TestLoadSchemaErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot open metadata file"):
            load_schema(tmp_path / "nope.json")

    def test_unparseable_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_schema(path)

    def test_top_level_must_be_object(self, write_json):
        path = write_json("list.json", [1, 2, 3])
        with pytest.raises(ConfigError):
            load_schema(path)

    def test_missing_model_info(self):
        with pytest.raises(ConfigError):
            load_schema({"preprocessing": {"numerical_features": ["a"]}})

    def test_missing_required_model_info_field(self, make_metadata):
        doc = make_metadata(["a"])
        del doc["model_info"]["target_classes"]
        with pytest.raises(ConfigError):
            load_schema(doc)

    def test_wrong_field_type(self, make_metadata):
        doc = make_metadata(["a"])
        doc["preprocessing"]["numerical_features"] = "a,b"
        with pytest.raises(ConfigError):
            load_schema(doc)

    def test_input_size_mismatch(self, make_metadata):
        with pytest.raises(ConfigError, match="input_size"):
            load_schema(make_metadata(["a", "b"], ["c"], input_size=25))

    @pytest.mark.parametrize("classes", [["addtocart", "view"], ["a", "b", "c", "d"]])
    def test_requires_three_target_classes(self, make_metadata, classes):
        with pytest.raises(ConfigError, match="target classes"):
            load_schema(make_metadata(["a"], classes=classes))

    def test_num_classes_must_match_target_classes(self, make_metadata):
        doc = make_metadata(["a"])
        doc["model_info"]["num_classes"] = 4
        with pytest.raises(ConfigError, match="num_classes"):
            load_schema(doc)

    def test_duplicate_target_classes(self, make_metadata):
        with pytest.raises(ConfigError, match="Duplicate"):
            load_schema(make_metadata(["a"], classes=["view", "view", "transaction"]))
