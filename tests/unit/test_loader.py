"""Unit tests for loading module records."""

import pytest

from bundlegraph.loader import ModuleRecordError, load_modules, parse_module_records


class TestLoadModules:
    """Test load_modules."""

    def test_array_document(self, write_records):
        path = write_records([
            {"name": "base", "minSdkVersion": 21},
            {"name": "feature", "splitId": "feature", "usesSplit": ["core"]},
            {"name": "core", "splitId": "core"},
        ])

        modules = load_modules(path)

        assert [m.name for m in modules] == ["base", "feature", "core"]
        assert modules[0].min_sdk_version == 21
        assert modules[1].uses_split == ["core"]

    def test_object_document(self, write_records):
        path = write_records({"modules": [{"name": "base"}, {"name": "f", "onDemand": True}]})

        modules = load_modules(path)

        assert modules[1].on_demand is True

    def test_accepts_string_path(self, write_records):
        path = write_records([{"name": "base"}])

        assert load_modules(str(path))[0].is_base

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_modules(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "modules.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(ModuleRecordError) as exc_info:
            load_modules(path)

        assert "Invalid JSON" in str(exc_info.value)
        assert exc_info.value.path == path

    def test_directory_path(self, tmp_path):
        with pytest.raises(ModuleRecordError, match="is not a file"):
            load_modules(tmp_path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "modules.json"
        path.write_bytes(b'[{"name": "base\xff"}]')

        with pytest.raises(ModuleRecordError) as exc_info:
            load_modules(path)

        assert "not valid UTF-8" in str(exc_info.value)
        assert exc_info.value.path == path

    def test_invalid_record_names_index(self, write_records):
        path = write_records([{"name": "base"}, {"name": "f", "minSdkVersion": -3}])

        with pytest.raises(ModuleRecordError) as exc_info:
            load_modules(path)

        assert exc_info.value.index == 1
        assert "Invalid module record 1" in str(exc_info.value)

    def test_record_error_is_value_error(self, write_records):
        path = write_records({"items": []})

        with pytest.raises(ValueError, match="Missing 'modules' array"):
            load_modules(path)


class TestParseModuleRecords:
    """Test parse_module_records."""

    def test_non_object_record(self):
        with pytest.raises(ModuleRecordError) as exc_info:
            parse_module_records([{"name": "base"}, "feature"])

        assert exc_info.value.index == 1

    def test_scalar_document(self):
        with pytest.raises(ModuleRecordError, match="Expected an array"):
            parse_module_records(42)

    def test_empty_list(self):
        assert parse_module_records([]) == []
