# ABOUTME: Unit tests for ConfigMapping, ConfigList and Configuration containers
# ABOUTME: Tests dict/list compatibility, attribute access and write rejection once frozen

import copy
import pickle

import pytest

from config_builder.components.freezer import deep_freeze, is_frozen
from config_builder.exceptions import FrozenConfigurationError
from config_builder.models.configuration import ConfigList, ConfigMapping, Configuration
from config_builder.models.document import section_key


class TestConfigMapping:
    """Test suite for ConfigMapping."""

    @pytest.mark.unit
    def test_behaves_like_dict(self):
        """Test a mutable mapping equals the plain dict it was built from."""
        mapping = ConfigMapping({"a": 1, "b": {"c": 2}})

        assert mapping == {"a": 1, "b": {"c": 2}}
        assert isinstance(mapping, dict)
        assert list(mapping) == ["a", "b"]

    @pytest.mark.unit
    def test_attribute_access(self):
        """Test keys can be read, written and deleted as attributes."""
        mapping = ConfigMapping({"host": "localhost"})

        assert mapping.host == "localhost"
        mapping.port = 5432
        assert mapping["port"] == 5432
        del mapping.port
        assert "port" not in mapping

    @pytest.mark.unit
    def test_missing_attribute_raises_attribute_error(self):
        """Test a missing key surfaces as AttributeError, not KeyError."""
        mapping = ConfigMapping()

        with pytest.raises(AttributeError, match="no attribute 'missing'"):
            mapping.missing

        assert getattr(mapping, "missing", "fallback") == "fallback"

    @pytest.mark.unit
    def test_mutable_until_frozen(self):
        """Test every mutator works before the frozen marker is set."""
        mapping = ConfigMapping({"a": 1})
        mapping["b"] = 2
        mapping.update(c=3)
        mapping.setdefault("d", 4)
        mapping |= {"e": 5}
        assert mapping.pop("e") == 5

        assert mapping == {"a": 1, "b": 2, "c": 3, "d": 4}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "mutate",
        [
            lambda m: m.__setitem__("a", 2),
            lambda m: setattr(m, "a", 2),
            lambda m: m.__delitem__("a"),
            lambda m: delattr(m, "a"),
            lambda m: m.update({"a": 2}),
            lambda m: m.setdefault("new", 1),
            lambda m: m.pop("a"),
            lambda m: m.popitem(),
            lambda m: m.clear(),
            lambda m: m.__ior__({"a": 2}),
        ],
    )
    def test_frozen_rejects_writes(self, mutate):
        """Test every mutator raises once the mapping is frozen and the value is kept."""
        mapping = ConfigMapping({"a": 1})
        mapping._mark_frozen()

        with pytest.raises(FrozenConfigurationError):
            mutate(mapping)

        assert mapping == {"a": 1}

    @pytest.mark.unit
    def test_frozen_setdefault_on_existing_key(self):
        """Test setdefault on an existing key is a read and stays allowed."""
        mapping = ConfigMapping({"a": 1})
        mapping._mark_frozen()

        assert mapping.setdefault("a", 5) == 1

    @pytest.mark.unit
    def test_frozen_marker_cannot_be_reset(self):
        """Test the marker cannot be cleared through attribute assignment."""
        mapping = ConfigMapping({"a": 1})
        mapping._mark_frozen()

        with pytest.raises(FrozenConfigurationError):
            mapping._frozen = False

        with pytest.raises(FrozenConfigurationError):
            mapping["a"] = 2

    @pytest.mark.unit
    def test_non_mutating_operations_allowed(self):
        """Test reads, copies and merges into new dicts work on a frozen mapping."""
        mapping = ConfigMapping({"a": 1})
        mapping._mark_frozen()

        assert mapping.get("a") == 1
        assert mapping.copy() == {"a": 1}
        assert (mapping | {"b": 2}) == {"a": 1, "b": 2}

    @pytest.mark.unit
    def test_repr(self):
        """Test repr names the container type."""
        assert repr(ConfigMapping({"a": 1})) == "ConfigMapping({'a': 1})"


class TestConfigList:
    """Test suite for ConfigList."""

    @pytest.mark.unit
    def test_behaves_like_list(self):
        """Test a list keeps order and equals a plain list."""
        items = ConfigList([1, [2, 3], {"a": 4}])

        assert items == [1, [2, 3], {"a": 4}]
        assert isinstance(items, list)
        assert items[1] == [2, 3]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "mutate",
        [
            lambda s: s.__setitem__(0, 9),
            lambda s: s.__delitem__(0),
            lambda s: s.append(4),
            lambda s: s.extend([4]),
            lambda s: s.insert(0, 4),
            lambda s: s.pop(),
            lambda s: s.remove(1),
            lambda s: s.clear(),
            lambda s: s.sort(),
            lambda s: s.reverse(),
            lambda s: s.__iadd__([4]),
            lambda s: s.__imul__(2),
        ],
    )
    def test_frozen_rejects_writes(self, mutate):
        """Test every in-place operation raises once the list is frozen."""
        items = ConfigList([3, 1, 2])
        items._mark_frozen()

        with pytest.raises(FrozenConfigurationError):
            mutate(items)

        assert items == [3, 1, 2]

    @pytest.mark.unit
    def test_frozen_list_supports_new_values(self):
        """Test operators that build new lists still work."""
        items = ConfigList([1, 2])
        items._mark_frozen()

        assert items + [3] == [1, 2, 3]
        assert sorted(items, reverse=True) == [2, 1]

    @pytest.mark.unit
    def test_attributes_are_read_only(self):
        """Test the frozen marker cannot be reset on a list."""
        items = ConfigList([1])
        items._mark_frozen()

        with pytest.raises(AttributeError):
            items._frozen = False


class TestConfiguration:
    """Test suite for the top-level Configuration."""

    @pytest.mark.unit
    def test_is_config_mapping(self):
        """Test Configuration shares ConfigMapping behavior."""
        config = Configuration(ENV="E1")

        assert isinstance(config, ConfigMapping)
        assert config.ENV == "E1"
        assert repr(config) == "Configuration({'ENV': 'E1'})"

    @pytest.mark.unit
    def test_section_key(self):
        """Test section keys append the Config suffix to the document name."""
        assert section_key("other") == "otherConfig"
        assert section_key("db") == "dbConfig"


def _sample_configuration():
    return Configuration(
        {
            "ENV": "E1",
            "settingA": "value",
            "otherConfig": ConfigMapping({"nest": ConfigMapping({"key": "nested"})}),
            "nested": ConfigList([ConfigMapping({"foo": "bar"}), ConfigList([1, 2, 3])]),
        }
    )


def _pickle_round_trip(value):
    return pickle.loads(pickle.dumps(value))


class TestContainerCopying:
    """Test suite for copying and pickling configuration containers."""

    @pytest.mark.unit
    @pytest.mark.parametrize("duplicate", [copy.copy, copy.deepcopy, _pickle_round_trip])
    def test_unfrozen_copy_keeps_data_only(self, duplicate):
        config = _sample_configuration()

        result = duplicate(config)

        assert type(result) is Configuration
        assert result == config
        assert list(result) == ["ENV", "settingA", "otherConfig", "nested"]
        assert "_frozen" not in result
        assert not is_frozen(result)

        result.settingA = "changed"
        assert config.settingA == "value"

    @pytest.mark.unit
    @pytest.mark.parametrize("duplicate", [copy.copy, copy.deepcopy, _pickle_round_trip])
    def test_frozen_copy_stays_frozen(self, duplicate):
        config = deep_freeze(_sample_configuration())

        result = duplicate(config)

        assert type(result) is Configuration
        assert result == config
        assert "_frozen" not in result
        assert is_frozen(result)
        assert is_frozen(result.otherConfig.nest)
        assert is_frozen(result.nested[1])
        with pytest.raises(FrozenConfigurationError):
            result.settingA = "changed"

    @pytest.mark.unit
    def test_deepcopy_copies_nested_containers(self):
        config = _sample_configuration()

        result = copy.deepcopy(config)
        result.otherConfig.nest.key = "changed"
        result.nested[1].append(4)

        assert config.otherConfig.nest.key == "nested"
        assert config.nested[1] == [1, 2, 3]
        assert type(result.nested) is ConfigList
        assert type(result.otherConfig) is ConfigMapping

    @pytest.mark.unit
    @pytest.mark.parametrize("frozen", [False, True])
    def test_list_copies(self, frozen):
        sequence = ConfigList([1, ConfigList([2, 3])])
        if frozen:
            deep_freeze(sequence)

        for duplicate in (copy.copy, copy.deepcopy, _pickle_round_trip):
            result = duplicate(sequence)

            assert type(result) is ConfigList
            assert result == [1, [2, 3]]
            assert is_frozen(result) is frozen
