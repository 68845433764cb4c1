"""Tests for Arr, Dict and the class-coercing collections."""

import pytest

from helpers import Box, Mock, SubMock
from jol_core import (
    ArgumentCountError,
    Arr,
    ClsArr,
    ClsDict,
    ClsMap,
    ClsSet,
    Dict,
    Obj,
    TypeMismatchError,
    override_config,
)


def nop():
    pass


class MockArr(ClsArr):
    cls = Mock


class MockSet(ClsSet):
    cls = Mock


class Tag(Obj):
    def __eq__(self, other):
        return type(other) is Tag and self.to_plain() == other.to_plain()


class TagSet(ClsSet):
    cls = Tag


class MockMap(ClsMap):
    cls = Mock


class MockDict(ClsDict):
    cls = Mock


class BoxArr(ClsArr):
    cls = Box


INVALID = [None, "one", 10, nop, [], set()]


# ---------------------------------------------------------------------------
# Arr
# ---------------------------------------------------------------------------

class TestArr:
    def test_reject_too_many_arguments(self):
        with pytest.raises(ArgumentCountError, match="expected between"):
            Arr([], [])

    @pytest.mark.parametrize("value", [{}, nop, True, 1.5, -1])
    def test_reject_invalid_inputs(self, value):
        with pytest.raises(TypeMismatchError):
            Arr(value)

    def test_constructor_supports_length(self):
        assert len(Arr()) == 0
        assert len(Arr(None)) == 0
        assert len(Arr(0)) == 0
        assert Arr(3) == [None, None, None]

    def test_constructor_supports_iterable(self):
        assert Arr("one") == ["o", "n", "e"]
        assert Arr([10, 20, 30]) == [10, 20, 30]
        assert Arr((10, 20)) == [10, 20]
        assert Arr(iter([10])) == [10]

    def test_push_and_unshift_return_self(self):
        arr = Arr([2])
        assert arr.push(3, 4) is arr
        assert arr.unshift(0, 1) is arr
        assert arr == [0, 1, 2, 3, 4]

    def test_list_protocol(self):
        arr = Arr([1, 2, 3])
        arr.append(4)
        arr.insert(0, 0)
        del arr[1]
        assert arr == [0, 2, 3, 4]
        assert arr[-1] == 4
        assert 3 in arr
        assert arr.index(3) == 2

    def test_slices_keep_class(self):
        sliced = Arr([1, 2, 3])[1:]
        assert type(sliced) is Arr
        assert sliced == [2, 3]

    def test_to_plain(self):
        plain = Arr([1, 2]).to_plain()
        assert type(plain) is list
        assert plain == [1, 2]

    def test_repr(self):
        assert repr(Arr([1])) == "Arr([1])"


# ---------------------------------------------------------------------------
# ClsArr
# ---------------------------------------------------------------------------

class TestClsArr:
    # These rejections originate in Mock -> Obj -> assign; the collection
    # only calls the constructor.
    @pytest.mark.parametrize("value", INVALID)
    def test_indirectly_reject_invalid_inputs(self, value):
        coll = MockArr()
        with pytest.raises(TypeMismatchError, match="type mismatch"):
            coll.push(value)
        assert len(coll) == 0

    def test_instantiation_in_constructor(self):
        assert type(MockArr([{}])[0]) is Mock

    def test_instantiation_on_push(self):
        coll = MockArr()
        coll.push({"one": 10})
        assert type(coll[0]) is Mock
        assert coll[0].one == 10

    @pytest.mark.parametrize("write", ["append", "insert", "setitem", "extend", "unshift", "iadd"])
    def test_every_write_coerces(self, write):
        coll = MockArr([{}])
        if write == "append":
            coll.append({})
        elif write == "insert":
            coll.insert(0, {})
        elif write == "setitem":
            coll[0] = {}
        elif write == "extend":
            coll.extend([{}])
        elif write == "unshift":
            coll.unshift({})
        else:
            coll += [{}]
        assert all(type(item) is Mock for item in coll)

    def test_slice_assignment_coerces(self):
        coll = MockArr([{}, {}])
        coll[0:2] = [{"one": 1}, {"two": 2}, {"three": 3}]
        assert len(coll) == 3
        assert all(type(item) is Mock for item in coll)

    def test_preserve_pre_instantiated(self):
        val = Mock({})
        coll = MockArr([val])
        assert coll[0] is val
        coll.push(val)
        assert coll[1] is val

    def test_subclass_instances_are_upgraded(self):
        val = SubMock({})
        coll = BoxArr()
        coll.push(val)
        assert type(coll[0]) is Box
        assert coll[0].val is val

    def test_unshift_keeps_argument_order(self):
        coll = BoxArr([1])
        coll.unshift(2, 3)
        assert [item.val for item in coll] == [2, 3, 1]

    def test_undeclared_class_stores_values_unchanged(self):
        val = object()
        coll = ClsArr([val])
        assert coll[0] is val

    def test_length_argument_coerces_slots(self):
        coll = BoxArr(2)
        assert [item.val for item in coll] == [None, None]
        with pytest.raises(TypeMismatchError):
            MockArr(1)


class TestClsArrBatches:
    def test_batches_are_atomic_by_default(self):
        coll = MockArr([{}])
        with pytest.raises(TypeMismatchError):
            coll.push({"one": 1}, 10, {"two": 2})
        assert len(coll) == 1
        with pytest.raises(TypeMismatchError):
            coll.unshift({"one": 1}, 10)
        assert len(coll) == 1
        with pytest.raises(TypeMismatchError):
            coll.extend([{}, None])
        assert len(coll) == 1

    def test_non_atomic_batches_keep_prefix(self):
        with override_config(atomic_batches=False):
            coll = MockArr()
            with pytest.raises(TypeMismatchError):
                coll.push({"one": 1}, 10, {"two": 2})
            assert len(coll) == 1
            assert coll[0].one == 1

            with pytest.raises(TypeMismatchError):
                coll.unshift({"zero": 0}, 10)
            assert [item.to_plain() for item in coll] == [{"zero": 0}, {"one": 1}]

    def test_non_atomic_constructor(self):
        with override_config(atomic_batches=False):
            with pytest.raises(TypeMismatchError):
                MockArr([{}, 10])


# ---------------------------------------------------------------------------
# ClsSet
# ---------------------------------------------------------------------------

class TestClsSet:
    @pytest.mark.parametrize("value", INVALID)
    def test_indirectly_reject_invalid_inputs(self, value):
        coll = MockSet()
        with pytest.raises(TypeMismatchError, match="type mismatch"):
            coll.add(value)
        assert len(coll) == 0

    def test_instantiation_in_constructor(self):
        assert type(next(iter(MockSet([{}])))) is Mock

    def test_instantiation_on_add(self):
        coll = MockSet()
        coll.add({})
        assert type(list(coll)[0]) is Mock

    def test_preserve_pre_instantiated(self):
        val = Mock({})
        coll = MockSet([val])
        coll.add(val)
        assert list(coll) == [val]
        assert list(coll)[0] is val

    def test_insertion_order(self):
        a, b, c = Mock({}), Mock({}), Mock({})
        coll = MockSet([b, a])
        coll.add(c)
        assert list(coll) == [b, a, c]

    def test_discard_and_contains(self):
        val = Mock({})
        coll = MockSet([val])
        assert val in coll
        coll.discard(val)
        assert val not in coll
        assert [] not in coll

    def test_atomic_constructor(self):
        with pytest.raises(TypeMismatchError):
            MockSet([{}, 10])

    def test_rejects_records_as_source(self):
        with pytest.raises(TypeMismatchError):
            MockSet({"one": {}})

    def test_unhashable_members(self):
        coll = TagSet([{"n": 1}])
        coll.add({"n": 2})
        assert [tag.n for tag in coll] == [1, 2]

    def test_equal_distinct_members_are_kept(self):
        a, b = Tag({"n": 1}), Tag({"n": 1})
        assert a == b
        coll = TagSet([a, b])
        assert len(coll) == 2
        assert a in coll and b in coll
        assert Tag({"n": 1}) not in coll

    def test_discard_by_identity(self):
        a, b = Tag({"n": 1}), Tag({"n": 1})
        coll = TagSet([a, b])
        coll.discard(Tag({"n": 1}))
        assert len(coll) == 2
        coll.discard(a)
        assert list(coll) == [b]
        assert coll.to_plain()[0] is b


# ---------------------------------------------------------------------------
# ClsMap
# ---------------------------------------------------------------------------

class TestClsMap:
    @pytest.mark.parametrize("value", INVALID)
    def test_indirectly_reject_invalid_inputs(self, value):
        coll = MockMap()
        with pytest.raises(TypeMismatchError, match="type mismatch"):
            coll.set(10, value)
        assert 10 not in coll

    def test_instantiation_in_constructor(self):
        coll = MockMap([(10, {})])
        assert type(coll[10]) is Mock

    def test_constructor_accepts_mappings(self):
        coll = MockMap({"one": {}, 2: {}})
        assert type(coll["one"]) is Mock
        assert type(coll[2]) is Mock

    def test_instantiation_on_set(self):
        coll = MockMap()
        assert coll.set(10, {}) is coll
        coll[20] = {}
        coll.setdefault(30, {})
        coll.update({40: {}}, fifty={})
        assert all(type(val) is Mock for val in coll.values())
        assert list(coll) == [10, 20, 30, 40, "fifty"]

    def test_keys_are_never_coerced(self):
        key = (1, 2)
        coll = MockMap().set(key, {})
        assert list(coll) == [key]

    def test_preserve_pre_instantiated(self):
        val = Mock({})
        coll = MockMap().set(10, val)
        assert coll.get(10) is val

    def test_atomic_update(self):
        coll = MockMap()
        with pytest.raises(TypeMismatchError):
            coll.update({1: {}, 2: 10})
        assert len(coll) == 0


# ---------------------------------------------------------------------------
# Dict / ClsDict
# ---------------------------------------------------------------------------

class TestDict:
    def test_from_record(self):
        coll = Dict({"one": 10, "two": 20})
        assert coll["one"] == 10
        assert list(coll.items()) == [("one", 10), ("two", 20)]

    def test_from_pairs(self):
        assert Dict([("one", 10)]).to_plain() == {"one": 10}

    def test_keys_must_be_strings(self):
        with pytest.raises(TypeMismatchError, match="is_key"):
            Dict().set(10, "one")
        with pytest.raises(TypeMismatchError):
            Dict({10: "one"})

    def test_patch(self):
        coll = Dict({"one": 10})
        assert coll.patch({"two": 20}) is coll
        coll.patch([("three", 30)])
        coll.patch(None)
        assert coll.to_plain() == {"one": 10, "two": 20, "three": 30}

    def test_patch_rejects_non_iterables(self):
        with pytest.raises(TypeMismatchError):
            Dict().patch(10)

    def test_to_plain_round_trip(self):
        coll = Dict({"one": 10})
        plain = coll.to_plain()
        assert type(plain) is dict
        assert Dict(plain) == coll

    def test_repr(self):
        assert repr(Dict({"one": 1})) == "Dict({'one': 1})"


class TestClsDict:
    @pytest.mark.parametrize("value", INVALID)
    def test_indirectly_reject_invalid_inputs(self, value):
        coll = MockDict()
        with pytest.raises(TypeMismatchError, match="type mismatch"):
            coll.set("one", value)

    def test_coerces_values(self):
        coll = MockDict({"one": {"x": 1}})
        coll.set("two", {})
        coll.patch({"three": {}})
        assert all(type(val) is Mock for val in coll.values())
        assert coll["one"].x == 1

    def test_atomic_patch(self):
        coll = MockDict({"one": {}})
        with pytest.raises(TypeMismatchError):
            coll.patch({"two": {}, "three": 10})
        assert list(coll) == ["one"]

    def test_non_atomic_patch(self):
        with override_config(atomic_batches=False):
            coll = MockDict()
            with pytest.raises(TypeMismatchError):
                coll.patch({"two": {}, "three": 10})
            assert list(coll) == ["two"]
