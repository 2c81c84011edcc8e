"""
End-to-end tests: nested profiles and their failure paths.
"""

import re
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from declare_constraints import (
    And,
    HasAllKeys,
    HasLength,
    IsArrayRef,
    IsDefined,
    IsHashRef,
    IsInt,
    IsObject,
    Matches,
    Message,
    OnHashKeys,
)


@pytest.fixture
def profile():
    return And(
        IsHashRef(),
        HasAllKeys("foo", "bar", "baz"),
        OnHashKeys(
            foo=IsArrayRef(IsInt()),
            bar=Message("Definition Error", IsDefined()),
            baz=IsHashRef(values=Matches(re.compile("oo"))),
        ),
    )


@pytest.fixture
def data():
    return {
        "foo": [1, 2, 3, "Hooray"],
        "bar": "Fnord!",
        "baz": {23: "foobar", 5: "Foo Fighters", 12: "boolean rockz"},
    }


class TestProfile:
    def test_array_element_failure(self, profile, data):
        r = profile(data)
        assert not r.is_valid()
        assert r.path == "And.OnHashKeys[foo].IsArrayRef[3].IsInt"
        assert r.message == "Not an Integer"

    def test_message_override_failure(self, profile, data):
        data["foo"].pop()
        data["bar"] = None
        r = profile(data)
        assert not r.is_valid()
        assert r.path == "And.OnHashKeys[bar].Message.IsDefined"
        assert r.message == "Definition Error"

    def test_valid(self, profile, data):
        data["foo"].pop()
        assert profile(data).is_valid()

    def test_hash_value_failure(self, profile, data):
        data["foo"].pop()
        data["baz"][7] = "zzz"
        r = profile(data)
        assert r.path == "And.OnHashKeys[baz].IsHashRef[val 7].Matches"
        assert r.message == "Regex does not match"

    def test_missing_key(self, profile, data):
        del data["baz"]
        r = profile(data)
        assert r.path == "And.HasAllKeys[baz]"

    def test_not_a_hash(self, profile):
        r = profile(None)
        assert r.path == "And.IsHashRef"
        assert r.message == "Undefined Value"


class TestRoundTrip:
    def test_required_key(self):
        c = And(IsHashRef(), HasAllKeys("foo"))
        assert c({"foo": 1}).is_valid()
        r = c({})
        assert not r.is_valid()
        assert r.path.endswith("HasAllKeys[foo]")

    def test_reused_segments(self):
        id_to_objects = IsArrayRef(IsObject())
        lists = And(
            IsHashRef(keys=HasLength()),
            HasAllKeys("good", "bad"),
            OnHashKeys(good=id_to_objects, bad=id_to_objects),
        )
        assert lists({"good": [Marker()], "bad": []}).is_valid()
        r = lists({"good": [], "bad": [Marker(), 23]})
        assert r.path == "And.OnHashKeys[bad].IsArrayRef[1].IsObject"


class Marker:
    pass


class TestIsolation:
    def test_concurrent_evaluations(self):
        """Failure annotations and message overrides never leak across threads."""
        by_index = IsArrayRef(IsInt())
        by_message = Message("thread message", IsArrayRef(IsInt()))
        barrier = threading.Barrier(8)

        def run(n):
            barrier.wait()
            results = []
            for _ in range(200):
                value = [0] * n + ["x"]
                if n % 2:
                    results.append(by_message(value))
                else:
                    results.append(by_index(value))
            return n, results

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(run, range(8)))

        for n, results in outcomes:
            for r in results:
                if n % 2:
                    assert r.path == f"Message.IsArrayRef[{n}].IsInt"
                    assert r.message == "thread message"
                else:
                    assert r.path == f"IsArrayRef[{n}].IsInt"
                    assert r.message == "Not an Integer"
