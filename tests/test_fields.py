"""Tests for the UNSET sentinel."""

import copy
import pickle
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbind.fields import UNSET, UnsetType, present


class TestUnset:
    def test_singleton(self) -> None:
        assert UnsetType() is UNSET
        assert copy.deepcopy(UNSET) is UNSET
        assert pickle.loads(pickle.dumps(UNSET)) is UNSET

    def test_falsy(self) -> None:
        assert not UNSET
        assert repr(UNSET) == "UNSET"

    def test_present(self) -> None:
        assert present(a=1, b=UNSET, c=None, d=False, e=[]) == {"a": 1, "c": None, "d": False, "e": []}
