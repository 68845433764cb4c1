"""Value classes shared by the collection and coercion tests."""

from jol_core import Obj


class Mock(Obj):
    pass


class SubMock(Mock):
    pass


class Box:
    """Accepts anything; records the constructor argument."""

    def __init__(self, val=None):
        self.val = val
