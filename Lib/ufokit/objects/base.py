import weakref
from copy import deepcopy


class BaseObject(object):

    """
    The base object in ufokit from which all other objects should be derived.

    Objects hold a weak reference to the object that owns them.
    Subclasses expose it through ``getParent`` and the named
    parent attributes (``font``, ``layer``, ``glyph`` ...).
    """

    def __init__(self):
        self._init()

    def _init(self):
        self._parent = None

    # ------
    # Parent
    # ------

    def getParent(self):
        if self._parent is None:
            return None
        return self._parent()

    def setParent(self, parent):
        if parent is None:
            self._parent = None
        else:
            self._parent = weakref.ref(parent)

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        """
        Return a dict of plain data describing this object.
        Two objects holding the same data return equal dicts.
        """
        return {}

    def setDataFromSerialization(self, data):
        """
        Restore state from the provided data-dict.
        """
        pass

    def _serialize(self, getters, whitelist=None, blacklist=None, **kwargs):
        """ A helper function for the ufokit objects.

        Return a dict where the keys are the keys in getters and the values
        are the results of the getter functions

        getters is a list of tuples:
        [
            (:str:key, :callable:getter_function)
        ]

        if a whitelist is not None: the key must be in whitelist
        if a blacklist is not None: the key must not be in blacklist
        """
        data = {}
        for key, getter in getters:
            if whitelist is not None and key not in whitelist:
                continue
            if blacklist is not None and key in blacklist:
                continue
            data[key] = getter(key)
        return data


class BaseDictObject(dict, BaseObject):

    """
    A subclass of BaseObject that implements a dict API.
    Key order is the insertion order.
    """

    def __init__(self):
        super(BaseDictObject, self).__init__()
        self._init()

    def __hash__(self):
        return id(self)

    def __deepcopy__(self, memo):
        obj = self.__class__()
        for k, v in list(self.items()):
            obj[deepcopy(k, memo)] = deepcopy(v, memo)
        return obj

    def update(self, other=(), **kwargs):
        # route through __setitem__ so subclasses can convert values
        if hasattr(other, "keys"):
            other = [(key, other[key]) for key in other.keys()]
        for key, value in other:
            self[key] = value
        for key, value in kwargs.items():
            self[key] = value

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        deep_get = lambda k: deepcopy(dict.__getitem__(self, k))

        getters = []
        for k in list(self.keys()):
            getters.append((k, deep_get))

        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self.clear()
        self.update(data)


def _testDict():
    """
    >>> obj = BaseDictObject()
    >>> obj["B"] = 1
    >>> obj["A"] = 2
    >>> list(obj.keys())
    ['B', 'A']
    >>> "A" in obj
    True
    >>> obj.update(dict(C=3))
    >>> len(obj)
    3
    >>> obj.getDataForSerialization()
    {'B': 1, 'A': 2, 'C': 3}
    >>> obj.getDataForSerialization(whitelist=["A"])
    {'A': 2}
    >>> hash(obj) == hash(obj)
    True
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
