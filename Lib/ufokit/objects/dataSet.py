from ufokit.objects.base import BaseObject


class DataSet(BaseObject):

    """
    This object manages all contents of the data directory in the font.

    This object behaves like a dict. The keys are paths relative to
    the data directory, using ``/`` as the separator, and the values
    are the raw bytes of the files::

        data = font.data["com.example.tool/settings.json"]
    """

    def __init__(self, font=None):
        super(DataSet, self).__init__()
        self.setParent(font)
        self._data = {}

    # --------------
    # Parent Objects
    # --------------

    def _get_font(self):
        return self.getParent()

    font = property(_get_font, doc="The :class:`Font` that this object belongs to.")

    # ----------
    # File Names
    # ----------

    def _get_fileNames(self):
        return list(self._data.keys())

    fileNames = property(_get_fileNames, doc="A list of all file names.")

    # -------------
    # Dict Behavior
    # -------------

    def __getitem__(self, fileName):
        return self._data[fileName]

    def __setitem__(self, fileName, data):
        if not isValidDataPath(fileName):
            raise ValueError("%r is not a legal data file path." % fileName)
        if not isinstance(data, bytes):
            raise TypeError("Data must be bytes, not %r." % type(data))
        self._data[fileName] = data

    def __delitem__(self, fileName):
        del self._data[fileName]

    def __contains__(self, fileName):
        return fileName in self._data

    def __iter__(self):
        return iter(list(self._data.keys()))

    def __len__(self):
        return len(self._data)

    def keys(self):
        return list(self._data.keys())

    def items(self):
        return list(self._data.items())

    def clear(self):
        self._data.clear()

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        getters = [("data", lambda k: dict(self._data))]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self._data = {}
        for fileName, fileData in data.get("data", {}).items():
            self[fileName] = fileData


def isValidDataPath(fileName):
    """
    A data path is relative, uses ``/`` between its parts
    and has no empty, ``.`` or ``..`` parts.

    >>> isValidDataPath("com.example/file.txt")
    True
    >>> isValidDataPath("/etc/passwd")
    False
    >>> isValidDataPath("a/../b")
    False
    >>> isValidDataPath("a\\\\b")
    False
    """
    if not isinstance(fileName, str) or not fileName or "\\" in fileName:
        return False
    for part in fileName.split("/"):
        if part in ("", ".", ".."):
            return False
    return True


def _test():
    """
    >>> data = DataSet()
    >>> data["com.example/a.txt"] = b"a"
    >>> data["com.example/b.txt"] = b"b"
    >>> data.fileNames
    ['com.example/a.txt', 'com.example/b.txt']
    >>> data["com.example/a.txt"]
    b'a'
    >>> data["x.txt"] = "text"
    Traceback (most recent call last):
        ...
    TypeError: Data must be bytes, not <class 'str'>.
    >>> del data["com.example/a.txt"]
    >>> "com.example/a.txt" in data
    False
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
