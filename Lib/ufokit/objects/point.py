from enum import Enum
from ufokit.objects.lib import Lib
from ufokit.tools.identifiers import makeRandomIdentifier


class PointType(str, Enum):

    """
    The closed set of point types found in a GLIF outline.
    """

    MOVE = "move"
    LINE = "line"
    OFFCURVE = "offcurve"
    CURVE = "curve"
    QCURVE = "qcurve"

    @classmethod
    def fromSegmentType(cls, value):
        """
        Convert a pen protocol segment type into a point type.
        *None* means an off-curve point.

        >>> PointType.fromSegmentType(None)
        <PointType.OFFCURVE: 'offcurve'>
        >>> PointType.fromSegmentType("curve")
        <PointType.CURVE: 'curve'>
        >>> PointType.fromSegmentType("arc")
        Traceback (most recent call last):
            ...
        ValueError: 'arc' is not a valid PointType
        """
        if value is None:
            return cls.OFFCURVE
        return cls(value)

    def _get_segmentType(self):
        if self is PointType.OFFCURVE:
            return None
        return self.value

    segmentType = property(_get_segmentType, doc="The pen protocol view of the type. Off-curve points give *None*.")

    def _get_isOnCurve(self):
        return self is not PointType.OFFCURVE

    isOnCurve = property(_get_isOnCurve)


class Point(object):

    """
    This object represents a single point.
    """

    __slots__ = ["_x", "_y", "_pointType", "_smooth", "_name", "_identifier", "_lib"]

    def __init__(self, coordinates, segmentType=None, smooth=False, name=None, identifier=None):
        super(Point, self).__init__()
        x, y = coordinates
        self._x = x
        self._y = y
        self._pointType = PointType.fromSegmentType(segmentType)
        self._smooth = smooth
        self._name = name
        self._identifier = identifier
        self._lib = None

    def __repr__(self):
        return "<%s position: (%s, %s) type: %s smooth: %s name: %s>" % (self.__class__.__name__, self.x, self.y, self.pointType.value, str(self.smooth), str(self.name))

    def _get_pointType(self):
        return self._pointType

    def _set_pointType(self, value):
        self._pointType = PointType(value)

    pointType = property(_get_pointType, _set_pointType, doc="The :class:`PointType` of the point.")

    def _get_segmentType(self):
        return self._pointType.segmentType

    def _set_segmentType(self, value):
        self._pointType = PointType.fromSegmentType(value)

    segmentType = property(_get_segmentType, _set_segmentType, doc="The segment type. The positibilies are *move*, *line*, *curve*, *qcurve* and *None* (indicating that this is an off-curve point).")

    def _get_x(self):
        return self._x

    def _set_x(self, value):
        self._x = value

    x = property(_get_x, _set_x, doc="The x coordinate.")

    def _get_y(self):
        return self._y

    def _set_y(self, value):
        self._y = value

    y = property(_get_y, _set_y, doc="The y coordinate.")

    def _get_smooth(self):
        return self._smooth

    def _set_smooth(self, value):
        self._smooth = value

    smooth = property(_get_smooth, _set_smooth, doc="A boolean indicating the smooth state of the point.")

    def _get_name(self):
        return self._name

    def _set_name(self, value):
        self._name = value

    name = property(_get_name, _set_name, doc="An arbitrary name for the point.")

    def move(self, values):
        """
        Move the point by **(x, y)**.
        """
        x, y = values
        self.x += x
        self.y += y

    # ----------
    # Identifier
    # ----------

    def _get_identifier(self):
        return self._identifier

    def _set_identifier(self, value):
        self._identifier = value

    identifier = property(_get_identifier, _set_identifier, doc="The identifier.")

    def generateIdentifier(self, existing=None):
        """
        Create a new identifier for and assign it to the point.
        **existing** is an optional set of identifiers to avoid.
        """
        self.identifier = makeRandomIdentifier(existing=existing)
        return self.identifier

    # ---
    # Lib
    # ---

    def _get_lib(self):
        if self._lib is None:
            self._lib = Lib()
        return self._lib

    def _set_lib(self, value):
        lib = self.lib
        lib.clear()
        lib.update(value)

    lib = property(_get_lib, _set_lib, doc="The point's :class:`Lib` object. It is written to the glyph's object libs.")

    # -------------
    # Serialization
    # -------------

    def getDataForSerialization(self, **kwargs):
        return dict(
            x=self.x,
            y=self.y,
            type=self.pointType.value,
            smooth=self.smooth,
            name=self.name,
            identifier=self.identifier,
            lib=self.lib.getDataForSerialization()
        )


def _test():
    """
    >>> point = Point((10, 20), "curve", smooth=True)
    >>> point.pointType
    <PointType.CURVE: 'curve'>
    >>> point.segmentType
    'curve'
    >>> point.move((5, -5))
    >>> (point.x, point.y)
    (15, 15)
    >>> point = Point((0, 0))
    >>> point.pointType.isOnCurve
    False
    >>> print(point.segmentType)
    None
    >>> point.pointType = "qcurve"
    >>> point.segmentType
    'qcurve'
    >>> point.lib["com.test"] = 1
    >>> point.getDataForSerialization()["lib"]
    {'com.test': 1}
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
