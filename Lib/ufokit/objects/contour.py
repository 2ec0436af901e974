from fontTools.pens.pointPen import PointToSegmentPen
from ufokit.objects.base import BaseObject
from ufokit.objects.lib import Lib
from ufokit.tools.identifiers import makeRandomIdentifier
from ufokit.tools import representations


class Contour(BaseObject):

    """
    This object represents a contour and it contains a list of points.

    The Contour object has list like behavior. This behavior allows you to interact
    with point data directly. For example, to get a particular point::

        point = contour[0]

    To iterate over all points::

        for point in contour:

    To get the number of points::

        pointCount = len(contour)

    The points keep the order in which they were added. Nothing
    checks that the point sequence is drawable; that is reported
    by :func:`ufokit.validator.validateGlyph`.
    """

    def __init__(self, pointClass=None):
        super(Contour, self).__init__()
        self._points = []
        if pointClass is None:
            from ufokit.objects.point import Point
            pointClass = Point
        self._pointClass = pointClass
        self._identifier = None
        self._lib = None

    # ----------
    # Attributes
    # ----------

    # parents

    def _get_font(self):
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.font

    font = property(_get_font, doc="The :class:`Font` that this contour belongs to.")

    def _get_layer(self):
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.layer

    layer = property(_get_layer, doc="The :class:`Layer` that this contour belongs to.")

    def _get_glyph(self):
        return self.getParent()

    glyph = property(_get_glyph, doc="The :class:`Glyph` that this contour belongs to.")

    def _get_pointClass(self):
        return self._pointClass

    pointClass = property(_get_pointClass, doc="The class used for point.")

    # geometry

    def _get_bounds(self):
        return representations.contourBounds(self)

    bounds = property(_get_bounds, doc="The bounds of the contour's outline expressed as a tuple of form (xMin, yMin, xMax, yMax).")

    def _get_controlPointBounds(self):
        return representations.contourControlPointBounds(self)

    controlPointBounds = property(_get_controlPointBounds, doc="The control bounds of all points in the contour. This only measures the point positions, it does not measure curves. So, curves without points at the extrema will not be properly measured.")

    def _get_area(self):
        return representations.contourArea(self)

    area = property(_get_area, doc="The signed area of the contour. Counter-clockwise contours are positive.")

    def _get_open(self):
        if not self._points:
            return False
        return self._points[0].segmentType == "move"

    open = property(_get_open, doc="A boolean indicating if the contour is open or not.")

    def _get_onCurvePoints(self):
        return [point for point in self._points if point.segmentType]

    onCurvePoints = property(_get_onCurvePoints, doc="A list of all on curve points in the contour.")

    def _get_segments(self):
        if not len(self._points):
            return []
        segments = [[]]
        lastWasOffCurve = False
        for point in self._points:
            segments[-1].append(point)
            if point.segmentType is not None:
                segments.append([])
            lastWasOffCurve = point.segmentType is None
        if len(segments[-1]) == 0:
            del segments[-1]
        if lastWasOffCurve and len(segments) > 1:
            segment = segments.pop(-1)
            segment.extend(segments.pop(0))
            segments.append(segment)
        elif segments[0][-1].segmentType != "move":
            segment = segments.pop(0)
            segments.append(segment)
        return segments

    segments = property(_get_segments, doc="A list of all points in the contour organized into segments.")

    # -------
    # Methods
    # -------

    def __len__(self):
        return len(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __iter__(self):
        return iter(list(self._points))

    def clear(self):
        """
        Clear the contents of the contour.
        """
        self._points = []

    def appendPoint(self, point):
        """
        Append **point** to the contour. The point must be a
        :class:`Point` object or a subclass of that object.
        """
        self.insertPoint(len(self._points), point)

    def insertPoint(self, index, point):
        """
        Insert **point** into the contour at index. The point
        must be a :class:`Point` object or a subclass of that
        object. Identifiers are not checked for duplicates.
        """
        if any(p is point for p in self._points):
            raise ValueError("The point is already in the contour.")
        self._points.insert(index, point)

    def removePoint(self, point):
        """
        Remove **point** from the contour.
        """
        del self._points[self.index(point)]

    def index(self, point):
        """
        Get the index for **point**.
        """
        for index, other in enumerate(self._points):
            if other is point:
                return index
        raise ValueError("The point is not in the contour.")

    def move(self, values):
        """
        Move all points in the contour by **(x, y)**.
        """
        for point in self._points:
            point.move(values)

    def setStartPoint(self, index):
        """
        Set the point at **index** as the first point in the contour.
        This point must be an on-curve point. Open contours are not
        changed.
        """
        if self.open:
            return
        point = self._points[index]
        if point.segmentType is None:
            raise ValueError("index must represent an on curve point")
        self._points = self._points[index:] + self._points[:index]

    # -----------
    # Pen methods
    # -----------

    def beginPath(self, identifier=None, **kwargs):
        """
        Standard point pen *beginPath* method.
        This should not be used externally.
        """
        if identifier is not None:
            self.identifier = identifier

    def endPath(self):
        """
        Standard point pen *endPath* method.
        This should not be used externally.
        """
        pass

    def addPoint(self, pt, segmentType=None, smooth=False, name=None, identifier=None, **kwargs):
        """
        Standard point pen *addPoint* method.
        This should not be used externally.
        """
        point = self._pointClass(pt, segmentType=segmentType, smooth=smooth, name=name, identifier=identifier)
        self.insertPoint(len(self._points), point)

    def draw(self, pen):
        """
        Draw the contour with **pen**.
        """
        pointPen = PointToSegmentPen(pen)
        self.drawPoints(pointPen)

    def drawPoints(self, pointPen):
        """
        Draw the contour with **pointPen**.
        """
        pointPen.beginPath(identifier=self.identifier)
        for point in self._points:
            pointPen.addPoint((point.x, point.y), segmentType=point.segmentType, smooth=point.smooth, name=point.name, identifier=point.identifier)
        pointPen.endPath()

    # ----------
    # Identifier
    # ----------

    def _get_identifiers(self):
        glyph = self.glyph
        if glyph is None:
            identifiers = set()
            if self._identifier is not None:
                identifiers.add(self._identifier)
            for point in self._points:
                if point.identifier is not None:
                    identifiers.add(point.identifier)
            return identifiers
        return glyph.identifiers

    identifiers = property(_get_identifiers, doc="Set of identifiers for the glyph that this contour belongs to. This is primarily for internal use.")

    def _get_identifier(self):
        return self._identifier

    def _set_identifier(self, value):
        self._identifier = value

    identifier = property(_get_identifier, _set_identifier, doc="The identifier.")

    def generateIdentifier(self):
        """
        Create a new, unique identifier for and assign it to the contour.
        """
        self.identifier = makeRandomIdentifier(existing=self.identifiers)
        return self.identifier

    def generateIdentifierForPoint(self, point):
        """
        Create a new, unique identifier for and assign it to **point**.
        """
        return point.generateIdentifier(existing=self.identifiers)

    # ---
    # Lib
    # ---

    def _get_lib(self):
        if self._lib is None:
            self._lib = Lib()
            self._lib.setParent(self)
        return self._lib

    def _set_lib(self, value):
        lib = self.lib
        lib.clear()
        lib.update(value)

    lib = property(_get_lib, _set_lib, doc="The contour's :class:`Lib` object. It is written to the glyph's object libs.")

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        getters = [
            ("identifier", lambda k: self.identifier),
            ("points", lambda k: [point.getDataForSerialization() for point in self._points]),
            ("lib", lambda k: self.lib.getDataForSerialization())
        ]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self.clear()
        self.identifier = data.get("identifier")
        for pointData in data.get("points", []):
            pointType = pointData.get("type", "offcurve")
            point = self._pointClass((pointData["x"], pointData["y"]), smooth=pointData.get("smooth", False), name=pointData.get("name"), identifier=pointData.get("identifier"))
            point.pointType = pointType
            point.lib = pointData.get("lib", {})
            self.appendPoint(point)
        self.lib = data.get("lib", {})


# -----
# Tests
# -----

def _makeSquare():
    contour = Contour()
    contour.addPoint((0, 0), "line")
    contour.addPoint((0, 100), "line")
    contour.addPoint((100, 100), "line")
    contour.addPoint((100, 0), "line")
    return contour


def _testBounds():
    """
    >>> contour = _makeSquare()
    >>> contour.bounds
    (0, 0, 100, 100)
    >>> contour.controlPointBounds
    (0, 0, 100, 100)
    >>> contour.move((10, 20))
    >>> contour.bounds
    (10, 20, 110, 120)
    >>> contour.area
    -10000.0
    """


def _testOpen():
    """
    >>> contour = Contour()
    >>> contour.open
    False
    >>> contour.addPoint((0, 0), "move")
    >>> contour.addPoint((100, 0), "line")
    >>> contour.open
    True
    >>> contour.setStartPoint(1)
    >>> contour[0].segmentType
    'move'
    """


def _testSegments():
    """
    >>> contour = Contour()
    >>> contour.addPoint((0, 0), "line")
    >>> contour.addPoint((0, 50))
    >>> contour.addPoint((50, 100))
    >>> contour.addPoint((100, 100), "curve")
    >>> [[point.segmentType for point in segment] for segment in contour.segments]
    [[None, None, 'curve'], ['line']]
    >>> [point.segmentType for point in contour.onCurvePoints]
    ['line', 'curve']
    """


def _testPointList():
    """
    >>> contour = _makeSquare()
    >>> len(contour)
    4
    >>> point = contour[2]
    >>> contour.index(point)
    2
    >>> contour.removePoint(point)
    >>> len(contour)
    3
    >>> contour.appendPoint(contour[0])
    Traceback (most recent call last):
        ...
    ValueError: The point is already in the contour.
    >>> contour.setStartPoint(1)
    >>> [(point.x, point.y) for point in contour]
    [(0, 100), (100, 0), (0, 0)]
    """


def _testIdentifier():
    """
    >>> contour = _makeSquare()
    >>> contour.identifier
    >>> identifier = contour.generateIdentifier()
    >>> contour.identifier == identifier
    True
    >>> pointIdentifier = contour.generateIdentifierForPoint(contour[0])
    >>> sorted(contour.identifiers) == sorted([identifier, pointIdentifier])
    True
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
