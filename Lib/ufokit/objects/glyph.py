from copy import deepcopy
from fontTools.pens.pointPen import PointToSegmentPen, SegmentToPointPen
from ufokit.constants import MARK_COLOR_KEY
from ufokit.objects.base import BaseObject
from ufokit.objects.contour import Contour
from ufokit.objects.point import Point
from ufokit.objects.component import Component
from ufokit.objects.anchor import Anchor
from ufokit.objects.lib import Lib
from ufokit.objects.guideline import Guideline
from ufokit.objects.image import Image
from ufokit.objects.color import normalizeColor
from ufokit.tools import representations


class Glyph(BaseObject):

    """
    This object represents a glyph and it contains contour, component, anchor
    and other assorted bits data about the glyph.

    The Glyph object has list like behavior. This behavior allows you to interact
    with contour data directly. For example, to get a particular contour::

        contour = glyph[0]

    To iterate over all contours::

        for contour in glyph:

    To get the number of contours::

        contourCount = len(glyph)

    To interact with components or anchors in a similar way,
    use the ``components`` and ``anchors`` attributes.

    Contours and components are kept in separate lists. When drawn or
    written, contours come first.
    """

    def __init__(self, layer=None,
        contourClass=None, pointClass=None, componentClass=None, anchorClass=None,
        guidelineClass=None, libClass=None, imageClass=None):
        super(Glyph, self).__init__()
        self.setParent(layer)

        self._name = None
        self._unicodes = []
        self._width = None
        self._height = None
        self._note = None
        self._image = None
        self._contours = []
        self._components = []
        self._anchors = []
        self._guidelines = []
        self._lib = None

        if contourClass is None:
            contourClass = Contour
        if pointClass is None:
            pointClass = Point
        if componentClass is None:
            componentClass = Component
        if anchorClass is None:
            anchorClass = Anchor
        if guidelineClass is None:
            guidelineClass = Guideline
        if libClass is None:
            libClass = Lib
        if imageClass is None:
            imageClass = Image
        self._contourClass = contourClass
        self._pointClass = pointClass
        self._componentClass = componentClass
        self._anchorClass = anchorClass
        self._guidelineClass = guidelineClass
        self._libClass = libClass
        self._imageClass = imageClass

    def __repr__(self):
        return "<%s %r at 0x%x>" % (self.__class__.__name__, self._name, id(self))

    # --------------
    # Parent Objects
    # --------------

    def _get_layer(self):
        return self.getParent()

    layer = property(_get_layer, doc="The :class:`Layer` that this glyph belongs to.")

    def _get_layerSet(self):
        layer = self.layer
        if layer is None:
            return None
        return layer.layerSet

    layerSet = property(_get_layerSet, doc="The :class:`LayerSet` that this glyph belongs to.")

    def _get_font(self):
        layer = self.layer
        if layer is None:
            return None
        return layer.font

    font = property(_get_font, doc="The :class:`Font` that this glyph belongs to.")

    # ----------------
    # Basic Attributes
    # ----------------

    # identifiers

    def _get_identifiers(self):
        identifiers = set()
        for contour in self._contours:
            if contour.identifier is not None:
                identifiers.add(contour.identifier)
            for point in contour:
                if point.identifier is not None:
                    identifiers.add(point.identifier)
        for objects in (self._components, self._anchors, self._guidelines):
            for obj in objects:
                if obj.identifier is not None:
                    identifiers.add(obj.identifier)
        return identifiers

    identifiers = property(_get_identifiers, doc="Set of identifiers used in the glyph. This is primarily for internal use.")

    # name

    def _set_name(self, value):
        oldName = self._name
        if oldName == value:
            return
        self._name = value
        layer = self.layer
        if layer is not None:
            layer._glyphNameChanged(self, oldName, value)

    def _get_name(self):
        return self._name

    name = property(_get_name, _set_name, doc="The name of the glyph. Renaming does not check for collisions; duplicate names are reported by the validator.")

    # unicodes

    def _get_unicodes(self):
        return list(self._unicodes)

    def _set_unicodes(self, value):
        self._unicodes = list(value)

    unicodes = property(_get_unicodes, _set_unicodes, doc="The list of unicode values assigned to the glyph.")

    def _get_unicode(self):
        if self._unicodes:
            return self._unicodes[0]
        return None

    def _set_unicode(self, value):
        if value is None:
            self.unicodes = []
        else:
            existing = list(self._unicodes)
            if value in existing:
                existing.pop(existing.index(value))
            existing.insert(0, value)
            self.unicodes = existing

    unicode = property(_get_unicode, _set_unicode, doc="The primary unicode value for the glyph. This is the equivalent of ``glyph.unicodes[0]``. This is a convenience attribute that works with the ``unicodes`` attribute.")

    # -------
    # Metrics
    # -------

    # bounds

    def _get_bounds(self):
        return representations.glyphBounds(self)

    bounds = property(_get_bounds, doc="The bounds of the glyph's outline expressed as a tuple of form (xMin, yMin, xMax, yMax).")

    def _get_controlPointBounds(self):
        return representations.glyphControlPointBounds(self)

    controlPointBounds = property(_get_controlPointBounds, doc="The control bounds of all points in the glyph. This only measures the point positions, it does not measure curves. So, curves without points at the extrema will not be properly measured.")

    def _get_area(self):
        return representations.glyphArea(self)

    area = property(_get_area, doc="The area of the glyph's outline.")

    # margins

    def _get_leftMargin(self):
        bounds = self.bounds
        if bounds is None:
            return None
        xMin, yMin, xMax, yMax = bounds
        return xMin

    def _set_leftMargin(self, value):
        bounds = self.bounds
        if bounds is None:
            return
        xMin, yMin, xMax, yMax = bounds
        diff = value - xMin
        if diff:
            self.move((diff, 0))
            self.width += diff

    leftMargin = property(_get_leftMargin, _set_leftMargin, doc="The left margin of the glyph.")

    def _get_rightMargin(self):
        bounds = self.bounds
        if bounds is None:
            return None
        xMin, yMin, xMax, yMax = bounds
        return self.width - xMax

    def _set_rightMargin(self, value):
        bounds = self.bounds
        if bounds is None:
            return
        xMin, yMin, xMax, yMax = bounds
        if self.width - xMax != value:
            self.width = xMax + value

    rightMargin = property(_get_rightMargin, _set_rightMargin, doc="The right margin of the glyph.")

    # width

    def _get_width(self):
        if self._width is not None:
            return self._width
        font = self.font
        if font is not None:
            defaultWidth = font.info.postscriptDefaultWidthX
            if defaultWidth is not None:
                return defaultWidth
        return 0

    def _set_width(self, value):
        self._width = value

    width = property(_get_width, _set_width, doc="The advance width of the glyph. When no width has been set this falls back to the font's *postscriptDefaultWidthX* and then to 0. Setting *None* removes the explicit width.")

    def _get_explicitWidth(self):
        return self._width

    explicitWidth = property(_get_explicitWidth, doc="The width that was set on the glyph or *None*. Only this value is written to the glyph file.")

    # height

    def _get_height(self):
        if self._height is None:
            return 0
        return self._height

    def _set_height(self, value):
        self._height = value

    height = property(_get_height, _set_height, doc="The height of the glyph. When no height has been set this is 0.")

    def _get_explicitHeight(self):
        return self._height

    explicitHeight = property(_get_explicitHeight, doc="The height that was set on the glyph or *None*.")

    # ----------------------
    # Lib Wrapped Attributes
    # ----------------------

    # mark color

    def _get_markColor(self):
        return self.lib.get(MARK_COLOR_KEY)

    def _set_markColor(self, value):
        value = normalizeColor(value)
        if value is None:
            if MARK_COLOR_KEY in self.lib:
                del self.lib[MARK_COLOR_KEY]
        else:
            self.lib[MARK_COLOR_KEY] = str(value)

    markColor = property(_get_markColor, _set_markColor, doc="The glyph's mark color, stored in the glyph lib. When setting, the value can be a UFO color string, a sequence of (r, g, b, a) or a :class:`Color` object.")

    # -------
    # Pen API
    # -------

    def draw(self, pen):
        """
        Draw the glyph with **pen**.
        """
        pointPen = PointToSegmentPen(pen)
        self.drawPoints(pointPen)

    def drawPoints(self, pointPen):
        """
        Draw the glyph with **pointPen**.
        """
        for contour in self._contours:
            contour.drawPoints(pointPen)
        for component in self._components:
            component.drawPoints(pointPen)

    def getPen(self):
        """
        Get the pen used to draw into this glyph.
        """
        return SegmentToPointPen(self.getPointPen())

    def getPointPen(self):
        """
        Get the point pen used to draw into this glyph.
        """
        from ufokit.pens.glyphObjectPointPen import GlyphObjectPointPen
        return GlyphObjectPointPen(self)

    # --------
    # Contours
    # --------

    def _get_contourClass(self):
        return self._contourClass

    contourClass = property(_get_contourClass, doc="The class used for contours.")

    def _get_pointClass(self):
        return self._pointClass

    pointClass = property(_get_pointClass, doc="The class used for points.")

    def _get_contours(self):
        return list(self._contours)

    contours = property(_get_contours, doc="An ordered list of :class:`Contour` objects stored in the glyph.")

    def instantiateContour(self):
        contour = self._contourClass(
            pointClass=self._pointClass
        )
        return contour

    def appendContour(self, contour):
        """
        Append **contour** to the glyph. The contour must be a
        :class:`Contour` object or a subclass of that object.
        """
        self.insertContour(len(self._contours), contour)

    def insertContour(self, index, contour):
        """
        Insert **contour** into the glyph at index. The contour
        must be a :class:`Contour` object or a subclass of that
        object. A contour that belongs to another glyph raises
        a *ValueError*.
        """
        self._insertObject(self._contours, index, contour, "contour")

    def removeContour(self, contour):
        """
        Remove **contour** from the glyph.
        """
        self._removeObject(self._contours, contour, "contour")

    def contourIndex(self, contour):
        """
        Get the index for **contour**.
        """
        return _indexOf(self._contours, contour, "contour")

    def clearContours(self):
        """
        Clear all contours from the glyph.
        """
        for contour in reversed(self._contours):
            self.removeContour(contour)

    # ----------
    # Components
    # ----------

    def _get_componentClass(self):
        return self._componentClass

    componentClass = property(_get_componentClass, doc="The class used for components.")

    def _get_components(self):
        return list(self._components)

    components = property(_get_components, doc="An ordered list of :class:`Component` objects stored in the glyph.")

    def instantiateComponent(self):
        component = self._componentClass()
        return component

    def appendComponent(self, component):
        """
        Append **component** to the glyph. The component must be a
        :class:`Component` object or a subclass of that object.
        """
        self.insertComponent(len(self._components), component)

    def insertComponent(self, index, component):
        """
        Insert **component** into the glyph at index. The component
        must be a :class:`Component` object or a subclass of that
        object.
        """
        self._insertObject(self._components, index, component, "component")

    def removeComponent(self, component):
        """
        Remove **component** from the glyph.
        """
        self._removeObject(self._components, component, "component")

    def componentIndex(self, component):
        """
        Get the index for **component**.
        """
        return _indexOf(self._components, component, "component")

    def clearComponents(self):
        """
        Clear all components from the glyph.
        """
        for component in reversed(self._components):
            self.removeComponent(component)

    # -------
    # Anchors
    # -------

    def _get_anchorClass(self):
        return self._anchorClass

    anchorClass = property(_get_anchorClass, doc="The class used for anchors.")

    def _get_anchors(self):
        return list(self._anchors)

    def _set_anchors(self, value):
        self.clearAnchors()
        for anchor in value:
            self.appendAnchor(anchor)

    anchors = property(_get_anchors, _set_anchors, doc="An ordered list of :class:`Anchor` objects stored in the glyph.")

    def instantiateAnchor(self, anchorDict=None):
        anchor = self._anchorClass(
            anchorDict=anchorDict
        )
        return anchor

    def appendAnchor(self, anchor):
        """
        Append **anchor** to the glyph. The anchor must be a
        :class:`Anchor` object or a subclass of that object.
        A dict is converted to an anchor.
        """
        self.insertAnchor(len(self._anchors), anchor)

    def insertAnchor(self, index, anchor):
        """
        Insert **anchor** into the glyph at index. The anchor
        must be a :class:`Anchor` object or a subclass of that
        object. A dict is converted to an anchor.
        """
        if not isinstance(anchor, self._anchorClass):
            anchor = self.instantiateAnchor(anchorDict=anchor)
        self._insertObject(self._anchors, index, anchor, "anchor")

    def removeAnchor(self, anchor):
        """
        Remove **anchor** from the glyph.
        """
        self._removeObject(self._anchors, anchor, "anchor")

    def anchorIndex(self, anchor):
        """
        Get the index for **anchor**.
        """
        return _indexOf(self._anchors, anchor, "anchor")

    def clearAnchors(self):
        """
        Clear all anchors from the glyph.
        """
        for anchor in reversed(self._anchors):
            self.removeAnchor(anchor)

    # ----------
    # Guidelines
    # ----------

    def _get_guidelineClass(self):
        return self._guidelineClass

    guidelineClass = property(_get_guidelineClass, doc="The class used for guidelines.")

    def _get_guidelines(self):
        return list(self._guidelines)

    def _set_guidelines(self, value):
        self.clearGuidelines()
        for guideline in value:
            self.appendGuideline(guideline)

    guidelines = property(_get_guidelines, _set_guidelines, doc="An ordered list of :class:`Guideline` objects stored in the glyph.")

    def instantiateGuideline(self, guidelineDict=None):
        guideline = self._guidelineClass(
            guidelineDict=guidelineDict
        )
        return guideline

    def appendGuideline(self, guideline):
        """
        Append **guideline** to the glyph. The guideline must be a
        :class:`Guideline` object or a subclass of that object.
        A dict is converted to a guideline.
        """
        self.insertGuideline(len(self._guidelines), guideline)

    def insertGuideline(self, index, guideline):
        """
        Insert **guideline** into the glyph at index. The guideline
        must be a :class:`Guideline` object or a subclass of that
        object. A dict is converted to a guideline.
        """
        if not isinstance(guideline, self._guidelineClass):
            guideline = self.instantiateGuideline(guidelineDict=guideline)
        self._insertObject(self._guidelines, index, guideline, "guideline")

    def removeGuideline(self, guideline):
        """
        Remove **guideline** from the glyph.
        """
        self._removeObject(self._guidelines, guideline, "guideline")

    def guidelineIndex(self, guideline):
        """
        Get the index for **guideline**.
        """
        return _indexOf(self._guidelines, guideline, "guideline")

    def clearGuidelines(self):
        """
        Clear all guidelines from the glyph.
        """
        for guideline in reversed(self._guidelines):
            self.removeGuideline(guideline)

    # ----
    # Note
    # ----

    def _get_note(self):
        return self._note

    def _set_note(self, value):
        if value is not None and not isinstance(value, str):
            raise TypeError("The note must be a string, not %r." % type(value))
        self._note = value

    note = property(_get_note, _set_note, doc="An arbitrary note for the glyph.")

    # ---
    # Lib
    # ---

    def instantiateLib(self):
        lib = self._libClass()
        lib.setParent(self)
        return lib

    def _get_lib(self):
        if self._lib is None:
            self._lib = self.instantiateLib()
        return self._lib

    def _set_lib(self, value):
        lib = self.lib
        lib.clear()
        lib.update(value)

    lib = property(_get_lib, _set_lib, doc="The glyph's :class:`Lib` object. Setting this will clear any existing lib data.")

    # -----
    # Image
    # -----

    def instantiateImage(self):
        image = self._imageClass()
        image.setParent(self)
        return image

    def _get_image(self):
        if self._image is None:
            self._image = self.instantiateImage()
        return self._image

    def _set_image(self, image):
        if image is None:
            self.image.clear()
        else:
            self.image.clear()
            self.image.update(image)

    image = property(_get_image, _set_image, doc="The glyph's :class:`Image` object. The image is only written when it has a *fileName*. Setting *None* empties it.")

    # -------------
    # List Behavior
    # -------------

    def __contains__(self, contour):
        return any(other is contour for other in self._contours)

    def __len__(self):
        return len(self._contours)

    def __iter__(self):
        return iter(list(self._contours))

    def __getitem__(self, index):
        return self._contours[index]

    # ----------------
    # Glyph Absorption
    # ----------------

    def copyDataFromGlyph(self, glyph):
        """
        Copy data from **glyph**. This copies the following data:

        ==========
        width
        height
        unicodes
        note
        image
        contours
        components
        anchors
        guidelines
        lib
        ==========

        The name attribute is purposefully omitted. Object libs are
        copied along with their objects.
        """
        self.width = glyph.explicitWidth
        self.height = glyph.explicitHeight
        self.unicodes = list(glyph.unicodes)
        self.note = glyph.note
        self.guidelines = [_copyWithLib(self.instantiateGuideline(g), g) for g in glyph.guidelines]
        self.anchors = [_copyWithLib(self.instantiateAnchor(a), a) for a in glyph.anchors]
        self.image = glyph.image
        self.clearContours()
        self.clearComponents()
        for contour in glyph:
            copied = self.instantiateContour()
            copied.setDataFromSerialization(contour.getDataForSerialization())
            self.appendContour(copied)
        for component in glyph.components:
            copied = self.instantiateComponent()
            copied.setDataFromSerialization(component.getDataForSerialization())
            self.appendComponent(copied)
        self.lib = deepcopy(dict(glyph.lib))

    # -----
    # Clear
    # -----

    def clear(self):
        """
        Clear all contours, components, anchors and guidelines from the glyph.
        """
        self.clearContours()
        self.clearComponents()
        self.clearAnchors()
        self.clearGuidelines()

    # ----
    # Move
    # ----

    def move(self, values):
        """
        Move all contours, components and anchors in the glyph
        by **(x, y)**.
        """
        for contour in self._contours:
            contour.move(values)
        for component in self._components:
            component.move(values)
        for anchor in self._anchors:
            anchor.move(values)

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        def get_image(k):
            if self._image is None or self._image.fileName is None:
                return None
            return self._image.getDataForSerialization()

        getters = [
            ("name", lambda k: self.name),
            ("width", lambda k: self.explicitWidth),
            ("height", lambda k: self.explicitHeight),
            ("unicodes", lambda k: self.unicodes),
            ("note", lambda k: self.note),
            ("image", get_image),
            ("contours", lambda k: [c.getDataForSerialization() for c in self._contours]),
            ("components", lambda k: [c.getDataForSerialization() for c in self._components]),
            ("anchors", lambda k: [a.getDataForSerialization() for a in self._anchors]),
            ("guidelines", lambda k: [g.getDataForSerialization() for g in self._guidelines]),
            ("lib", lambda k: self.lib.getDataForSerialization())
        ]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self.clear()
        self.name = data.get("name")
        self.width = data.get("width")
        self.height = data.get("height")
        self.unicodes = data.get("unicodes", [])
        self.note = data.get("note")
        self.image = data.get("image")
        for contourData in data.get("contours", []):
            contour = self.instantiateContour()
            contour.setDataFromSerialization(contourData)
            self.appendContour(contour)
        for componentData in data.get("components", []):
            component = self.instantiateComponent()
            component.setDataFromSerialization(componentData)
            self.appendComponent(component)
        for anchorData in data.get("anchors", []):
            anchor = self.instantiateAnchor()
            anchor.setDataFromSerialization(anchorData)
            self.appendAnchor(anchor)
        for guidelineData in data.get("guidelines", []):
            guideline = self.instantiateGuideline()
            guideline.setDataFromSerialization(guidelineData)
            self.appendGuideline(guideline)
        self.lib = data.get("lib", {})

    # -------
    # Support
    # -------

    def _insertObject(self, objects, index, obj, kind):
        if any(other is obj for other in objects):
            raise ValueError("The %s is already in the glyph." % kind)
        parent = obj.getParent()
        if parent is not None and parent is not self:
            raise ValueError("This %s belongs to another glyph." % kind)
        obj.setParent(self)
        objects.insert(index, obj)

    def _removeObject(self, objects, obj, kind):
        index = _indexOf(objects, obj, kind)
        del objects[index]
        obj.setParent(None)


def _indexOf(objects, obj, kind):
    # dict based objects compare by value, so look up by identity
    for index, other in enumerate(objects):
        if other is obj:
            return index
    raise ValueError("The %s is not in the glyph." % kind)


def _copyWithLib(copied, source):
    copied.lib = deepcopy(dict(source.lib))
    return copied


# -----
# Tests
# -----

def _testWidth():
    """
    >>> glyph = Glyph()
    >>> glyph.width
    0
    >>> print(glyph.explicitWidth)
    None
    >>> glyph.width = 250
    >>> glyph.width
    250
    >>> glyph.width = None
    >>> glyph.width
    0
    >>> glyph.height
    0
    """


def _testUnicodes():
    """
    >>> glyph = Glyph()
    >>> glyph.unicodes = [65, 66]
    >>> glyph.unicode
    65
    >>> glyph.unicode = 66
    >>> glyph.unicodes
    [66, 65]
    >>> glyph.unicode = None
    >>> glyph.unicodes
    []
    """


def _testMarkColor():
    """
    >>> glyph = Glyph()
    >>> glyph.markColor
    >>> glyph.markColor = (1, 0, 0, 1)
    >>> glyph.markColor
    '1,0,0,1'
    >>> glyph.lib["public.markColor"]
    '1,0,0,1'
    >>> glyph.markColor = None
    >>> "public.markColor" in glyph.lib
    False
    """


def _testPens():
    """
    >>> glyph = Glyph()
    >>> pen = glyph.getPen()
    >>> pen.moveTo((0, 0))
    >>> pen.lineTo((0, 100))
    >>> pen.lineTo((100, 100))
    >>> pen.lineTo((100, 0))
    >>> pen.closePath()
    >>> pen.addComponent("B", (1, 0, 0, 1, 0, 0))
    >>> len(glyph)
    1
    >>> [point.segmentType for point in glyph[0]]
    ['line', 'line', 'line', 'line']
    >>> glyph.components[0].baseGlyph
    'B'
    >>> glyph.bounds
    (0, 0, 100, 100)
    >>> glyph.area
    10000.0
    >>> glyph.width = 200
    >>> glyph.leftMargin
    0
    >>> glyph.rightMargin
    100
    >>> glyph.leftMargin = 50
    >>> glyph.bounds, glyph.width
    ((50, 0, 150, 100), 250)
    """


def _testObjectLists():
    """
    >>> glyph = Glyph()
    >>> glyph.appendAnchor(dict(x=1, y=2, name="top"))
    >>> glyph.appendAnchor(dict(x=1, y=2, name="top"))
    >>> first, second = glyph.anchors
    >>> first == second
    True
    >>> glyph.anchorIndex(second)
    1
    >>> glyph.removeAnchor(second)
    >>> glyph.anchors[0] is first
    True
    >>> first.glyph is glyph
    True
    >>> glyph.appendGuideline(dict(x=10, y=20, angle=90))
    >>> glyph.guidelines[0].glyph is glyph
    True
    >>> contour = glyph.instantiateContour()
    >>> glyph.appendContour(contour)
    >>> glyph.contourIndex(contour)
    0
    >>> Glyph().appendContour(contour)
    Traceback (most recent call last):
        ...
    ValueError: This contour belongs to another glyph.
    >>> glyph.clear()
    >>> len(glyph), glyph.anchors, glyph.guidelines
    (0, [], [])
    >>> contour.glyph
    """


def _testIdentifiers():
    """
    >>> glyph = Glyph()
    >>> pointPen = glyph.getPointPen()
    >>> pointPen.beginPath(identifier="contour 1")
    >>> pointPen.addPoint((0, 0), "line", identifier="point 1")
    >>> pointPen.endPath()
    >>> pointPen.addComponent("A", (1, 0, 0, 1, 0, 0), identifier="component 1")
    >>> glyph.appendAnchor(dict(x=0, y=0, identifier="anchor 1"))
    >>> sorted(glyph.identifiers)
    ['anchor 1', 'component 1', 'contour 1', 'point 1']
    """


def _testCopyFromGlyph():
    """
    >>> source = Glyph()
    >>> source.name = "a"
    >>> source.width = 100
    >>> source.unicodes = [97]
    >>> source.note = "note"
    >>> pen = source.getPointPen()
    >>> pen.beginPath()
    >>> pen.addPoint((0, 0), "line")
    >>> pen.addPoint((0, 100), "line")
    >>> pen.endPath()
    >>> pen.addComponent("b", (1, 0, 0, 1, 10, 0))
    >>> source.appendAnchor(dict(x=1, y=2, name="top"))
    >>> source.anchors[0].lib["com.test"] = [1]
    >>> source.lib["com.test"] = "x"
    >>> glyph = Glyph()
    >>> glyph.name = "b"
    >>> glyph.copyDataFromGlyph(source)
    >>> data = glyph.getDataForSerialization()
    >>> data["name"]
    'b'
    >>> data.pop("name") and True
    True
    >>> expected = source.getDataForSerialization()
    >>> del expected["name"]
    >>> data == expected
    True
    """


def _testMove():
    """
    >>> glyph = Glyph()
    >>> pen = glyph.getPointPen()
    >>> pen.beginPath()
    >>> pen.addPoint((0, 0), "line")
    >>> pen.endPath()
    >>> pen.addComponent("A", (1, 0, 0, 1, 0, 0))
    >>> glyph.appendAnchor(dict(x=5, y=5))
    >>> glyph.move((10, 20))
    >>> glyph[0][0].x, glyph[0][0].y
    (10, 20)
    >>> glyph.components[0].transformation
    (1, 0, 0, 1, 10, 20)
    >>> glyph.anchors[0].x, glyph.anchors[0].y
    (15, 25)
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
