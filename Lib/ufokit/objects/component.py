from fontTools.pens.pointPen import PointToSegmentPen
from ufokit.constants import DEFAULT_TRANSFORMATION
from ufokit.objects.base import BaseObject
from ufokit.objects.lib import Lib
from ufokit.tools.identifiers import makeRandomIdentifier
from ufokit.tools import representations


class Component(BaseObject):

    """
    This object represents a reference to another glyph in the same layer.
    The reference is by name only; a missing base glyph is reported by
    the validator.
    """

    def __init__(self):
        super(Component, self).__init__()
        self._baseGlyph = None
        self._transformation = tuple(DEFAULT_TRANSFORMATION)
        self._identifier = None
        self._lib = None

    # ----------
    # Attributes
    # ----------

    # parents

    def _get_glyph(self):
        return self.getParent()

    glyph = property(_get_glyph, doc="The :class:`Glyph` that this component belongs to.")

    def _get_layer(self):
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.layer

    layer = property(_get_layer, doc="The :class:`Layer` that this component belongs to.")

    def _get_font(self):
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.font

    font = property(_get_font, doc="The :class:`Font` that this component belongs to.")

    # geometry

    def _get_bounds(self):
        return representations.componentBounds(self)

    bounds = property(_get_bounds, doc="The bounds of the components's outline expressed as a tuple of form (xMin, yMin, xMax, yMax). The base glyph is looked up in the component's layer.")

    def _get_controlPointBounds(self):
        return representations.componentControlPointBounds(self)

    controlPointBounds = property(_get_controlPointBounds, doc="The control bounds of all points in the components. This only measures the point positions, it does not measure curves. So, curves without points at the extrema will not be properly measured.")

    # data

    def _set_baseGlyph(self, value):
        self._baseGlyph = value

    def _get_baseGlyph(self):
        return self._baseGlyph

    baseGlyph = property(_get_baseGlyph, _set_baseGlyph, doc="The name of the glyph that the component references.")

    def _set_transformation(self, value):
        self._transformation = tuple(value)

    def _get_transformation(self):
        return self._transformation

    transformation = property(_get_transformation, _set_transformation, doc="The transformation matrix for the component as a tuple of form (xScale, xyScale, yxScale, yScale, xOffset, yOffset).")

    # -----------
    # Pen Methods
    # -----------

    def draw(self, pen):
        """
        Draw the component with **pen**.
        """
        pointPen = PointToSegmentPen(pen)
        self.drawPoints(pointPen)

    def drawPoints(self, pointPen):
        """
        Draw the component with **pointPen**.
        """
        pointPen.addComponent(self._baseGlyph, self._transformation, identifier=self.identifier)

    # -------
    # Methods
    # -------

    def move(self, values):
        """
        Move the component by **(x, y)**.
        """
        x, y = values
        xScale, xyScale, yxScale, yScale, xOffset, yOffset = self._transformation
        xOffset += x
        yOffset += y
        self.transformation = (xScale, xyScale, yxScale, yScale, xOffset, yOffset)

    # ----------
    # Identifier
    # ----------

    def _get_identifiers(self):
        glyph = self.glyph
        if glyph is None:
            return set()
        return glyph.identifiers

    identifiers = property(_get_identifiers, doc="Set of identifiers for the glyph that this component belongs to. This is primarily for internal use.")

    def _get_identifier(self):
        return self._identifier

    def _set_identifier(self, value):
        self._identifier = value

    identifier = property(_get_identifier, _set_identifier, doc="The identifier.")

    def generateIdentifier(self):
        """
        Create a new, unique identifier for and assign it to the component.
        """
        self.identifier = makeRandomIdentifier(existing=self.identifiers)
        return self.identifier

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

    lib = property(_get_lib, _set_lib, doc="The component's :class:`Lib` object. It is written to the glyph's object libs.")

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        simple_get = lambda k: getattr(self, k)
        getters = [
            ("baseGlyph", simple_get),
            ("transformation", simple_get),
            ("identifier", simple_get),
            ("lib", lambda k: self.lib.getDataForSerialization())
        ]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self.baseGlyph = data.get("baseGlyph")
        self.transformation = data.get("transformation", DEFAULT_TRANSFORMATION)
        self.identifier = data.get("identifier")
        self.lib = data.get("lib", {})


def _test():
    """
    >>> component = Component()
    >>> component.baseGlyph = "A"
    >>> component.transformation
    (1, 0, 0, 1, 0, 0)
    >>> component.move((10, -10))
    >>> component.transformation
    (1, 0, 0, 1, 10, -10)
    >>> component.bounds
    >>> component.getDataForSerialization()["baseGlyph"]
    'A'
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
