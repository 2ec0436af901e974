from ufokit.objects.base import BaseDictObject
from ufokit.objects.color import normalizeColor
from ufokit.objects.lib import Lib
from ufokit.tools.identifiers import makeRandomIdentifier


class Guideline(BaseDictObject):

    """
    This object represents a guideline. It belongs either to a glyph
    or, as a global guideline, to the font's :class:`Info`.

    During initialization a guideline dictionary, following the format
    defined in the UFO spec, can be passed. If so, the new object will
    be populated with the data from the dictionary.
    """

    def __init__(self, guidelineDict=None):
        super(Guideline, self).__init__()
        self._lib = None
        if guidelineDict is not None:
            self.x = guidelineDict.get("x")
            self.y = guidelineDict.get("y")
            self.angle = guidelineDict.get("angle")
            self.name = guidelineDict.get("name")
            self.color = guidelineDict.get("color")
            self.identifier = guidelineDict.get("identifier")

    # --------------
    # Parent Objects
    # --------------

    def _get_font(self):
        parent = self.getParent()
        if parent is None:
            return None
        return parent.font

    font = property(_get_font, doc="The :class:`Font` that this guideline belongs to.")

    def _get_glyph(self):
        from ufokit.objects.glyph import Glyph
        parent = self.getParent()
        if isinstance(parent, Glyph):
            return parent
        return None

    glyph = property(_get_glyph, doc="The :class:`Glyph` that this guideline belongs to. This will be *None* for a global guideline.")

    def _get_layer(self):
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.layer

    layer = property(_get_layer, doc="The :class:`Layer` that this guideline belongs to.")

    # ----------
    # Attributes
    # ----------

    def _get_x(self):
        return self.get("x")

    def _set_x(self, value):
        self["x"] = value

    x = property(_get_x, _set_x, doc="The x coordinate.")

    def _get_y(self):
        return self.get("y")

    def _set_y(self, value):
        self["y"] = value

    y = property(_get_y, _set_y, doc="The y coordinate.")

    def _get_angle(self):
        return self.get("angle")

    def _set_angle(self, value):
        self["angle"] = value

    angle = property(_get_angle, _set_angle, doc="The angle.")

    def _get_name(self):
        return self.get("name")

    def _set_name(self, value):
        self["name"] = value

    name = property(_get_name, _set_name, doc="The name.")

    def _get_color(self):
        return self.get("color")

    def _set_color(self, color):
        self["color"] = normalizeColor(color)

    color = property(_get_color, _set_color, doc="The guideline's color. When setting, the value can be a UFO color string, a sequence of (r, g, b, a) or a :class:`Color` object. Strings are stored as given.")

    # -------
    # Methods
    # -------

    def move(self, values):
        """
        Move the guideline by **(x, y)**. Coordinates that are
        not set are left alone.
        """
        x, y = values
        if self.x is not None:
            self.x += x
        if self.y is not None:
            self.y += y

    # ----------
    # Identifier
    # ----------

    def _get_identifiers(self):
        parent = self.getParent()
        if parent is None:
            return set()
        return parent.identifiers

    identifiers = property(_get_identifiers, doc="Set of identifiers for the object that this guideline belongs to. This is primarily for internal use.")

    def _get_identifier(self):
        return self.get("identifier")

    def _set_identifier(self, value):
        self["identifier"] = value

    identifier = property(_get_identifier, _set_identifier, doc="The identifier.")

    def generateIdentifier(self):
        """
        Create a new, unique identifier for and assign it to the guideline.
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

    lib = property(_get_lib, _set_lib, doc="The guideline's :class:`Lib` object. It is written to the object libs of the glyph or the font.")

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        simple_get = lambda k: getattr(self, k)
        getters = [
            ("x", simple_get),
            ("y", simple_get),
            ("angle", simple_get),
            ("name", simple_get),
            ("color", lambda k: None if self.color is None else str(self.color)),
            ("identifier", simple_get),
            ("lib", lambda k: self.lib.getDataForSerialization())
        ]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self.clear()
        for key in ("x", "y", "angle", "name", "color", "identifier"):
            setattr(self, key, data.get(key))
        self.lib = data.get("lib", {})


def _test():
    """
    >>> g = Guideline()
    >>> g.x = 100
    >>> g.x
    100
    >>> g.angle = 45
    >>> g.angle
    45
    >>> g.color = "1,1,1,1"
    >>> g.color
    '1,1,1,1'
    >>> g.move((10, 10))
    >>> g.x, g.y
    (110, None)

    >>> g = Guideline(dict(x=1, y=2, angle=3, name="4", identifier="5", color="1,1,1,1"))
    >>> g.x, g.y, g.angle, g.name, g.identifier, g.color
    (1, 2, 3, '4', '5', '1,1,1,1')
    >>> g.font
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
