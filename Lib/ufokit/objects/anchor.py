from ufokit.objects.base import BaseDictObject
from ufokit.objects.color import normalizeColor
from ufokit.objects.lib import Lib
from ufokit.tools.identifiers import makeRandomIdentifier


class Anchor(BaseDictObject):

    """
    This object represents an anchor point.

    During initialization an anchor dictionary can be passed. If so,
    the new object will be populated with the data from the dictionary.
    """

    def __init__(self, anchorDict=None):
        super(Anchor, self).__init__()
        self._lib = None
        if anchorDict is not None:
            self.x = anchorDict.get("x")
            self.y = anchorDict.get("y")
            self.name = anchorDict.get("name")
            self.color = anchorDict.get("color")
            self.identifier = anchorDict.get("identifier")

    # parents

    def _get_glyph(self):
        return self.getParent()

    glyph = property(_get_glyph, doc="The :class:`Glyph` that this anchor belongs to.")

    def _get_layer(self):
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.layer

    layer = property(_get_layer, doc="The :class:`Layer` that this anchor belongs to.")

    def _get_font(self):
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.font

    font = property(_get_font, doc="The :class:`Font` that this anchor belongs to.")

    # attributes

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

    def _get_name(self):
        return self.get("name")

    def _set_name(self, value):
        self["name"] = value

    name = property(_get_name, _set_name, doc="The name.")

    def _get_color(self):
        return self.get("color")

    def _set_color(self, color):
        self["color"] = normalizeColor(color)

    color = property(_get_color, _set_color, doc="The anchors's color. When setting, the value can be a UFO color string, a sequence of (r, g, b, a) or a :class:`Color` object. Strings are stored as given.")

    # -------
    # Methods
    # -------

    def move(self, values):
        """
        Move the anchor by **(x, y)**.
        """
        x, y = values
        self.x += x
        self.y += y

    # ----------
    # Identifier
    # ----------

    def _get_identifiers(self):
        glyph = self.glyph
        if glyph is None:
            return set()
        return glyph.identifiers

    identifiers = property(_get_identifiers, doc="Set of identifiers for the glyph that this anchor belongs to. This is primarily for internal use.")

    def _get_identifier(self):
        return self.get("identifier")

    def _set_identifier(self, value):
        self["identifier"] = value

    identifier = property(_get_identifier, _set_identifier, doc="The identifier.")

    def generateIdentifier(self):
        """
        Create a new, unique identifier for and assign it to the anchor.
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

    lib = property(_get_lib, _set_lib, doc="The anchor's :class:`Lib` object. It is written to the glyph's object libs.")

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        simple_get = lambda k: getattr(self, k)
        getters = [
            ("x", simple_get),
            ("y", simple_get),
            ("name", simple_get),
            ("color", lambda k: None if self.color is None else str(self.color)),
            ("identifier", simple_get),
            ("lib", lambda k: self.lib.getDataForSerialization())
        ]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self.clear()
        for key in ("x", "y", "name", "color", "identifier"):
            setattr(self, key, data.get(key))
        self.lib = data.get("lib", {})


def _test():
    """
    >>> a = Anchor()
    >>> a.x = 100
    >>> a.x
    100
    >>> a.name = "foo"
    >>> a.name
    'foo'
    >>> a.name = None
    >>> a.name

    >>> a = Anchor()
    >>> a.color = "1,1,1,1"
    >>> a.color
    '1,1,1,1'
    >>> a.color = (1, 0, 0.5, 1)
    >>> a.color
    '1,0,0.5,1'

    >>> a = Anchor()
    >>> a.identifier
    >>> a.generateIdentifier() is None
    False

    >>> a = Anchor(dict(x=1, y=2, name="3", identifier="4", color="1,1,1,1"))
    >>> a.x, a.y, a.name, a.identifier, a.color
    (1, 2, '3', '4', '1,1,1,1')
    >>> a.move((10, 20))
    >>> a.x, a.y
    (11, 22)
    >>> Anchor(dict(x=11, y=22, name="3", identifier="4", color="1,1,1,1")).getDataForSerialization() == a.getDataForSerialization()
    True
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
