from fontTools.misc.arrayTools import unionRect
from ufokit.objects.base import BaseObject
from ufokit.objects.color import normalizeColor
from ufokit.objects.glyph import Glyph
from ufokit.objects.lib import Lib


class Layer(BaseObject):

    """
    This object represents a layer in a :class:`LayerSet`.

    The Layer object has some dict like behavior. For example, to get a glyph::

        glyph = layer["aGlyphName"]

    To iterate over all glyphs::

        for glyph in layer:

    To get the number of glyphs::

        glyphCount = len(layer)

    To find out if a font contains a particular glyph::

        exists = "aGlyphName" in layer

    To remove a glyph::

        del layer["aGlyphName"]

    Glyphs are kept in the order in which they were added. Glyph
    names are expected to be unique, but renaming a glyph does not
    check this. When two glyphs share a name, lookups by name find
    the first one and the validator reports the duplicate.
    """

    def __init__(self, layerSet=None, libClass=None, guidelineClass=None, glyphClass=None,
                glyphContourClass=None, glyphPointClass=None, glyphComponentClass=None, glyphAnchorClass=None, glyphImageClass=None):
        super(Layer, self).__init__()
        self.setParent(layerSet)
        if glyphClass is None:
            glyphClass = Glyph
        if libClass is None:
            libClass = Lib
        self._glyphClass = glyphClass
        self._libClass = libClass
        self._guidelineClass = guidelineClass
        self._glyphContourClass = glyphContourClass
        self._glyphPointClass = glyphPointClass
        self._glyphComponentClass = glyphComponentClass
        self._glyphAnchorClass = glyphAnchorClass
        self._glyphImageClass = glyphImageClass

        self._name = None
        self._color = None
        self._lib = None
        self._glyphs = []
        self._nameIndex = {}

    def __repr__(self):
        return "<%s %r at 0x%x>" % (self.__class__.__name__, self._name, id(self))

    # --------------
    # Parent Objects
    # --------------

    def _get_layerSet(self):
        return self.getParent()

    layerSet = property(_get_layerSet, doc="The :class:`LayerSet` that this layer belongs to.")

    def _get_font(self):
        layerSet = self.layerSet
        if layerSet is None:
            return None
        return layerSet.font

    font = property(_get_font, doc="The :class:`Font` that this layer belongs to.")

    # --------------
    # Glyph Creation
    # --------------

    def instantiateGlyphObject(self, attach=True):
        """
        Create a glyph object of the layer's glyph class. The glyph
        is not added to the layer. If **attach** is False, the glyph
        does not reference the layer until it is adopted.
        """
        glyph = self._glyphClass(
            layer=self if attach else None,
            contourClass=self._glyphContourClass,
            pointClass=self._glyphPointClass,
            componentClass=self._glyphComponentClass,
            anchorClass=self._glyphAnchorClass,
            guidelineClass=self._guidelineClass,
            libClass=self._libClass,
            imageClass=self._glyphImageClass
        )
        return glyph

    def newGlyph(self, name):
        """
        Create a new glyph with **name** and return it. If a glyph
        with that name already exists, the existing glyph will be
        replaced with the new glyph at the same position.
        """
        glyph = self.instantiateGlyphObject()
        glyph._name = name
        existing = self._nameIndex.get(name)
        if existing is None:
            self._glyphs.append(glyph)
            self._nameIndex[name] = glyph
        else:
            self._glyphs[self._glyphIndex(existing)] = glyph
            existing.setParent(None)
            self._rebuildNameIndex()
        return glyph

    def insertGlyph(self, glyph, name=None):
        """
        Insert **glyph** into the layer. Optionally, the glyph
        can be renamed at the same time by providing **name**.
        If a glyph with the glyph name, or the name provided
        as **name**, already exists, the existing glyph will
        be replaced with the new glyph.

        The data is copied into a new glyph object, which is
        returned.
        """
        source = glyph
        if name is None:
            name = source.name
        dest = self.newGlyph(name)
        dest.copyDataFromGlyph(source)
        return dest

    def adoptGlyph(self, glyph):
        """
        Append **glyph** itself to the layer, keeping its name even
        if another glyph already uses it. This is used when loading
        and should not be needed externally.
        """
        if glyph.layer is not None and glyph.layer is not self:
            raise ValueError("This glyph belongs to another layer.")
        glyph.setParent(self)
        self._glyphs.append(glyph)
        if glyph.name not in self._nameIndex:
            self._nameIndex[glyph.name] = glyph

    def removeGlyph(self, glyph):
        """
        Remove the glyph object **glyph** from the layer.
        """
        del self._glyphs[self._glyphIndex(glyph)]
        glyph.setParent(None)
        self._rebuildNameIndex()

    # -------------
    # Dict Behavior
    # -------------

    def __iter__(self):
        return iter(list(self._glyphs))

    def __getitem__(self, name):
        glyph = self._nameIndex.get(name)
        if glyph is None:
            raise KeyError("%s not in layer" % name)
        return glyph

    def get(self, name, default=None):
        return self._nameIndex.get(name, default)

    def __delitem__(self, name):
        self.removeGlyph(self[name])

    def __len__(self):
        return len(self._glyphs)

    def __contains__(self, name):
        return name in self._nameIndex

    def keys(self):
        """
        The names of all glyphs in the layer, in layer order.
        """
        return list(self._nameIndex.keys())

    def _get_glyphs(self):
        return list(self._glyphs)

    glyphs = property(_get_glyphs, doc="All glyph objects in the layer, in layer order, including any that share a name.")

    # ----------
    # Attributes
    # ----------

    # name

    def _set_name(self, value):
        self._name = value

    def _get_name(self):
        return self._name

    name = property(_get_name, _set_name, doc="The name of the layer. Renaming does not check for collisions; duplicate names are reported by the validator.")

    # color

    def _get_color(self):
        return self._color

    def _set_color(self, color):
        self._color = normalizeColor(color)

    color = property(_get_color, _set_color, doc="The layer's color. When setting, the value can be a UFO color string, a sequence of (r, g, b, a) or a :class:`Color` object.")

    # bounds

    def _get_bounds(self):
        return self._unionGlyphRects("bounds")

    bounds = property(_get_bounds, doc="The bounds of all glyphs in the layer. This can be an expensive operation.")

    def _get_controlPointBounds(self):
        return self._unionGlyphRects("controlPointBounds")

    controlPointBounds = property(_get_controlPointBounds, doc="The control bounds of all glyphs in the layer. This only measures the point positions, it does not measure curves. So, curves without points at the extrema will not be properly measured. This can be an expensive operation.")

    def _unionGlyphRects(self, attr):
        fontRect = None
        for glyph in self._glyphs:
            glyphRect = getattr(glyph, attr)
            if glyphRect is None:
                continue
            if fontRect is None:
                fontRect = glyphRect
            else:
                fontRect = unionRect(fontRect, glyphRect)
        return fontRect

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

    lib = property(_get_lib, _set_lib, doc="The layer's :class:`Lib` object.")

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        getters = [
            ("name", lambda k: self.name),
            ("color", lambda k: None if self.color is None else str(self.color)),
            ("lib", lambda k: self.lib.getDataForSerialization()),
            ("glyphs", lambda k: [glyph.getDataForSerialization() for glyph in self._glyphs])
        ]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        for glyph in list(self._glyphs):
            self.removeGlyph(glyph)
        self.name = data.get("name")
        self.color = data.get("color")
        self.lib = data.get("lib", {})
        for glyphData in data.get("glyphs", []):
            glyph = self.instantiateGlyphObject(attach=False)
            glyph.setDataFromSerialization(glyphData)
            self.adoptGlyph(glyph)

    # -------
    # Support
    # -------

    def _glyphIndex(self, glyph):
        for index, other in enumerate(self._glyphs):
            if other is glyph:
                return index
        raise ValueError("The glyph is not in the layer.")

    def _rebuildNameIndex(self):
        nameIndex = {}
        for glyph in self._glyphs:
            if glyph.name not in nameIndex:
                nameIndex[glyph.name] = glyph
        self._nameIndex = nameIndex

    def _glyphNameChanged(self, glyph, oldName, newName):
        if self._nameIndex.get(oldName) is glyph or newName not in self._nameIndex:
            self._rebuildNameIndex()


def _testNewGlyph():
    """
    >>> layer = Layer()
    >>> glyph = layer.newGlyph("A")
    >>> glyph.name
    'A'
    >>> glyph.layer is layer
    True
    >>> b = layer.newGlyph("B")
    >>> replacement = layer.newGlyph("A")
    >>> layer.keys()
    ['A', 'B']
    >>> layer["A"] is replacement
    True
    >>> len(layer)
    2
    >>> layer.get("C") is None
    True
    """


def _testRename():
    """
    >>> layer = Layer()
    >>> a = layer.newGlyph("a")
    >>> b = layer.newGlyph("b")
    >>> a.name = "c"
    >>> layer.keys()
    ['c', 'b']
    >>> "a" in layer
    False
    >>> b.name = "c"
    >>> layer.keys()
    ['c']
    >>> len(layer), layer["c"] is a
    (2, True)
    >>> del layer["c"]
    >>> layer["c"] is b
    True
    """


def _testInsertGlyph():
    """
    >>> layer = Layer()
    >>> source = Glyph()
    >>> source.name = "a"
    >>> source.width = 300
    >>> glyph = layer.insertGlyph(source, name="b")
    >>> glyph is source
    False
    >>> glyph.name, glyph.width
    ('b', 300)
    >>> layer.keys()
    ['b']
    """


def _testBounds():
    """
    >>> layer = Layer()
    >>> pen = layer.newGlyph("a").getPen()
    >>> pen.moveTo((0, 0))
    >>> pen.lineTo((0, 100))
    >>> pen.lineTo((100, 100))
    >>> pen.closePath()
    >>> pen = layer.newGlyph("b").getPen()
    >>> pen.moveTo((50, -10))
    >>> pen.lineTo((200, 50))
    >>> pen.lineTo((50, 50))
    >>> pen.closePath()
    >>> layer.bounds
    (0, -10, 200, 100)
    >>> layer.newGlyph("c").components
    []
    >>> layer.controlPointBounds
    (0, -10, 200, 100)
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
