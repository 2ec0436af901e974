import os
from ufokit.constants import DEFAULT_LAYER_NAME, GLYPH_ORDER_KEY
from ufokit.objects.base import BaseObject
from ufokit.objects.layerSet import LayerSet
from ufokit.objects.info import Info
from ufokit.objects.kerning import Kerning
from ufokit.objects.groups import Groups
from ufokit.objects.features import Features
from ufokit.objects.lib import Lib
from ufokit.objects.imageSet import ImageSet
from ufokit.objects.dataSet import DataSet


class Font(BaseObject):

    """
    If loading from an existing UFO, **path** should be the path to the UFO.
    The UFO is read completely and checked by the validator. If
    **validate** is True and structural problems are found, a
    :class:`ufokit.errors.UFOValidationError` listing all of them is
    raised. If **parallel** is True, glyph files are read by a pool of
    at most **maxWorkers** threads.

    If you subclass one of the sub objects, such as :class:`Glyph`,
    the class must be registered when the font is created for ufokit
    to know about it. The **...Class** arguments allow for individual
    overrides. If None is provided for an argument, the ufokit
    appropriate class will be used.

    The Font object has some dict like behavior. For example, to get a glyph::

        glyph = font["aGlyphName"]

    To iterate over all glyphs::

        for glyph in font:

    To get the number of glyphs::

        glyphCount = len(font)

    To find out if a font contains a particular glyph::

        exists = "aGlyphName" in font

    To remove a glyph::

        del font["aGlyphName"]

    All of these act on the default layer.
    """

    def __init__(self, path=None, validate=True, parallel=False, maxWorkers=None,
                    kerningClass=None, infoClass=None, groupsClass=None, featuresClass=None, libClass=None,
                    layerSetClass=None, layerClass=None, imageSetClass=None, dataSetClass=None,
                    guidelineClass=None,
                    glyphClass=None, glyphContourClass=None, glyphPointClass=None, glyphComponentClass=None, glyphAnchorClass=None, glyphImageClass=None):

        super(Font, self).__init__()

        if infoClass is None:
            infoClass = Info
        if kerningClass is None:
            kerningClass = Kerning
        if groupsClass is None:
            groupsClass = Groups
        if featuresClass is None:
            featuresClass = Features
        if libClass is None:
            libClass = Lib
        if layerSetClass is None:
            layerSetClass = LayerSet
        if imageSetClass is None:
            imageSetClass = ImageSet
        if dataSetClass is None:
            dataSetClass = DataSet
        self._layerSetClass = layerSetClass
        self._layerClass = layerClass
        self._glyphClass = glyphClass
        self._glyphContourClass = glyphContourClass
        self._glyphPointClass = glyphPointClass
        self._glyphComponentClass = glyphComponentClass
        self._glyphAnchorClass = glyphAnchorClass
        self._glyphImageClass = glyphImageClass
        self._kerningClass = kerningClass
        self._infoClass = infoClass
        self._groupsClass = groupsClass
        self._featuresClass = featuresClass
        self._libClass = libClass
        self._guidelineClass = guidelineClass
        self._imageSetClass = imageSetClass
        self._dataSetClass = dataSetClass

        self._path = None
        self._ufoFormatVersion = None
        self._ufoFormatVersionMinor = 0
        self._kerningGroupConversionRenameMaps = None

        self._info = self.instantiateInfo()
        self._kerning = self.instantiateKerning()
        self._groups = self.instantiateGroups()
        self._features = self.instantiateFeatures()
        self._lib = self.instantiateLib()
        self._layers = self.instantiateLayerSet()
        self._images = self.instantiateImageSet()
        self._data = self.instantiateDataSet()

        if path:
            from ufokit.io.reader import UFOReader
            path = os.fspath(path)
            reader = UFOReader(path)
            reader.readFont(self, validate=validate, parallel=parallel, maxWorkers=maxWorkers)
            self._path = path

        if self._layers.defaultLayer is None and not path:
            layer = self.newLayer(DEFAULT_LAYER_NAME)
            self._layers.defaultLayer = layer

    # ------
    # Glyphs
    # ------

    def _get_defaultLayer(self):
        return self._layers.defaultLayer

    defaultLayer = property(_get_defaultLayer, doc="The font's default :class:`Layer`. Glyph access on the font goes to this layer.")

    def _get_glyphSet(self):
        layer = self._layers.defaultLayer
        if layer is None:
            raise KeyError("The font has no default layer.")
        return layer

    _glyphSet = property(_get_glyphSet, doc="Convenience for getting the main layer.")

    def newGlyph(self, name):
        """
        Create a new glyph with **name** in the font's main layer.
        If a glyph with that name already exists, the existing
        glyph will be replaced with the new glyph.
        """
        return self._glyphSet.newGlyph(name)

    def insertGlyph(self, glyph, name=None):
        """
        Insert **glyph** into the font's main layer.
        Optionally, the glyph can be renamed at the same time by
        providing **name**. If a glyph with the glyph name, or
        the name provided as **name**, already exists, the existing
        glyph will be replaced with the new glyph.
        """
        return self._glyphSet.insertGlyph(glyph, name=name)

    def __iter__(self):
        return iter(self._glyphSet)

    def __getitem__(self, name):
        return self._glyphSet[name]

    def get(self, name, default=None):
        return self._glyphSet.get(name, default)

    def __delitem__(self, name):
        del self._glyphSet[name]

    def __len__(self):
        return len(self._glyphSet)

    def __contains__(self, name):
        return name in self._glyphSet

    def keys(self):
        """
        The names of all glyphs in the font's main layer.
        """
        return self._glyphSet.keys()

    def newLayer(self, name):
        """
        Create a new :class:`Layer` and add it to
        the bottom of the layer order.
        """
        return self._layers.newLayer(name)

    # ----------
    # Attributes
    # ----------

    def _get_path(self):
        return self._path

    def _set_path(self, path):
        if path is not None:
            path = os.fspath(path)
        self._path = path

    path = property(_get_path, _set_path, doc="The location of the file on disk. Setting the path should only be done when the user has moved the file in the OS interface. Setting the path is not the same as a save operation.")

    def _get_ufoFormatVersion(self):
        return self._ufoFormatVersion

    ufoFormatVersion = property(_get_ufoFormatVersion, doc="The UFO format version that will be used when saving. This is taken from a loaded UFO during __init__. If this font was not loaded from a UFO, this will return None until the font has been saved.")

    def _get_ufoFormatVersionMinor(self):
        return self._ufoFormatVersionMinor

    ufoFormatVersionMinor = property(_get_ufoFormatVersionMinor, doc="The minor UFO format version of the loaded UFO, 0 if there was none.")

    def _get_kerningGroupConversionRenameMaps(self):
        return self._kerningGroupConversionRenameMaps

    def _set_kerningGroupConversionRenameMaps(self, value):
        self._kerningGroupConversionRenameMaps = value

    kerningGroupConversionRenameMaps = property(_get_kerningGroupConversionRenameMaps, _set_kerningGroupConversionRenameMaps, doc="The kerning group rename maps that will be used when writing UFO 1 and UFO 2, of the form ``{\"side1\" : {\"old name\" : \"new name\"}, \"side2\" : {...}}``. This will only not be None if it has been set or this object was loaded from a UFO 1 or UFO 2 file.")

    def _get_bounds(self):
        return self._glyphSet.bounds

    bounds = property(_get_bounds, doc="The bounds of all glyphs in the font's main layer. This can be an expensive operation.")

    def _get_controlPointBounds(self):
        return self._glyphSet.controlPointBounds

    controlPointBounds = property(_get_controlPointBounds, doc="The control bounds of all glyphs in the font's main layer. This only measures the point positions, it does not measure curves. So, curves without points at the extrema will not be properly measured. This is an expensive operation.")

    # -----------
    # Sub-Objects
    # -----------

    # layers

    def instantiateLayerSet(self):
        layers = self._layerSetClass(
            font=self,
            layerClass=self._layerClass,
            libClass=self._libClass,
            guidelineClass=self._guidelineClass,
            glyphClass=self._glyphClass,
            glyphContourClass=self._glyphContourClass,
            glyphPointClass=self._glyphPointClass,
            glyphComponentClass=self._glyphComponentClass,
            glyphAnchorClass=self._glyphAnchorClass,
            glyphImageClass=self._glyphImageClass
        )
        return layers

    def _get_layers(self):
        return self._layers

    layers = property(_get_layers, doc="The font's :class:`LayerSet` object.")

    # info

    def instantiateInfo(self):
        return self._infoClass(font=self, guidelineClass=self._guidelineClass)

    def _get_info(self):
        return self._info

    info = property(_get_info, doc="The font's :class:`Info` object.")

    # kerning

    def instantiateKerning(self):
        kerning = self._kerningClass()
        kerning.setParent(self)
        return kerning

    def _get_kerning(self):
        return self._kerning

    kerning = property(_get_kerning, doc="The font's :class:`Kerning` object.")

    # groups

    def instantiateGroups(self):
        groups = self._groupsClass()
        groups.setParent(self)
        return groups

    def _get_groups(self):
        return self._groups

    groups = property(_get_groups, doc="The font's :class:`Groups` object.")

    # features

    def instantiateFeatures(self):
        return self._featuresClass(font=self)

    def _get_features(self):
        return self._features

    features = property(_get_features, doc="The font's :class:`Features` object.")

    # lib

    def instantiateLib(self):
        lib = self._libClass()
        lib.setParent(self)
        return lib

    def _get_lib(self):
        return self._lib

    lib = property(_get_lib, doc="The font's :class:`Lib` object.")

    # images

    def instantiateImageSet(self):
        return self._imageSetClass(font=self)

    def _get_images(self):
        return self._images

    images = property(_get_images, doc="The font's :class:`ImageSet` object.")

    # data

    def instantiateDataSet(self):
        return self._dataSetClass(font=self)

    def _get_data(self):
        return self._data

    data = property(_get_data, doc="The font's :class:`DataSet` object.")

    # glyph order

    def _get_glyphOrder(self):
        return list(self.lib.get(GLYPH_ORDER_KEY, []))

    def _set_glyphOrder(self, value):
        if value is None or len(value) == 0:
            if GLYPH_ORDER_KEY in self.lib:
                del self.lib[GLYPH_ORDER_KEY]
        else:
            self.lib[GLYPH_ORDER_KEY] = list(value)

    glyphOrder = property(_get_glyphOrder, _set_glyphOrder, doc="The font's glyph order, stored in the lib under ``public.glyphOrder``. When setting the value must be a list of glyph names. There is no requirement, nor guarantee, that the list will contain only names of glyphs in the font.")

    # -------
    # Methods
    # -------

    def validate(self, formatVersion=None):
        """
        Return the list of :class:`ufokit.validator.StructuralViolation`
        objects found in the font for UFO **formatVersion**. If no format
        version is given, the one from ``ufoFormatVersion`` is used,
        falling back to 3.
        """
        from ufokit.validator import validateFont
        return validateFont(self, formatVersion)

    def save(self, path=None, formatVersion=None, validate=True, parallel=False, maxWorkers=None):
        """
        Save the font to **path**. If path is None, the path
        from the last save or when the font was first opened
        will be used.

        The UFO will be saved using the format found at ``ufoFormatVersion``.
        This value is either the format version from the exising UFO or
        the format version specified in a previous save. If neither of
        these is available, the UFO will be written as format version 3.
        If you wish to specifiy the format version for saving, pass
        the desired number as the **formatVersion** argument.

        The font is validated before anything is written. If **validate**
        is True, problems raise a :class:`ufokit.errors.UFOValidationError`
        and nothing is written. The UFO is written to a temporary
        directory that replaces **path** only after every file was
        written, so a failed save leaves **path** untouched.
        """
        from ufokit.io.writer import UFOWriter
        if path is None:
            path = self._path
        if path is None:
            raise ValueError("No path was given and the font has no path.")
        path = os.fspath(path)
        if formatVersion is None:
            formatVersion = self._ufoFormatVersion
        writer = UFOWriter(path, formatVersion=formatVersion)
        writer.writeFont(self, validate=validate, parallel=parallel, maxWorkers=maxWorkers)
        self._path = path
        self._ufoFormatVersion = writer.formatVersion
        self._ufoFormatVersionMinor = 0

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        serialize = lambda item: item.getDataForSerialization()
        serialized_get = lambda key: serialize(getattr(self, key))

        getters = [
            ("info", serialized_get),
            ("groups", serialized_get),
            ("kerning", serialized_get),
            ("features", serialized_get),
            ("lib", serialized_get),
            ("layers", serialized_get),
            ("images", serialized_get),
            ("data", serialized_get)
        ]

        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        for key in ("info", "groups", "kerning", "features", "lib", "layers", "images", "data"):
            if key in data:
                getattr(self, key).setDataFromSerialization(data[key])


def _testDictBehavior():
    """
    >>> font = Font()
    >>> font.layers.layerOrder
    ['public.default']
    >>> glyph = font.newGlyph("A")
    >>> font["A"] is glyph, "A" in font, len(font)
    (True, True, 1)
    >>> font.keys()
    ['A']
    >>> font.defaultLayer["A"] is glyph
    True
    >>> del font["A"]
    >>> len(font)
    0
    """


def _testGlyphOrder():
    """
    >>> font = Font()
    >>> font.glyphOrder
    []
    >>> font.glyphOrder = ["b", "a"]
    >>> font.lib["public.glyphOrder"]
    ['b', 'a']
    >>> font.glyphOrder = []
    >>> "public.glyphOrder" in font.lib
    False
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
