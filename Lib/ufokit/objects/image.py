from ufokit.objects.base import BaseDictObject
from ufokit.objects.color import normalizeColor

_transformationKeys = ("xScale", "xyScale", "yxScale", "yScale", "xOffset", "yOffset")

_defaultTransformation = {
    "xScale"  : 1,
    "xyScale" : 0,
    "yxScale" : 0,
    "yScale"  : 1,
    "xOffset" : 0,
    "yOffset" : 0
}


class Image(BaseDictObject):

    """
    This object represents an image reference in a glyph.
    The reference is empty while **fileName** is *None*;
    an empty reference is not written.

    During initialization an image dictionary, following the format defined
    in the UFO spec, can be passed. If so, the new object will be populated
    with the data from the dictionary.
    """

    def __init__(self, imageDict=None):
        super(Image, self).__init__()
        self["fileName"] = None
        self["color"] = None
        if imageDict is not None:
            self.update(imageDict)
        for key, value in _defaultTransformation.items():
            if self.get(key) is None:
                self[key] = value

    def __setitem__(self, key, value):
        if key == "color":
            value = normalizeColor(value)
        super(Image, self).__setitem__(key, value)

    # --------------
    # Parent Objects
    # --------------

    def _get_glyph(self):
        return self.getParent()

    glyph = property(_get_glyph, doc="The :class:`Glyph` that this image belongs to.")

    def _get_font(self):
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.font

    font = property(_get_font, doc="The :class:`Font` that this image belongs to.")

    # ----------
    # Properties
    # ----------

    def _get_fileName(self):
        return self["fileName"]

    def _set_fileName(self, fileName):
        self["fileName"] = fileName

    fileName = property(_get_fileName, _set_fileName, doc="The file name of the image in the font's images directory.")

    def _get_transformation(self):
        return tuple(self[key] for key in _transformationKeys)

    def _set_transformation(self, transformation):
        for key, value in zip(_transformationKeys, transformation):
            self[key] = value

    transformation = property(_get_transformation, _set_transformation, doc="The transformation matrix for the image.")

    def _get_color(self):
        return self.get("color")

    def _set_color(self, color):
        self["color"] = color

    color = property(_get_color, _set_color, doc="The image's color. When setting, the value can be a UFO color string, a sequence of (r, g, b, a) or a :class:`Color` object.")

    def clear(self):
        """
        Empty the reference and reset the transformation.
        """
        super(Image, self).clear()
        self.update(dict(fileName=None, color=None))
        self.update(_defaultTransformation)

    def move(self, values):
        """
        Move the image by **(x, y)**.
        """
        x, y = values
        self["xOffset"] += x
        self["yOffset"] += y

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        data = super(Image, self).getDataForSerialization(**kwargs)
        if data.get("color") is not None:
            data["color"] = str(data["color"])
        return data


def _testAttributes():
    """
    >>> i = Image()
    >>> i.fileName = "foo"
    >>> i.fileName
    'foo'

    >>> i = Image()
    >>> i.transformation = (1, 2, 3, 4, 5, 6)
    >>> i.transformation
    (1, 2, 3, 4, 5, 6)
    >>> i.move((1, 1))
    >>> i.transformation
    (1, 2, 3, 4, 6, 7)

    >>> i = Image()
    >>> i.color = (1, 1, 1, 1)
    >>> i.color
    '1,1,1,1'

    >>> i = Image(dict(fileName="foo.png", xScale=1, xyScale=2, yxScale=3, yScale=4, xOffset=5, yOffset=6, color="0,0,0,0"))
    >>> i.fileName, i.transformation, i.color
    ('foo.png', (1, 2, 3, 4, 5, 6), '0,0,0,0')
    >>> i.clear()
    >>> i.fileName, i.transformation, i.color
    (None, (1, 0, 0, 1, 0, 0), None)
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
