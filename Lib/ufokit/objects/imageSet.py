import hashlib
from ufokit.constants import PNG_SIGNATURE
from ufokit.objects.base import BaseObject
from ufokit.tools.filenames import glyphNameToFileName


class ImageSet(BaseObject):

    """
    This object manages all images in the font.

    This object behaves like a dict. For example, to get the
    raw image data for a particular image::

        image = images["image file name"]

    To add an image, do this::

        images["image file name"] = rawImageData

    When setting an image, the provided file name must be a plain file
    name and the data must be PNG data. A suitable file name can be made
    with :py:meth:`ImageSet.makeFileName`.

    Before setting an image, the :py:meth:`ImageSet.findDuplicateImage`
    method can be called. If a file name is returned, the new image
    data does not need to be added. The UFO spec recommends (but doesn't
    require) that duplicate images be avoided.

    To remove an image, do this::

        del images["image file name"]
    """

    def __init__(self, font=None):
        super(ImageSet, self).__init__()
        self.setParent(font)
        self._data = {}

    def _get_font(self):
        return self.getParent()

    font = property(_get_font, doc="The :class:`Font` that this object belongs to.")

    def _get_fileNames(self):
        return list(self._data.keys())

    fileNames = property(_get_fileNames, doc="A list of all image file names.")

    def _get_unreferencedFileNames(self):
        font = self.font
        if font is None:
            return []
        notReferenced = set(self._data.keys())
        for layer in font.layers:
            for glyph in layer:
                fileName = glyph.image.fileName
                if fileName is not None:
                    notReferenced.discard(fileName)
        return [fileName for fileName in self._data.keys() if fileName in notReferenced]

    unreferencedFileNames = property(_get_unreferencedFileNames, doc="A list of all file names not referenced by a glyph.")

    # -------------
    # Dict Behavior
    # -------------

    def __getitem__(self, fileName):
        return self._data[fileName]

    def __setitem__(self, fileName, data):
        if not fileName or "/" in fileName or "\\" in fileName or fileName in (".", ".."):
            raise ValueError("%r is not a legal image file name." % fileName)
        if not isinstance(data, bytes) or not data.startswith(PNG_SIGNATURE):
            raise ValueError("The data for image %r is not PNG data." % fileName)
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

    # ---------------
    # File Management
    # ---------------

    def makeFileName(self, fileName):
        """
        Make a file system legal version of **fileName**
        that is not used by another image.
        """
        suffix = ""
        if fileName.lower().endswith(".png"):
            suffix = fileName[-4:]
            fileName = fileName[:-4]
        existing = set([i.lower() for i in self._data.keys()])
        return glyphNameToFileName(fileName, existing, suffix=suffix)

    def findDuplicateImage(self, data):
        """
        Search the images to see if an image matching
        **data** already exists. If so, the file name
        for the existing image will be returned.
        """
        digest = _makeDigest(data)
        for fileName, imageData in self._data.items():
            if _makeDigest(imageData) == digest:
                return fileName
        return None

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        getters = [("images", lambda k: dict(self._data))]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self._data = {}
        for fileName, imageData in data.get("images", {}).items():
            self[fileName] = imageData


def _makeDigest(data):
    m = hashlib.md5()
    m.update(data)
    return m.digest()


def _test():
    """
    >>> images = ImageSet()
    >>> png = PNG_SIGNATURE + b"image data"
    >>> images["image.png"] = png
    >>> images.fileNames
    ['image.png']
    >>> images.findDuplicateImage(png)
    'image.png'
    >>> images.makeFileName("image.png")
    'image1.png'
    >>> images.makeFileName("Image.png")
    'I_mage.png'
    >>> images["other.png"] = b"GIF89a"
    Traceback (most recent call last):
        ...
    ValueError: The data for image 'other.png' is not PNG data.
    >>> images["sub/dir.png"] = png
    Traceback (most recent call last):
        ...
    ValueError: 'sub/dir.png' is not a legal image file name.
    >>> del images["image.png"]
    >>> len(images)
    0
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
