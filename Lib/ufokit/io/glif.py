"""
Reading and writing of .glif files.

Glyphs are read into and written from :class:`ufokit.objects.glyph.Glyph`
objects (or objects providing the same API). GLIF format 1 and 2 are
supported. Object libs are stored in the glyph lib under
``public.objectLibs``, keyed by the identifier of the object.
"""
import logging
from fontTools.misc import etree
from ufokit.constants import OBJECT_LIBS_KEY, DEFAULT_GLIF_FORMAT_VERSION
from ufokit.errors import GlifParseError, PropertyListParseError, UFOKitError, VersionIncompatibilityError
from ufokit.io.plist import parseXML, elementToObject, totree, _children, _position
from ufokit.objects.point import PointType
from ufokit.tools.identifiers import makeRandomIdentifier

logger = logging.getLogger(__name__)

supportedGLIFFormatVersions = (1, 2)

_imageTransformationDefaults = (
    ("xScale", 1),
    ("xyScale", 0),
    ("yxScale", 0),
    ("yScale", 1),
    ("xOffset", 0),
    ("yOffset", 0)
)
_singletonElements = ("advance", "image", "outline", "lib", "note")
_formatVersion2Elements = ("anchor", "guideline", "image")


# -------
# Reading
# -------

def readGlyphFromString(data, glyphObject, fileName=None):
    """
    Read the .glif **data** (bytes or str) into **glyphObject**.
    The glyph object is expected to be empty. The GLIF format of
    the data is returned as a ``(formatVersion, formatMinor)`` tuple.

    >>> from ufokit.objects.glyph import Glyph
    >>> glyph = Glyph()
    >>> readGlyphFromString(b'''<?xml version="1.0" encoding="UTF-8"?>
    ... <glyph name="A" format="2">
    ...   <advance width="500"/>
    ...   <unicode hex="0041"/>
    ...   <outline>
    ...     <contour>
    ...       <point x="0" y="0" type="line"/>
    ...       <point x="100" y="0" type="line"/>
    ...     </contour>
    ...   </outline>
    ... </glyph>''', glyph)
    (2, 0)
    >>> glyph.name, glyph.width, glyph.unicodes
    ('A', 500, [65])
    >>> [(point.x, point.y, point.segmentType) for point in glyph[0]]
    [(0, 0, 'line'), (100, 0, 'line')]
    """
    root = parseXML(data, fileName, GlifParseError)
    if root.tag != "glyph":
        raise GlifParseError("The root element must be glyph, not %s." % root.tag, fileName, _position(root))
    name = root.get("name")
    if name is None:
        raise GlifParseError("The glyph element has no name.", fileName, _position(root))
    formatVersion = _readFormatNumber(root, "format", fileName, required=True)
    if formatVersion not in supportedGLIFFormatVersions:
        raise GlifParseError("Unsupported GLIF format version: %d." % formatVersion, fileName, _position(root))
    formatMinor = _readFormatNumber(root, "formatMinor", fileName, required=False)
    if formatVersion == 1 and root.get("formatMinor") is not None:
        raise GlifParseError("GLIF format 1 has no minor version.", fileName, _position(root))
    reader = _GlifReader(glyphObject, formatVersion, fileName)
    glyphObject.name = name
    reader.read(root)
    return formatVersion, formatMinor


class _GlifReader(object):

    def __init__(self, glyph, formatVersion, fileName):
        self.glyph = glyph
        self.formatVersion = formatVersion
        self.fileName = fileName

    def error(self, message, element):
        return GlifParseError(message, self.fileName, _position(element))

    def read(self, root):
        seen = set()
        lib = None
        for element in _children(root):
            tag = element.tag
            if tag in _singletonElements:
                if tag in seen:
                    raise self.error("The %s element occurs more than once." % tag, element)
                seen.add(tag)
            if self.formatVersion == 1 and tag in _formatVersion2Elements:
                raise self.error("The %s element is not allowed in GLIF format 1." % tag, element)
            if tag == "advance":
                self.readAdvance(element)
            elif tag == "unicode":
                self.readUnicode(element)
            elif tag == "note":
                self.glyph.note = element.text or ""
            elif tag == "image":
                self.readImage(element)
            elif tag == "guideline":
                self.glyph.appendGuideline(self.readGuideline(element))
            elif tag == "anchor":
                self.glyph.appendAnchor(self.readAnchor(element))
            elif tag == "outline":
                self.readOutline(element)
            elif tag == "lib":
                lib = self.readLib(element)
            else:
                raise self.error("Unknown element in glyph: %s." % tag, element)
        if lib is not None:
            objectLibs = lib.pop(OBJECT_LIBS_KEY, None)
            self.glyph.lib = lib
            if objectLibs is not None:
                self.distributeObjectLibs(objectLibs, element=root)

    # metrics

    def readAdvance(self, element):
        width = self.number(element, "width")
        height = self.number(element, "height")
        if width is not None:
            self.glyph.width = width
        if height is not None:
            self.glyph.height = height

    def readUnicode(self, element):
        value = element.get("hex")
        if value is None:
            raise self.error("The unicode element has no hex attribute.", element)
        try:
            value = int(value, 16)
        except ValueError:
            raise self.error("Invalid hex value in unicode element: %r." % value, element)
        unicodes = self.glyph.unicodes
        if value in unicodes:
            logger.debug("Skipping the repeated unicode %04X in glyph %r.", value, self.glyph.name)
            return
        unicodes.append(value)
        self.glyph.unicodes = unicodes

    # image, guidelines and anchors

    def readImage(self, element):
        fileName = element.get("fileName")
        if fileName is None:
            raise self.error("The image element has no fileName attribute.", element)
        imageDict = dict(fileName=fileName)
        for attr, default in _imageTransformationDefaults:
            value = self.number(element, attr)
            if value is None:
                value = default
            imageDict[attr] = value
        imageDict["color"] = element.get("color")
        self.glyph.image = imageDict

    def readGuideline(self, element):
        guideline = self.glyph.instantiateGuideline()
        guideline.x = self.number(element, "x")
        guideline.y = self.number(element, "y")
        guideline.angle = self.number(element, "angle")
        guideline.name = element.get("name")
        guideline.color = element.get("color")
        guideline.identifier = element.get("identifier")
        return guideline

    def readAnchor(self, element):
        x = self.number(element, "x")
        y = self.number(element, "y")
        if x is None or y is None:
            raise self.error("The anchor element needs x and y attributes.", element)
        anchor = self.glyph.instantiateAnchor()
        anchor.x = x
        anchor.y = y
        anchor.name = element.get("name")
        anchor.color = element.get("color")
        anchor.identifier = element.get("identifier")
        return anchor

    # outline

    def readOutline(self, element):
        for child in _children(element):
            if child.tag == "contour":
                self.readContour(child)
            elif child.tag == "component":
                self.readComponent(child)
            else:
                raise self.error("Unknown element in outline: %s." % child.tag, child)

    def readContour(self, element):
        points = _children(element)
        self.checkIdentifier(element)
        if self.formatVersion == 1 and len(points) == 1:
            point = points[0]
            if point.get("type") == "move" and point.get("name") is not None:
                anchor = self.glyph.instantiateAnchor()
                anchor.x = self.number(point, "x", required=True)
                anchor.y = self.number(point, "y", required=True)
                anchor.name = point.get("name")
                self.glyph.appendAnchor(anchor)
                return
        contour = self.glyph.instantiateContour()
        contour.identifier = element.get("identifier")
        for child in points:
            if child.tag != "point":
                raise self.error("Unknown element in contour: %s." % child.tag, child)
            contour.appendPoint(self.readPoint(child))
        self.glyph.appendContour(contour)

    def readPoint(self, element):
        x = self.number(element, "x", required=True)
        y = self.number(element, "y", required=True)
        pointType = element.get("type", "offcurve")
        try:
            pointType = PointType(pointType)
        except ValueError:
            raise self.error("Unknown point type: %r." % pointType, element)
        smooth = element.get("smooth", "no")
        if smooth not in ("yes", "no"):
            raise self.error("Invalid smooth value: %r." % smooth, element)
        self.checkIdentifier(element)
        point = self.glyph.pointClass(
            (x, y),
            segmentType=pointType.segmentType,
            smooth=smooth == "yes",
            name=element.get("name"),
            identifier=element.get("identifier")
        )
        return point

    def readComponent(self, element):
        baseGlyph = element.get("base")
        if baseGlyph is None:
            raise self.error("The component element has no base attribute.", element)
        transformation = []
        for attr, default in _imageTransformationDefaults:
            value = self.number(element, attr)
            if value is None:
                value = default
            transformation.append(value)
        self.checkIdentifier(element)
        component = self.glyph.instantiateComponent()
        component.baseGlyph = baseGlyph
        component.transformation = transformation
        component.identifier = element.get("identifier")
        self.glyph.appendComponent(component)

    # lib

    def readLib(self, element):
        children = _children(element)
        if len(children) != 1 or children[0].tag != "dict":
            raise self.error("The lib element must contain one dict.", element)
        try:
            return elementToObject(children[0], self.fileName)
        except PropertyListParseError as e:
            raise GlifParseError("The glyph lib could not be read: %s" % e, self.fileName, e.position) from e

    def distributeObjectLibs(self, objectLibs, element):
        if not isinstance(objectLibs, dict):
            raise self.error("The %s value must be a dict." % OBJECT_LIBS_KEY, element)
        objects = {}
        for identifier, obj in _identifiedObjects(self.glyph):
            objects.setdefault(identifier, obj)
        for identifier, objectLib in objectLibs.items():
            if not isinstance(objectLib, dict):
                raise self.error("The object lib for %r must be a dict." % identifier, element)
            obj = objects.get(identifier)
            if obj is None:
                logger.warning("Dropping the object lib for %r in glyph %r: no object has that identifier.", identifier, self.glyph.name)
                continue
            obj.lib = objectLib

    # support

    def number(self, element, attr, required=False):
        value = element.get(attr)
        if value is None:
            if required:
                raise self.error("The %s element has no %s attribute." % (element.tag, attr), element)
            return None
        return _number(value, self, element)

    def checkIdentifier(self, element):
        if self.formatVersion == 1 and element.get("identifier") is not None:
            raise self.error("Identifiers are not allowed in GLIF format 1.", element)


def _number(value, reader, element):
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise reader.error("Invalid number: %r." % value, element)


def _readFormatNumber(root, attr, fileName, required):
    value = root.get(attr)
    if value is None:
        if required:
            raise GlifParseError("The glyph element has no %s attribute." % attr, fileName, _position(root))
        return 0
    try:
        return int(value)
    except ValueError:
        raise GlifParseError("Invalid %s value: %r." % (attr, value), fileName, _position(root))


def _identifiedObjects(glyph):
    for contour in glyph.contours:
        if contour.identifier is not None:
            yield contour.identifier, contour
        for point in contour:
            if point.identifier is not None:
                yield point.identifier, point
    for objects in (glyph.components, glyph.anchors, glyph.guidelines):
        for obj in objects:
            if obj.identifier is not None:
                yield obj.identifier, obj


# -------
# Writing
# -------

def writeGlyphToString(glyph, formatVersion=None, generatedIdentifiers=None):
    """
    Write **glyph** as .glif data and return it as bytes.

    Data that can not be expressed in the requested format
    raises a :class:`VersionIncompatibilityError`. Anchors
    are written as single point contours in format 1.

    Objects that have a lib but no identifier are written with
    a new identifier. The glyph is not changed. If
    **generatedIdentifiers** is a list, ``(object, identifier)``
    pairs for the new identifiers are appended to it.

    >>> from ufokit.objects.glyph import Glyph
    >>> glyph = Glyph()
    >>> glyph.name = "A"
    >>> glyph.unicodes = [65]
    >>> glyph.width = 500
    >>> pen = glyph.getPointPen()
    >>> pen.beginPath()
    >>> pen.addPoint((0, 0), "line")
    >>> pen.addPoint((100, 0.25), "line", smooth=True)
    >>> pen.endPath()
    >>> for line in writeGlyphToString(glyph).decode("utf-8").splitlines():
    ...     print(line)
    <?xml version='1.0' encoding='UTF-8'?>
    <glyph name="A" format="2">
      <unicode hex="0041"/>
      <advance width="500"/>
      <outline>
        <contour>
          <point x="0" y="0" type="line"/>
          <point x="100" y="0.25" type="line" smooth="yes"/>
        </contour>
      </outline>
    </glyph>
    """
    if formatVersion is None:
        formatVersion = DEFAULT_GLIF_FORMAT_VERSION
    if formatVersion not in supportedGLIFFormatVersions:
        raise VersionIncompatibilityError("Unsupported GLIF format version: %r." % formatVersion)
    if formatVersion == 1:
        _checkFormatVersion1(glyph)
    identifiers = _IdentifiersForWriting(glyph)
    lib = _glyphLibForWriting(glyph, formatVersion, identifiers)
    root = etree.Element("glyph", dict(name=glyph.name, format=repr(formatVersion)))
    for code in glyph.unicodes:
        etree.SubElement(root, "unicode", dict(hex="%04X" % code))
    _writeAdvance(root, glyph)
    if formatVersion >= 2:
        _writeImage(root, glyph.image)
    _writeOutline(root, glyph, formatVersion, identifiers)
    if formatVersion >= 2:
        for anchor in glyph.anchors:
            etree.SubElement(root, "anchor", _anchorAttributes(anchor, identifiers))
        for guideline in glyph.guidelines:
            etree.SubElement(root, "guideline", _guidelineAttributes(guideline, identifiers))
    if lib:
        etree.SubElement(root, "lib").append(totree(lib, indentLevel=2))
    if glyph.note is not None:
        etree.SubElement(root, "note").text = glyph.note
    data = etree.tostring(root, encoding="UTF-8", xml_declaration=True, pretty_print=True)
    if generatedIdentifiers is not None:
        generatedIdentifiers.extend(identifiers.generated)
    return data


class _IdentifiersForWriting(object):

    """
    Look up identifiers while writing a glyph. Objects without
    an identifier can be given a new one here without changing
    the object.
    """

    def __init__(self, glyph):
        self.existing = set(glyph.identifiers)
        self.generated = []
        self._generated = {}

    def get(self, obj):
        identifier = obj.identifier
        if identifier is None:
            identifier = self._generated.get(id(obj))
        return identifier

    def require(self, obj):
        identifier = self.get(obj)
        if identifier is None:
            identifier = makeRandomIdentifier(existing=self.existing)
            self.existing.add(identifier)
            self._generated[id(obj)] = identifier
            self.generated.append((obj, identifier))
        return identifier


def _checkFormatVersion1(glyph):
    name = glyph.name
    if glyph.guidelines:
        raise VersionIncompatibilityError("Glyph %r has guidelines, which GLIF format 1 does not support." % name)
    if glyph.image.fileName is not None:
        raise VersionIncompatibilityError("Glyph %r has an image, which GLIF format 1 does not support." % name)
    if next(_identifiedObjects(glyph), None) is not None:
        raise VersionIncompatibilityError("Glyph %r has identifiers, which GLIF format 1 does not support." % name)
    for obj in _libObjects(glyph):
        if obj.lib:
            raise VersionIncompatibilityError("Glyph %r has object libs, which GLIF format 1 does not support." % name)
    for anchor in glyph.anchors:
        if anchor.color is not None:
            raise VersionIncompatibilityError("Glyph %r has an anchor color, which GLIF format 1 does not support." % name)


def _glyphLibForWriting(glyph, formatVersion, identifiers):
    lib = dict(glyph.lib)
    if OBJECT_LIBS_KEY in lib:
        raise UFOKitError("The %s key in the lib of glyph %r is reserved." % (OBJECT_LIBS_KEY, glyph.name))
    if formatVersion < 2:
        return lib
    objectLibs = {}
    for obj in _libObjects(glyph):
        if obj.lib:
            objectLibs[identifiers.require(obj)] = dict(obj.lib)
    if objectLibs:
        lib[OBJECT_LIBS_KEY] = objectLibs
    return lib


def _libObjects(glyph):
    for contour in glyph.contours:
        yield contour
        for point in contour:
            yield point
    for objects in (glyph.components, glyph.anchors, glyph.guidelines):
        for obj in objects:
            yield obj


def _writeAdvance(element, glyph):
    attrs = {}
    if glyph.explicitWidth is not None:
        attrs["width"] = repr(glyph.explicitWidth)
    if glyph.explicitHeight is not None:
        attrs["height"] = repr(glyph.explicitHeight)
    if attrs:
        etree.SubElement(element, "advance", attrs)


def _writeImage(element, image):
    if image.fileName is None:
        return
    attrs = dict(fileName=image.fileName)
    for attr, default in _imageTransformationDefaults:
        value = image[attr]
        if value != default:
            attrs[attr] = repr(value)
    if image.color is not None:
        attrs["color"] = str(image.color)
    etree.SubElement(element, "image", attrs)


def _writeOutline(element, glyph, formatVersion, identifiers):
    anchors = glyph.anchors if formatVersion == 1 else []
    if not glyph.contours and not glyph.components and not anchors:
        return
    outline = etree.SubElement(element, "outline")
    for contour in glyph.contours:
        _writeContour(outline, contour, identifiers)
    for component in glyph.components:
        attrs = dict(base=component.baseGlyph)
        for (attr, default), value in zip(_imageTransformationDefaults, component.transformation):
            if value != default:
                attrs[attr] = repr(value)
        identifier = identifiers.get(component)
        if identifier is not None:
            attrs["identifier"] = identifier
        etree.SubElement(outline, "component", attrs)
    for anchor in anchors:
        contour = etree.SubElement(outline, "contour")
        attrs = dict(x=repr(anchor.x), y=repr(anchor.y), type="move")
        if anchor.name is not None:
            attrs["name"] = anchor.name
        etree.SubElement(contour, "point", attrs)


def _writeContour(element, contour, identifiers):
    attrs = {}
    identifier = identifiers.get(contour)
    if identifier is not None:
        attrs["identifier"] = identifier
    contourElement = etree.SubElement(element, "contour", attrs)
    for point in contour:
        attrs = dict(x=repr(point.x), y=repr(point.y))
        if point.segmentType is not None:
            attrs["type"] = point.segmentType
        if point.smooth:
            attrs["smooth"] = "yes"
        if point.name is not None:
            attrs["name"] = point.name
        identifier = identifiers.get(point)
        if identifier is not None:
            attrs["identifier"] = identifier
        etree.SubElement(contourElement, "point", attrs)


def _anchorAttributes(anchor, identifiers):
    attrs = dict(x=repr(anchor.x), y=repr(anchor.y))
    for attr in ("name", "color"):
        value = anchor.get(attr)
        if value is not None:
            attrs[attr] = str(value)
    identifier = identifiers.get(anchor)
    if identifier is not None:
        attrs["identifier"] = identifier
    return attrs


def _guidelineAttributes(guideline, identifiers):
    attrs = {}
    for attr in ("x", "y", "angle"):
        value = guideline.get(attr)
        if value is not None:
            attrs[attr] = repr(value)
    for attr in ("name", "color"):
        value = guideline.get(attr)
        if value is not None:
            attrs[attr] = str(value)
    identifier = identifiers.get(guideline)
    if identifier is not None:
        attrs["identifier"] = identifier
    return attrs


if __name__ == "__main__":
    import doctest
    doctest.testmod()
