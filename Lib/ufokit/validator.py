"""
Structural validation of fonts and glyphs.

The validator never stops at the first problem. Every check adds
:class:`StructuralViolation` objects to one list so that all
problems in a font can be seen and fixed in one pass.
"""
import numbers
from fontTools import unicodedata
from fontTools.ufoLib import (
    fontInfoAttributesVersion1,
    fontInfoAttributesVersion2,
    fontInfoAttributesVersion3,
    validateFontInfoVersion3ValueForAttribute,
    convertFontInfoValueForAttributeFromVersion2ToVersion1
)
from ufokit.constants import (
    DEFAULT_FORMAT_VERSION, DEFAULT_LAYER_NAME, KERNING_GROUP_PREFIXES,
    OBJECT_LIBS_KEY, MARK_COLOR_KEY
)
from ufokit.objects.color import isValidColorString
from ufokit.objects.point import PointType

# violation kinds

DUPLICATE_GLYPH_NAME = "duplicateGlyphName"
DUPLICATE_LAYER_NAME = "duplicateLayerName"
MISSING_DEFAULT_LAYER = "missingDefaultLayer"
MULTIPLE_DEFAULT_LAYERS = "multipleDefaultLayers"
MISSING_COMPONENT_BASE = "missingComponentBase"
SELF_REFERENCING_COMPONENT = "selfReferencingComponent"
COMPONENT_CYCLE = "componentCycle"
UNDECLARED_KERNING_GROUP = "undeclaredKerningGroup"
MISSING_KERNING_GROUP_PREFIX = "missingKerningGroupPrefix"
INVALID_COLOR = "invalidColor"
VERSION_INCOMPATIBILITY = "versionIncompatibility"
INVALID_GLYPH_NAME = "invalidGlyphName"
INVALID_LAYER_NAME = "invalidLayerName"
GLYPH_NAME_MISMATCH = "glyphNameMismatch"
INVALID_CONTOUR = "invalidContour"
DUPLICATE_IDENTIFIER = "duplicateIdentifier"
INVALID_KERNING_GROUP_NAME = "invalidKerningGroupName"
OVERLAPPING_KERNING_GROUPS = "overlappingKerningGroups"
INVALID_GUIDELINE = "invalidGuideline"
INVALID_FONT_INFO = "invalidFontInfo"
RESERVED_LIB_KEY = "reservedLibKey"


class StructuralViolation(object):

    """
    One problem found by the validator.

    - **kind** is one of the kind constants in this module.
    - **message** describes the problem.
    - **layer** and **glyph** name the layer and glyph the problem
      was found in, when it is local to one.
    - **subject** is the offending name, identifier or key.
    """

    def __init__(self, kind, message, layer=None, glyph=None, subject=None):
        self.kind = kind
        self.message = message
        self.layer = layer
        self.glyph = glyph
        self.subject = subject

    def __repr__(self):
        return "<%s %s: %s>" % (self.__class__.__name__, self.kind, self.message)

    def __str__(self):
        location = []
        if self.layer is not None:
            location.append("layer %r" % self.layer)
        if self.glyph is not None:
            location.append("glyph %r" % self.glyph)
        if location:
            return "%s (%s): %s" % (self.kind, ", ".join(location), self.message)
        return "%s: %s" % (self.kind, self.message)

    def __eq__(self, other):
        if not isinstance(other, StructuralViolation):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        return (self.kind, self.message, self.layer, self.glyph, self.subject)


# -----
# Names
# -----

def isValidGlyphName(name):
    """
    A glyph name is a non-empty string without control characters.
    Layer names follow the same rule.

    >>> isValidGlyphName("A")
    True
    >>> isValidGlyphName("a b/c")
    True
    >>> isValidGlyphName("")
    False
    >>> isValidGlyphName("a\\tb")
    False
    >>> isValidGlyphName(None)
    False
    """
    if not isinstance(name, str) or not name:
        return False
    for character in name:
        if unicodedata.category(character) == "Cc":
            return False
    return True


# ----
# Font
# ----

def validateFont(font, formatVersion=None):
    """
    Validate **font** and return a list of :class:`StructuralViolation`
    objects. **formatVersion** is the UFO format version that the font
    will be written as. If it is None, the format version of the font
    is used, or 3 for a font that was not loaded from disk.
    """
    if formatVersion is None:
        formatVersion = font.ufoFormatVersion
    if formatVersion is None:
        formatVersion = DEFAULT_FORMAT_VERSION
    violations = []
    violations.extend(_validateLayerSet(font.layers, formatVersion))
    for layer in font.layers:
        violations.extend(validateLayer(layer, formatVersion))
    violations.extend(_validateGroups(font.groups))
    violations.extend(_validateKerning(font.kerning, font.groups))
    violations.extend(_validateInfo(font.info, formatVersion))
    if OBJECT_LIBS_KEY in font.lib:
        violations.append(StructuralViolation(
            RESERVED_LIB_KEY,
            "The font lib contains the reserved %s key." % OBJECT_LIBS_KEY,
            subject=OBJECT_LIBS_KEY
        ))
    if formatVersion < 3:
        if len(font.images):
            violations.append(_versionViolation("Images need UFO 3.", formatVersion, subject="images"))
        if len(font.data):
            violations.append(_versionViolation("The data directory needs UFO 3.", formatVersion, subject="data"))
    if formatVersion < 2 and font.features.text:
        violations.append(_versionViolation("Features need UFO 2.", formatVersion, subject="features"))
    return violations


def _versionViolation(message, formatVersion, layer=None, glyph=None, subject=None):
    message = "%s It can not be written to UFO %d." % (message, formatVersion)
    return StructuralViolation(VERSION_INCOMPATIBILITY, message, layer=layer, glyph=glyph, subject=subject)


def _validateLayerSet(layerSet, formatVersion):
    violations = []
    defaultLayer = layerSet.defaultLayer
    if defaultLayer is None:
        violations.append(StructuralViolation(MISSING_DEFAULT_LAYER, "The font has no default layer."))
    seen = set()
    reported = set()
    for layer in layerSet.layers:
        name = layer.name
        if not isValidGlyphName(name):
            violations.append(StructuralViolation(INVALID_LAYER_NAME, "%r is not a valid layer name." % (name,), layer=name, subject=name))
        if name in seen and name not in reported:
            violations.append(StructuralViolation(DUPLICATE_LAYER_NAME, "More than one layer is named %r." % (name,), layer=name, subject=name))
            reported.add(name)
        seen.add(name)
        if name == DEFAULT_LAYER_NAME and defaultLayer is not None and layer is not defaultLayer:
            violations.append(StructuralViolation(
                MULTIPLE_DEFAULT_LAYERS,
                "The layer named %s is not the default layer %r." % (DEFAULT_LAYER_NAME, defaultLayer.name),
                layer=name,
                subject=name
            ))
        if formatVersion < 3:
            if layer is not defaultLayer:
                violations.append(_versionViolation("Layer %r is not the default layer." % (name,), formatVersion, layer=name, subject=name))
            else:
                if layer.color is not None or len(layer.lib):
                    violations.append(_versionViolation("Layer info needs UFO 3.", formatVersion, layer=name, subject=name))
    return violations


# -----
# Layer
# -----

def validateLayer(layer, formatVersion=DEFAULT_FORMAT_VERSION):
    """
    Validate all glyphs in **layer** and the component
    references between them.
    """
    violations = []
    layerName = layer.name
    if layer.color is not None and not isValidColorString(layer.color):
        violations.append(StructuralViolation(INVALID_COLOR, "The layer color %r is not valid." % (layer.color,), layer=layerName, subject=layer.color))
    seen = set()
    reported = set()
    for glyph in layer.glyphs:
        name = glyph.name
        if name in seen and name not in reported:
            violations.append(StructuralViolation(DUPLICATE_GLYPH_NAME, "More than one glyph is named %r." % (name,), layer=layerName, glyph=name, subject=name))
            reported.add(name)
        seen.add(name)
        violations.extend(validateGlyph(glyph, formatVersion, layerName=layerName))
        for component in glyph.components:
            baseGlyph = component.baseGlyph
            if baseGlyph != name and baseGlyph not in layer:
                violations.append(StructuralViolation(
                    MISSING_COMPONENT_BASE,
                    "The component base glyph %r is not in the layer." % (baseGlyph,),
                    layer=layerName,
                    glyph=name,
                    subject=baseGlyph
                ))
    violations.extend(_validateComponentCycles(layer))
    return violations


def _validateComponentCycles(layer):
    """
    Find component cycles with an iterative depth first walk.
    Direct self references are reported by :func:`validateGlyph`.
    """
    graph = {}
    for name in layer.keys():
        bases = []
        for component in layer[name].components:
            baseGlyph = component.baseGlyph
            if baseGlyph != name and baseGlyph in layer and baseGlyph not in bases:
                bases.append(baseGlyph)
        graph[name] = bases
    violations = []
    reportedCycles = set()
    visited = set()
    for start in graph:
        if start in visited:
            continue
        path = [start]
        onPath = set([start])
        stack = [iter(graph[start])]
        visited.add(start)
        while stack:
            base = next(stack[-1], None)
            if base is None:
                stack.pop()
                onPath.discard(path.pop())
                continue
            if base in onPath:
                cycle = path[path.index(base):]
                key = _cycleKey(cycle)
                if key not in reportedCycles:
                    reportedCycles.add(key)
                    violations.append(StructuralViolation(
                        COMPONENT_CYCLE,
                        "The components form a cycle: %s." % " -> ".join(cycle + [base]),
                        layer=layer.name,
                        glyph=cycle[0],
                        subject=tuple(cycle)
                    ))
                continue
            if base in visited:
                continue
            visited.add(base)
            path.append(base)
            onPath.add(base)
            stack.append(iter(graph[base]))
    return violations


def _cycleKey(cycle):
    # the same cycle can be entered at any of its glyphs
    index = cycle.index(min(cycle))
    return tuple(cycle[index:] + cycle[:index])


# -----
# Glyph
# -----

def validateGlyph(glyph, formatVersion=DEFAULT_FORMAT_VERSION, layerName=None):
    """
    Validate the data inside **glyph**. References to other glyphs
    are only checked for direct self references.
    """
    if layerName is None and glyph.layer is not None:
        layerName = glyph.layer.name
    glyphName = glyph.name
    violations = []

    def report(kind, message, subject=None):
        violations.append(StructuralViolation(kind, message, layer=layerName, glyph=glyphName, subject=subject))

    if not isValidGlyphName(glyphName):
        report(INVALID_GLYPH_NAME, "%r is not a valid glyph name." % (glyphName,), glyphName)
    # outline
    for index, contour in enumerate(glyph.contours):
        problems = contourProblems(contour)
        if problems:
            report(INVALID_CONTOUR, "Contour %d: %s." % (index, "; ".join(problems)), index)
    for component in glyph.components:
        if component.baseGlyph == glyphName:
            report(SELF_REFERENCING_COMPONENT, "The glyph contains a component of itself.", glyphName)
    # identifiers
    counts = {}
    for identifier in _glyphIdentifiers(glyph):
        counts[identifier] = counts.get(identifier, 0) + 1
    for identifier, count in counts.items():
        if count > 1:
            report(DUPLICATE_IDENTIFIER, "The identifier %r is used %d times." % (identifier, count), identifier)
    # colors
    for anchor in glyph.anchors:
        if anchor.color is not None and not isValidColorString(anchor.color):
            report(INVALID_COLOR, "The color %r of anchor %r is not valid." % (anchor.color, anchor.name), anchor.color)
    for guideline in glyph.guidelines:
        violations.extend(_validateGuideline(guideline, layerName, glyphName))
    image = glyph.image
    if image.fileName is not None and image.color is not None and not isValidColorString(image.color):
        report(INVALID_COLOR, "The image color %r is not valid." % (image.color,), image.color)
    markColor = glyph.lib.get(MARK_COLOR_KEY)
    if markColor is not None and not isValidColorString(markColor):
        report(INVALID_COLOR, "The mark color %r is not valid." % (markColor,), markColor)
    # lib
    if OBJECT_LIBS_KEY in glyph.lib:
        report(RESERVED_LIB_KEY, "The glyph lib contains the reserved %s key." % OBJECT_LIBS_KEY, OBJECT_LIBS_KEY)
    # format
    if formatVersion < 3:
        for message in _glyphFormatVersionProblems(glyph):
            violations.append(_versionViolation(message, formatVersion, layer=layerName, glyph=glyphName, subject=glyphName))
    return violations


def contourProblems(contour):
    """
    Return a list describing the structural problems of **contour**.

    >>> from ufokit.objects.contour import Contour
    >>> contour = Contour()
    >>> contour.addPoint((0, 0), "move")
    >>> contour.addPoint((10, 10))
    >>> contour.addPoint((20, 0), "line")
    >>> contour.addPoint((30, 0))
    >>> contourProblems(contour)
    ['a line point can not follow off-curve points', 'an open contour can not end with an off-curve point']
    >>> contour = Contour()
    >>> contour.addPoint((0, 0))
    >>> contour.addPoint((10, 10))
    >>> contourProblems(contour)
    []
    """
    points = list(contour)
    problems = []
    if not points:
        return problems
    for index, point in enumerate(points):
        pointType = point.pointType
        if pointType is PointType.MOVE and index != 0:
            _addProblem(problems, "a move point can only be the first point")
        if point.smooth and pointType is PointType.OFFCURVE:
            _addProblem(problems, "an off-curve point can not be smooth")
    if points[0].pointType is PointType.MOVE:
        sequence = points
    else:
        onCurveIndexes = [index for index, point in enumerate(points) if point.pointType.isOnCurve]
        if not onCurveIndexes:
            # a closed quadratic contour without on-curve points
            return problems
        start = onCurveIndexes[-1] + 1
        sequence = points[start:] + points[:start]
    offCurveCount = 0
    for point in sequence:
        pointType = point.pointType
        if pointType is PointType.OFFCURVE:
            offCurveCount += 1
            continue
        if offCurveCount:
            if pointType in (PointType.LINE, PointType.MOVE):
                _addProblem(problems, "a %s point can not follow off-curve points" % pointType.value)
            elif pointType is PointType.CURVE and offCurveCount > 2:
                _addProblem(problems, "a curve point can have at most two off-curve points before it")
        offCurveCount = 0
    if offCurveCount and points[0].pointType is PointType.MOVE:
        _addProblem(problems, "an open contour can not end with an off-curve point")
    return problems


def _addProblem(problems, problem):
    if problem not in problems:
        problems.append(problem)


def _glyphIdentifiers(glyph):
    for contour in glyph.contours:
        if contour.identifier is not None:
            yield contour.identifier
        for point in contour:
            if point.identifier is not None:
                yield point.identifier
    for objects in (glyph.components, glyph.anchors, glyph.guidelines):
        for obj in objects:
            if obj.identifier is not None:
                yield obj.identifier


def _glyphFormatVersionProblems(glyph):
    problems = []
    if glyph.guidelines:
        problems.append("Glyph guidelines need UFO 3.")
    if glyph.image.fileName is not None:
        problems.append("Glyph images need UFO 3.")
    if next(_glyphIdentifiers(glyph), None) is not None:
        problems.append("Identifiers need UFO 3.")
    libObjects = list(glyph.components) + list(glyph.anchors)
    for contour in glyph.contours:
        libObjects.append(contour)
        libObjects.extend(contour)
    if any(len(obj.lib) for obj in libObjects):
        problems.append("Object libs need UFO 3.")
    if any(anchor.color is not None for anchor in glyph.anchors):
        problems.append("Anchor colors need UFO 3.")
    return problems


# ----------
# Guidelines
# ----------

def _validateGuideline(guideline, layerName=None, glyphName=None):
    violations = []

    def report(kind, message, subject=None):
        violations.append(StructuralViolation(kind, message, layer=layerName, glyph=glyphName, subject=subject))

    label = guideline.name or guideline.identifier
    x, y, angle = guideline.x, guideline.y, guideline.angle
    for attr, value in (("x", x), ("y", y), ("angle", angle)):
        if value is not None and (isinstance(value, bool) or not isinstance(value, numbers.Number)):
            report(INVALID_GUIDELINE, "The %s value of guideline %r is not a number." % (attr, label), label)
            return violations
    if x is None and y is None:
        report(INVALID_GUIDELINE, "Guideline %r has neither x nor y." % (label,), label)
    elif x is not None and y is not None and angle is None:
        report(INVALID_GUIDELINE, "Guideline %r has x and y but no angle." % (label,), label)
    elif (x is None or y is None) and angle is not None:
        report(INVALID_GUIDELINE, "Guideline %r has only one of x and y but an angle." % (label,), label)
    if angle is not None and not 0 <= angle <= 360:
        report(INVALID_GUIDELINE, "The angle of guideline %r is not between 0 and 360." % (label,), label)
    if guideline.color is not None and not isValidColorString(guideline.color):
        report(INVALID_COLOR, "The color %r of guideline %r is not valid." % (guideline.color, label), guideline.color)
    return violations


# ------------------
# Groups and Kerning
# ------------------

def _validateGroups(groups):
    violations = []
    for prefix in KERNING_GROUP_PREFIXES:
        members = {}
        for groupName, glyphNames in groups.items():
            if not groupName.startswith(prefix):
                continue
            if groupName == prefix:
                violations.append(StructuralViolation(
                    INVALID_KERNING_GROUP_NAME,
                    "The kerning group name %r has nothing after the prefix." % groupName,
                    subject=groupName
                ))
            for glyphName in glyphNames:
                members.setdefault(glyphName, []).append(groupName)
        for glyphName, groupNames in members.items():
            if len(groupNames) > 1:
                violations.append(StructuralViolation(
                    OVERLAPPING_KERNING_GROUPS,
                    "The glyph %r is in more than one %s group: %s." % (glyphName, prefix.rstrip("."), ", ".join(groupNames)),
                    subject=glyphName
                ))
    return violations


def _validateKerning(kerning, groups):
    violations = []
    reported = set()
    for pair in kerning.keys():
        for side, name in enumerate(pair):
            if name in reported:
                continue
            prefix = KERNING_GROUP_PREFIXES[side]
            otherPrefix = KERNING_GROUP_PREFIXES[1 - side]
            if name.startswith(otherPrefix):
                reported.add(name)
                violations.append(StructuralViolation(
                    MISSING_KERNING_GROUP_PREFIX,
                    "The group %r is used on side %d of the kerning." % (name, side + 1),
                    subject=name
                ))
            elif name.startswith(prefix):
                if name not in groups:
                    reported.add(name)
                    violations.append(StructuralViolation(
                        UNDECLARED_KERNING_GROUP,
                        "The kerning group %r is not defined in the groups." % name,
                        subject=name
                    ))
            elif name in groups:
                reported.add(name)
                violations.append(StructuralViolation(
                    MISSING_KERNING_GROUP_PREFIX,
                    "The group %r is used in the kerning without the %s prefix." % (name, prefix),
                    subject=name
                ))
    return violations


# ----
# Info
# ----

def _validateInfo(info, formatVersion):
    violations = []
    for attr, value in info.items():
        if attr == "guidelines":
            continue
        if attr in fontInfoAttributesVersion3 and value is not None:
            if not validateFontInfoVersion3ValueForAttribute(attr, value):
                violations.append(StructuralViolation(
                    INVALID_FONT_INFO,
                    "The value for the font info attribute %s is not valid." % attr,
                    subject=attr
                ))
        if formatVersion < 3 and attr in fontInfoAttributesVersion3 and attr not in fontInfoAttributesVersion2:
            violations.append(_versionViolation("The font info attribute %s needs UFO 3." % attr, formatVersion, subject=attr))
        elif formatVersion < 2 and attr in fontInfoAttributesVersion2:
            if convertFontInfoValueForAttributeFromVersion2ToVersion1(attr, value)[0] not in fontInfoAttributesVersion1:
                violations.append(_versionViolation("The font info attribute %s needs UFO 2." % attr, formatVersion, subject=attr))
    guidelines = info.guidelines
    if guidelines and formatVersion < 3:
        violations.append(_versionViolation("Font guidelines need UFO 3.", formatVersion, subject="guidelines"))
    counts = {}
    for guideline in guidelines:
        violations.extend(_validateGuideline(guideline))
        if guideline.identifier is not None:
            counts[guideline.identifier] = counts.get(guideline.identifier, 0) + 1
    for identifier, count in counts.items():
        if count > 1:
            violations.append(StructuralViolation(
                DUPLICATE_IDENTIFIER,
                "The font guideline identifier %r is used %d times." % (identifier, count),
                subject=identifier
            ))
    return violations


if __name__ == "__main__":
    import doctest
    doctest.testmod()
