"""
Reading of UFO directories into :class:`ufokit.objects.font.Font` objects.
"""
import os
from fontTools.misc.loggingTools import LogMixin, Timer
from fontTools.ufoLib import convertFontInfoValueForAttributeFromVersion1ToVersion2
from fontTools.ufoLib.converters import convertUFO1OrUFO2KerningToUFO3Kerning
from fontTools.ufoLib.errors import UFOLibError
from ufokit.constants import (
    METAINFO_FILENAME, FONTINFO_FILENAME, GROUPS_FILENAME, KERNING_FILENAME,
    FEATURES_FILENAME, LIB_FILENAME, LAYERCONTENTS_FILENAME, LAYERINFO_FILENAME,
    CONTENTS_FILENAME, IMAGES_DIRNAME, DATA_DIRNAME,
    DEFAULT_LAYER_NAME, DEFAULT_GLYPHS_DIRNAME, OBJECT_LIBS_KEY,
    SUPPORTED_FORMAT_VERSIONS
)
from ufokit.errors import (
    UFOIOError, UFOParseError, PropertyListParseError, UFOValidationError,
    VersionIncompatibilityError
)
from ufokit.io import plist
from ufokit.io.glif import readGlyphFromString
from ufokit.tools.workers import forEach
from ufokit import validator


class UFOReader(LogMixin):

    """
    Read the UFO at **path** into a font object.

    Glyph files are the unit of parallel work: when **parallel**
    is True they are read and decoded by a thread pool into detached
    glyph objects, which are then added to their layer in
    ``contents.plist`` order. Problems that can only be seen while
    reading (a glyph file naming a different glyph, two layers using
    the default layer directory ...) are collected in
    :attr:`violations` and reported together with the validator's
    findings.
    """

    def __init__(self, path):
        self.path = os.fspath(path)
        self.formatVersion = None
        self.formatVersionMinor = 0
        self.violations = []

    # -------
    # Reading
    # -------

    def readFont(self, font, validate=True, parallel=False, maxWorkers=None):
        """
        Populate the empty **font**. If **validate** is True and
        any structural problem is found, a :class:`UFOValidationError`
        listing all of them is raised.
        """
        if not os.path.isdir(self.path):
            raise UFOIOError("%s is not a directory." % self.path, self.path)
        with Timer() as t:
            self.readMetaInfo()
            font._ufoFormatVersion = self.formatVersion
            font._ufoFormatVersionMinor = self.formatVersionMinor
            fontLib = self.readLib()
            objectLibs = fontLib.pop(OBJECT_LIBS_KEY, None)
            self.readInfo(font.info)
            if objectLibs is not None:
                self._distributeGuidelineLibs(font.info, objectLibs)
            groups = self.readGroups()
            kerning = self.readKerning()
            font.features.text = self.readFeatures()
            font.lib.update(fontLib)
            self.readLayers(font.layers, parallel=parallel, maxWorkers=maxWorkers)
            if self.formatVersion < 3:
                glyphSet = font.layers.defaultLayer.keys()
                kerning, groups, renameMaps = convertUFO1OrUFO2KerningToUFO3Kerning(kerning, groups, glyphSet)
                if renameMaps["side1"] or renameMaps["side2"]:
                    self.log.warning("Kerning groups in %s were renamed to UFO 3 kerning group names.", self.path)
                font.kerningGroupConversionRenameMaps = renameMaps
            font.groups.update(groups)
            font.kerning.updateFromNested(kerning)
            if self.formatVersion >= 3:
                self.readImages(font.images)
                self.readData(font.data)
        glyphCount = sum(len(layer) for layer in font.layers)
        self.log.debug("Took %.3fs to read %s", t, self.path)
        violations = self.violations + validator.validateFont(font, self.formatVersion)
        if violations:
            if validate:
                raise UFOValidationError(violations, self.path)
            self.log.warning("%d structural violation(s) found in %s.", len(violations), self.path)
        self.log.info("Read %s (UFO %d, %d glyphs).", self.path, self.formatVersion, glyphCount)
        return font

    def readMetaInfo(self):
        data = self._readPlist(METAINFO_FILENAME, required=True)
        formatVersion = data.get("formatVersion")
        if not isinstance(formatVersion, int) or isinstance(formatVersion, bool):
            raise PropertyListParseError("The formatVersion in %s is not an integer." % METAINFO_FILENAME, self._path(METAINFO_FILENAME))
        if formatVersion not in SUPPORTED_FORMAT_VERSIONS:
            raise VersionIncompatibilityError("Unsupported UFO format version %d in %s." % (formatVersion, self.path))
        formatVersionMinor = data.get("formatVersionMinor", 0)
        if not isinstance(formatVersionMinor, int) or isinstance(formatVersionMinor, bool):
            raise PropertyListParseError("The formatVersionMinor in %s is not an integer." % METAINFO_FILENAME, self._path(METAINFO_FILENAME))
        self.formatVersion = formatVersion
        self.formatVersionMinor = formatVersionMinor

    def readInfo(self, info):
        data = self._readPlist(FONTINFO_FILENAME)
        for attr, value in data.items():
            if self.formatVersion == 1:
                try:
                    attr, value = convertFontInfoValueForAttributeFromVersion1ToVersion2(attr, value)
                except UFOLibError as e:
                    raise UFOParseError("The %s value in %s could not be converted: %s" % (attr, FONTINFO_FILENAME, e), self._path(FONTINFO_FILENAME)) from e
            if attr == "guidelines":
                if self.formatVersion < 3:
                    self.violations.append(validator.StructuralViolation(
                        validator.VERSION_INCOMPATIBILITY,
                        "Font guidelines are not allowed in UFO %d." % self.formatVersion,
                        subject="guidelines"
                    ))
                if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
                    raise PropertyListParseError("The guidelines in %s must be a list of dicts." % FONTINFO_FILENAME, self._path(FONTINFO_FILENAME))
                if not all(isinstance(item.get("color", ""), str) for item in value):
                    raise PropertyListParseError("The guideline colors in %s must be strings." % FONTINFO_FILENAME, self._path(FONTINFO_FILENAME))
            info[attr] = value

    def readGroups(self):
        groups = self._readPlist(GROUPS_FILENAME)
        for groupName, glyphNames in groups.items():
            if not isinstance(glyphNames, list) or not all(isinstance(name, str) for name in glyphNames):
                raise PropertyListParseError("The group %r in %s is not a list of glyph names." % (groupName, GROUPS_FILENAME), self._path(GROUPS_FILENAME))
        return groups

    def readKerning(self):
        kerning = self._readPlist(KERNING_FILENAME)
        for first, seconds in kerning.items():
            if not isinstance(seconds, dict):
                raise PropertyListParseError("The kerning for %r in %s is not a dict." % (first, KERNING_FILENAME), self._path(KERNING_FILENAME))
            for second, value in seconds.items():
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise PropertyListParseError("The kerning value for (%r, %r) is not a number." % (first, second), self._path(KERNING_FILENAME))
        return kerning

    def readFeatures(self):
        if self.formatVersion < 2:
            return None
        data = self._readBytes(FEATURES_FILENAME)
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UFOParseError("%s is not UTF-8 text." % FEATURES_FILENAME, self._path(FEATURES_FILENAME)) from e

    def readLib(self):
        return self._readPlist(LIB_FILENAME)

    # ------
    # Layers
    # ------

    def readLayerContents(self):
        """
        Return a list of ``(layerName, directoryName)`` tuples.
        """
        if self.formatVersion < 3:
            return [(DEFAULT_LAYER_NAME, DEFAULT_GLYPHS_DIRNAME)]
        contents = self._readPlist(LAYERCONTENTS_FILENAME, required=True, expectedType=list)
        layerContents = []
        for item in contents:
            if not isinstance(item, list) or len(item) != 2 or not all(isinstance(value, str) for value in item):
                raise PropertyListParseError("%s must contain [layer name, directory name] pairs." % LAYERCONTENTS_FILENAME, self._path(LAYERCONTENTS_FILENAME))
            layerName, directoryName = item
            if not _isSafeFileName(directoryName):
                raise PropertyListParseError("%r is not a valid layer directory name." % directoryName, self._path(LAYERCONTENTS_FILENAME))
            layerContents.append((layerName, directoryName))
        return layerContents

    def readLayers(self, layerSet, parallel=False, maxWorkers=None):
        defaultLayer = None
        for layerName, directoryName in self.readLayerContents():
            layer = layerSet.instantiateLayer()
            layer.name = layerName
            with Timer() as t:
                self.readLayer(layer, directoryName, parallel=parallel, maxWorkers=maxWorkers)
            self.log.debug("Took %.3fs to read layer %r (%d glyphs)", t, layerName, len(layer))
            layerSet.adoptLayer(layer)
            if directoryName == DEFAULT_GLYPHS_DIRNAME:
                if defaultLayer is None:
                    defaultLayer = layer
                    layerSet.defaultLayer = layer
                else:
                    self.violations.append(validator.StructuralViolation(
                        validator.MULTIPLE_DEFAULT_LAYERS,
                        "The layers %r and %r both use the %s directory." % (defaultLayer.name, layerName, DEFAULT_GLYPHS_DIRNAME),
                        layer=layerName,
                        subject=layerName
                    ))

    def readLayer(self, layer, directoryName, parallel=False, maxWorkers=None):
        if self.formatVersion >= 3:
            layerInfo = self._readPlist(os.path.join(directoryName, LAYERINFO_FILENAME))
            if "color" in layerInfo:
                if not isinstance(layerInfo["color"], str):
                    raise PropertyListParseError("The color in %s must be a string." % LAYERINFO_FILENAME, self._path(directoryName, LAYERINFO_FILENAME))
                layer.color = layerInfo["color"]
            if "lib" in layerInfo:
                if not isinstance(layerInfo["lib"], dict):
                    raise PropertyListParseError("The lib in %s must be a dict." % LAYERINFO_FILENAME, self._path(directoryName, LAYERINFO_FILENAME))
                layer.lib = layerInfo["lib"]
        contentsPath = os.path.join(directoryName, CONTENTS_FILENAME)
        contents = self._readPlist(contentsPath, required=True)
        for glyphName, fileName in contents.items():
            if not isinstance(fileName, str) or not _isSafeFileName(fileName):
                raise PropertyListParseError("%r is not a valid glyph file name." % (fileName,), self._path(contentsPath))

        def readGlyph(item):
            glyphName, fileName = item
            path = os.path.join(directoryName, fileName)
            data = self._readBytes(path, required=True)
            glyph = layer.instantiateGlyphObject(attach=False)
            formatVersion = readGlyphFromString(data, glyph, fileName=self._path(path))
            return glyph, formatVersion

        results = forEach(contents.items(), readGlyph, parallel=parallel, maxWorkers=maxWorkers)
        for (glyphName, fileName), (glyph, glifFormatVersion) in zip(contents.items(), results):
            if glyph.name != glyphName:
                self.violations.append(validator.StructuralViolation(
                    validator.GLYPH_NAME_MISMATCH,
                    "The file %s names the glyph %r instead of %r." % (fileName, glyph.name, glyphName),
                    layer=layer.name,
                    glyph=glyphName,
                    subject=fileName
                ))
                glyph.name = glyphName
            if self.formatVersion < 3 and glifFormatVersion[0] > 1:
                self.violations.append(validator.StructuralViolation(
                    validator.VERSION_INCOMPATIBILITY,
                    "The file %s uses GLIF format %d, which is not allowed in UFO %d." % (fileName, glifFormatVersion[0], self.formatVersion),
                    layer=layer.name,
                    glyph=glyphName,
                    subject=fileName
                ))
            layer.adoptGlyph(glyph)

    # ---------------
    # Images and Data
    # ---------------

    def readImages(self, images):
        directory = self._path(IMAGES_DIRNAME)
        if not os.path.isdir(directory):
            return
        for fileName in sorted(_listDirectory(directory)):
            path = os.path.join(IMAGES_DIRNAME, fileName)
            if not os.path.isfile(self._path(path)):
                continue
            data = self._readBytes(path, required=True)
            try:
                images[fileName] = data
            except ValueError as e:
                raise UFOParseError(str(e), self._path(path)) from e

    def readData(self, dataSet):
        directory = self._path(DATA_DIRNAME)
        if not os.path.isdir(directory):
            return
        fileNames = []
        for root, dirs, files in os.walk(directory):
            for fileName in files:
                relative = os.path.relpath(os.path.join(root, fileName), directory)
                fileNames.append(relative.replace(os.sep, "/"))
        for fileName in sorted(fileNames):
            dataSet[fileName] = self._readBytes(os.path.join(DATA_DIRNAME, *fileName.split("/")), required=True)

    # -------
    # Support
    # -------

    def _path(self, *parts):
        return os.path.join(self.path, *parts)

    def _readBytes(self, fileName, required=False):
        path = self._path(fileName)
        if not os.path.exists(path):
            if required:
                raise UFOIOError("The required file %s is missing." % fileName, path)
            return None
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise UFOIOError("%s could not be read: %s" % (fileName, e), path) from e

    def _readPlist(self, fileName, required=False, expectedType=dict):
        data = self._readBytes(fileName, required=required)
        if data is None:
            return expectedType()
        path = self._path(fileName)
        value = plist.loads(data, fileName=path)
        if not isinstance(value, expectedType):
            raise PropertyListParseError("%s must contain a %s." % (fileName, expectedType.__name__), path)
        return value

    def _distributeGuidelineLibs(self, info, objectLibs):
        if not isinstance(objectLibs, dict) or not all(isinstance(value, dict) for value in objectLibs.values()):
            raise PropertyListParseError("The %s value in %s must be a dict of dicts." % (OBJECT_LIBS_KEY, LIB_FILENAME), self._path(LIB_FILENAME))
        guidelines = {}
        for guideline in info.guidelines:
            if guideline.identifier is not None:
                guidelines.setdefault(guideline.identifier, guideline)
        for identifier, objectLib in objectLibs.items():
            guideline = guidelines.get(identifier)
            if guideline is None:
                self.log.warning("Dropping the object lib for %r in %s: no guideline has that identifier.", identifier, LIB_FILENAME)
                continue
            guideline.lib = objectLib


def _isSafeFileName(fileName):
    if not fileName or fileName in (".", ".."):
        return False
    return "/" not in fileName and "\\" not in fileName


def _listDirectory(path):
    try:
        return os.listdir(path)
    except OSError as e:
        raise UFOIOError("%s could not be listed: %s" % (path, e), path) from e
