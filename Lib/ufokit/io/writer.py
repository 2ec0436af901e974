"""
Writing of :class:`ufokit.objects.font.Font` objects to UFO directories.
"""
import os
import shutil
import tempfile
from fontTools.misc.loggingTools import LogMixin, Timer
from fontTools.ufoLib import (
    fontInfoAttributesVersion1,
    fontInfoAttributesVersion2,
    fontInfoAttributesVersion3,
    convertFontInfoValueForAttributeFromVersion2ToVersion1
)
from ufokit.constants import (
    METAINFO_FILENAME, FONTINFO_FILENAME, GROUPS_FILENAME, KERNING_FILENAME,
    FEATURES_FILENAME, LIB_FILENAME, LAYERCONTENTS_FILENAME, LAYERINFO_FILENAME,
    CONTENTS_FILENAME, IMAGES_DIRNAME, DATA_DIRNAME,
    DEFAULT_GLYPHS_DIRNAME, OBJECT_LIBS_KEY, DEFAULT_CREATOR,
    DEFAULT_FORMAT_VERSION, SUPPORTED_FORMAT_VERSIONS
)
from ufokit.errors import UFOIOError, UFOKitError, UFOValidationError, VersionIncompatibilityError
from ufokit.io import plist
from ufokit.io.glif import writeGlyphToString
from ufokit.tools.filenames import glyphNameToFileName, layerNameToDirectoryName
from ufokit.tools.identifiers import makeRandomIdentifier
from ufokit.tools.workers import forEach
from ufokit.validator import validateFont


class UFOWriter(LogMixin):

    """
    Write a font to the UFO at **path** as UFO **formatVersion**.

    Everything is written into a new directory next to **path**.
    Only when all files were written is the new directory moved
    to **path**, replacing what was there. If anything fails the
    new directory is removed and **path** is left as it was.
    """

    def __init__(self, path, formatVersion=None, creator=DEFAULT_CREATOR):
        if formatVersion is None:
            formatVersion = DEFAULT_FORMAT_VERSION
        if formatVersion not in SUPPORTED_FORMAT_VERSIONS:
            raise VersionIncompatibilityError("Unsupported UFO format version: %r." % (formatVersion,))
        self.path = os.path.abspath(os.fspath(path))
        self.formatVersion = formatVersion
        self.creator = creator

    def _get_glifFormatVersion(self):
        if self.formatVersion >= 3:
            return 2
        return 1

    glifFormatVersion = property(_get_glifFormatVersion, doc="The GLIF format version used for glyph files.")

    # -------
    # Writing
    # -------

    def writeFont(self, font, validate=True, parallel=False, maxWorkers=None):
        """
        Write **font**. The font is validated first. If **validate**
        is True and any structural problem is found, a
        :class:`UFOValidationError` listing all of them is raised
        before anything is written.
        """
        violations = validateFont(font, self.formatVersion)
        if violations:
            if validate:
                raise UFOValidationError(violations, self.path)
            self.log.warning("Writing %s with %d structural violation(s).", self.path, len(violations))
        parent = os.path.dirname(self.path)
        if not os.path.isdir(parent):
            raise UFOIOError("The directory %s does not exist." % parent, parent)
        try:
            tempPath = tempfile.mkdtemp(prefix="." + os.path.basename(self.path) + "-", suffix=".tmp", dir=parent)
        except OSError as e:
            raise UFOIOError("A temporary directory could not be created in %s: %s" % (parent, e), parent) from e
        generatedIdentifiers = []
        try:
            with Timer() as t:
                self._writeAll(font, tempPath, generatedIdentifiers, parallel=parallel, maxWorkers=maxWorkers)
                self._commit(tempPath)
        except BaseException:
            shutil.rmtree(tempPath, ignore_errors=True)
            raise
        for obj, identifier in generatedIdentifiers:
            obj.identifier = identifier
        glyphCount = sum(len(layer) for layer in self._layersToWrite(font))
        self.log.debug("Took %.3fs to write %s", t, self.path)
        self.log.info("Wrote %s (UFO %d, %d glyphs).", self.path, self.formatVersion, glyphCount)

    def _writeAll(self, font, root, generatedIdentifiers, parallel=False, maxWorkers=None):
        metaInfo = dict(creator=self.creator, formatVersion=self.formatVersion)
        self._writePlist(root, METAINFO_FILENAME, metaInfo)
        fontLib = self._fontLibForWriting(font, generatedIdentifiers)
        info = self._infoForWriting(font.info, generatedIdentifiers)
        if info:
            self._writePlist(root, FONTINFO_FILENAME, info)
        groups, kerning = self._kerningAndGroupsForWriting(font)
        if groups:
            self._writePlist(root, GROUPS_FILENAME, groups)
        if kerning:
            self._writePlist(root, KERNING_FILENAME, kerning)
        if self.formatVersion >= 2 and font.features.text is not None:
            self._writeBytes(root, FEATURES_FILENAME, font.features.text.encode("utf-8"))
        if fontLib:
            self._writePlist(root, LIB_FILENAME, fontLib)
        self._writeLayers(font, root, generatedIdentifiers, parallel=parallel, maxWorkers=maxWorkers)
        if self.formatVersion >= 3:
            self._writeImages(font.images, root)
            self._writeData(font.data, root)

    def _commit(self, tempPath):
        self._copyMode(tempPath)
        if not os.path.exists(self.path):
            self._rename(tempPath, self.path)
            return
        backupPath = tempPath[:-len(".tmp")] + ".old"
        self._rename(self.path, backupPath)
        try:
            self._rename(tempPath, self.path)
        except UFOIOError:
            self._rename(backupPath, self.path)
            raise
        if os.path.isdir(backupPath):
            shutil.rmtree(backupPath)
        else:
            os.remove(backupPath)

    def _copyMode(self, tempPath):
        # mkdtemp creates the directory as 0700
        try:
            if os.path.isdir(self.path):
                shutil.copymode(self.path, tempPath)
            else:
                os.chmod(tempPath, 0o777 & ~_currentUmask())
        except OSError as e:
            raise UFOIOError("The permissions of %s could not be set: %s" % (self.path, e), self.path) from e

    # -------------
    # Font Contents
    # -------------

    def _fontLibForWriting(self, font, generatedIdentifiers):
        lib = dict(font.lib)
        if OBJECT_LIBS_KEY in lib:
            raise UFOKitError("The %s key in the font lib is reserved." % OBJECT_LIBS_KEY)
        if self.formatVersion >= 3:
            guidelines = font.info.guidelines
            existing = set(guideline.identifier for guideline in guidelines if guideline.identifier is not None)
            objectLibs = {}
            for guideline in guidelines:
                if len(guideline.lib):
                    identifier = guideline.identifier
                    if identifier is None:
                        identifier = makeRandomIdentifier(existing=existing)
                        existing.add(identifier)
                        generatedIdentifiers.append((guideline, identifier))
                    objectLibs[identifier] = dict(guideline.lib)
            if objectLibs:
                lib[OBJECT_LIBS_KEY] = objectLibs
        return lib

    def _infoForWriting(self, info, generatedIdentifiers):
        generated = dict((id(obj), identifier) for obj, identifier in generatedIdentifiers)
        data = {}
        for attr, value in info.items():
            if value is None:
                continue
            if attr == "guidelines":
                if self.formatVersion >= 3 and value:
                    data[attr] = [_guidelineDict(guideline, generated.get(id(guideline))) for guideline in value]
                continue
            if attr in fontInfoAttributesVersion3:
                if self.formatVersion < 3 and attr not in fontInfoAttributesVersion2:
                    continue
                if self.formatVersion == 1:
                    attr, value = convertFontInfoValueForAttributeFromVersion2ToVersion1(attr, value)
                    if attr not in fontInfoAttributesVersion1 or value is None:
                        continue
            data[attr] = value
        return data

    def _kerningAndGroupsForWriting(self, font):
        groups = dict(font.groups)
        kerning = font.kerning.asNested()
        renameMaps = font.kerningGroupConversionRenameMaps
        if self.formatVersion < 3 and renameMaps is not None:
            remap = {}
            for side in ("side1", "side2"):
                for writeName, dataName in renameMaps.get(side, {}).items():
                    remap[dataName] = writeName
            remappedGroups = {}
            for name, contents in groups.items():
                if name not in remap:
                    remappedGroups[name] = contents
            for name, contents in groups.items():
                if name in remap:
                    remappedGroups[remap[name]] = contents
            groups = remappedGroups
            remappedKerning = {}
            for first, seconds in kerning.items():
                first = remap.get(first, first)
                remappedKerning[first] = dict((remap.get(second, second), value) for second, value in seconds.items())
            kerning = remappedKerning
        return groups, kerning

    # ------
    # Layers
    # ------

    def _layersToWrite(self, font):
        defaultLayer = font.layers.defaultLayer
        if self.formatVersion < 3:
            return [defaultLayer]
        return font.layers.layers

    def _writeLayers(self, font, root, generatedIdentifiers, parallel=False, maxWorkers=None):
        defaultLayer = font.layers.defaultLayer
        if defaultLayer is None:
            raise UFOKitError("The font has no default layer.")
        existing = set([DEFAULT_GLYPHS_DIRNAME])
        layerContents = []
        for layer in self._layersToWrite(font):
            if layer is defaultLayer:
                directoryName = DEFAULT_GLYPHS_DIRNAME
            else:
                directoryName = layerNameToDirectoryName(layer.name, existing)
            layerContents.append([layer.name, directoryName])
            with Timer() as t:
                self._writeLayer(layer, root, directoryName, generatedIdentifiers, parallel=parallel, maxWorkers=maxWorkers)
            self.log.debug("Took %.3fs to write layer %r (%d glyphs)", t, layer.name, len(layer))
        if self.formatVersion >= 3:
            self._writePlist(root, LAYERCONTENTS_FILENAME, layerContents)

    def _writeLayer(self, layer, root, directoryName, generatedIdentifiers, parallel=False, maxWorkers=None):
        self._makeDirectory(root, directoryName)
        if self.formatVersion >= 3:
            layerInfo = {}
            if layer.color is not None:
                layerInfo["color"] = str(layer.color)
            if len(layer.lib):
                layerInfo["lib"] = dict(layer.lib)
            if layerInfo:
                self._writePlist(root, os.path.join(directoryName, LAYERINFO_FILENAME), layerInfo)
        existing = set()
        contents = {}
        items = []
        for glyph in layer.glyphs:
            fileName = glyphNameToFileName(glyph.name, existing)
            contents[glyph.name] = fileName
            items.append((glyph, fileName))
        glifFormatVersion = self.glifFormatVersion

        def writeGlyph(item):
            glyph, fileName = item
            data = writeGlyphToString(glyph, formatVersion=glifFormatVersion, generatedIdentifiers=generatedIdentifiers)
            self._writeBytes(root, os.path.join(directoryName, fileName), data)

        forEach(items, writeGlyph, parallel=parallel, maxWorkers=maxWorkers)
        self._writePlist(root, os.path.join(directoryName, CONTENTS_FILENAME), contents)

    # ---------------
    # Images and Data
    # ---------------

    def _writeImages(self, images, root):
        if not len(images):
            return
        self._makeDirectory(root, IMAGES_DIRNAME)
        for fileName, data in images.items():
            self._writeBytes(root, os.path.join(IMAGES_DIRNAME, fileName), data)

    def _writeData(self, dataSet, root):
        for fileName, data in dataSet.items():
            parts = fileName.split("/")
            self._makeDirectory(root, os.path.join(DATA_DIRNAME, *parts[:-1]))
            self._writeBytes(root, os.path.join(DATA_DIRNAME, *parts), data)

    # -------
    # Support
    # -------

    def _writePlist(self, root, fileName, value):
        try:
            data = plist.dumps(value)
        except TypeError as e:
            raise UFOKitError("%s could not be written: %s" % (fileName, e)) from e
        self._writeBytes(root, fileName, data)

    def _writeBytes(self, root, fileName, data):
        path = os.path.join(root, fileName)
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise UFOIOError("%s could not be written: %s" % (fileName, e), path) from e

    def _makeDirectory(self, root, directoryName):
        path = os.path.join(root, directoryName)
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise UFOIOError("The directory %s could not be created: %s" % (directoryName, e), path) from e

    def _rename(self, source, destination):
        try:
            os.rename(source, destination)
        except OSError as e:
            raise UFOIOError("%s could not be moved to %s: %s" % (source, destination, e), destination) from e


def _guidelineDict(guideline, generatedIdentifier=None):
    data = {}
    for attr in ("x", "y", "angle", "name", "color", "identifier"):
        value = guideline.get(attr)
        if value is not None:
            if attr in ("name", "color", "identifier"):
                value = str(value)
            data[attr] = value
    if "identifier" not in data and generatedIdentifier is not None:
        data["identifier"] = generatedIdentifier
    return data


def _currentUmask():
    # the umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return umask
