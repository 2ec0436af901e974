"""
A set of objects for reading, validating and writing
Unified Font Object (UFO) directories.
"""

version = "0.1"

from ufokit.errors import (
    UFOKitError, UFOIOError, UFOParseError, PropertyListParseError, GlifParseError,
    VersionIncompatibilityError, NameCollisionError, UFOValidationError
)

from ufokit.objects.font import Font
from ufokit.objects.layerSet import LayerSet
from ufokit.objects.layer import Layer
from ufokit.objects.glyph import Glyph
from ufokit.objects.contour import Contour
from ufokit.objects.point import Point, PointType
from ufokit.objects.component import Component
from ufokit.objects.anchor import Anchor
from ufokit.objects.guideline import Guideline
from ufokit.objects.image import Image
from ufokit.objects.info import Info
from ufokit.objects.groups import Groups
from ufokit.objects.kerning import Kerning
from ufokit.objects.features import Features
from ufokit.objects.lib import Lib
from ufokit.objects.color import Color
from ufokit.objects.imageSet import ImageSet
from ufokit.objects.dataSet import DataSet

from ufokit.io import load, save
from ufokit.validator import validateFont, validateGlyph, isValidGlyphName, StructuralViolation
