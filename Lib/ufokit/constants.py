DEFAULT_LAYER_NAME = "public.default"
"""The name of the default layer."""

DEFAULT_GLYPHS_DIRNAME = "glyphs"
"""The directory holding the default layer."""

OBJECT_LIBS_KEY = "public.objectLibs"
"""The lib key for object libs."""

GLYPH_ORDER_KEY = "public.glyphOrder"
MARK_COLOR_KEY = "public.markColor"

DEFAULT_CREATOR = "org.ufokit"
"""The creator written to metainfo.plist."""

DEFAULT_FORMAT_VERSION = 3
SUPPORTED_FORMAT_VERSIONS = (1, 2, 3)
DEFAULT_GLIF_FORMAT_VERSION = 2

MAX_FILE_NAME_LENGTH = 255

KERNING_GROUP_PREFIXES = ("public.kern1.", "public.kern2.")

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

DEFAULT_TRANSFORMATION = (1, 0, 0, 1, 0, 0)

# file names inside a UFO

METAINFO_FILENAME = "metainfo.plist"
FONTINFO_FILENAME = "fontinfo.plist"
GROUPS_FILENAME = "groups.plist"
KERNING_FILENAME = "kerning.plist"
FEATURES_FILENAME = "features.fea"
LIB_FILENAME = "lib.plist"
LAYERCONTENTS_FILENAME = "layercontents.plist"
LAYERINFO_FILENAME = "layerinfo.plist"
CONTENTS_FILENAME = "contents.plist"
IMAGES_DIRNAME = "images"
DATA_DIRNAME = "data"
