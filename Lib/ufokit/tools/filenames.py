"""
Conversion between glyph/layer names and file system names.

The escaping is reversible for names produced here: characters that
are illegal on common file systems are written as ``%XX`` escapes
of their UTF-8 bytes and every character that changes when lower
cased is followed by an underscore, so that two names differing only
by case never collide on a case-insensitive file system.
"""
import hashlib
from ufokit.constants import MAX_FILE_NAME_LENGTH
from ufokit.errors import NameCollisionError

illegalCharacters = set("\" % * + / : < > ? [ \\ ] |".split(" "))
reservedFileNames = set("con prn aux clock$ nul".split(" "))
reservedFileNames.update("com%d" % i for i in range(1, 10))
reservedFileNames.update("lpt%d" % i for i in range(1, 10))
reservedFileNames.update("%s:" % chr(i) for i in range(ord("a"), ord("z") + 1))

hashLength = 8
hexDigits = set("0123456789ABCDEFabcdef")
maxCounter = 999999


def glyphNameToFileName(glyphName, existing, prefix="", suffix=".glif"):
    """
    Make a file name for **glyphName** that does not clash with any
    name in **existing**, a set of lower cased file names already
    used in the same directory. The new name is added to **existing**.

    >>> existing = set()
    >>> glyphNameToFileName("a", existing)
    'a.glif'
    >>> glyphNameToFileName("A", existing)
    'A_.glif'
    >>> glyphNameToFileName("AE", existing)
    'A_E_.glif'
    >>> glyphNameToFileName("a.alt", existing)
    'a.alt.glif'
    >>> glyphNameToFileName(".notdef", existing)
    '%2Enotdef.glif'
    >>> glyphNameToFileName("a/b", existing)
    'a%2Fb.glif'
    >>> glyphNameToFileName("100%", existing)
    '100%25.glif'
    >>> glyphNameToFileName("con", existing)
    'con1.glif'
    >>> glyphNameToFileName("con.alt", existing)
    'con1.alt.glif'
    >>> glyphNameToFileName("a", existing)
    'a1.glif'
    >>> glyphNameToFileName("a", existing)
    'a2.glif'
    >>> sorted(existing)[:3]
    ['%2enotdef.glif', '100%25.glif', 'a%2fb.glif']
    """
    escaped = _escape(glyphName)
    prefixSize = _byteLength(prefix)
    suffixSize = _byteLength(suffix)
    counter = 0
    while counter <= maxCounter:
        counterText = str(counter) if counter else ""
        room = MAX_FILE_NAME_LENGTH - prefixSize - suffixSize - len(counterText)
        stem = _shorten(escaped, glyphName, room)
        first, dot, rest = stem.partition(".")
        candidateFirst = first + counterText
        candidate = prefix + candidateFirst + dot + rest + suffix
        if candidateFirst and candidateFirst.lower() not in reservedFileNames:
            if candidate.lower() not in existing:
                existing.add(candidate.lower())
                return candidate
        counter += 1
    raise NameCollisionError("No unique file name could be found for %r." % glyphName)


def layerNameToDirectoryName(layerName, existing):
    """
    Make a directory name for a non-default layer.

    >>> existing = set(["glyphs"])
    >>> layerNameToDirectoryName("background", existing)
    'glyphs.background'
    >>> layerNameToDirectoryName("Background", existing)
    'glyphs.B_ackground'
    >>> layerNameToDirectoryName("background", existing)
    'glyphs.background1'
    """
    return glyphNameToFileName(layerName, existing, prefix="glyphs.", suffix="")


def fileNameToGlyphName(fileName, suffix=".glif"):
    """
    Reverse the escaping done by :func:`glyphNameToFileName`.
    This is only reliable for names that were not shortened and
    that did not need a clash counter. The contents.plist file
    is always the authority for glyph names.

    >>> fileNameToGlyphName("A_E_.glif")
    'AE'
    >>> fileNameToGlyphName("%2Enotdef.glif")
    '.notdef'
    >>> fileNameToGlyphName("a%2Fb.glif")
    'a/b'
    >>> fileNameToGlyphName("%C3%A9.glif") == "\\u00e9"
    True
    """
    if suffix and fileName.endswith(suffix):
        fileName = fileName[:-len(suffix)]
    result = []
    pending = bytearray()
    index = 0
    while index < len(fileName):
        character = fileName[index]
        if character == "%" and _isHex(fileName[index + 1:index + 3]):
            pending.append(int(fileName[index + 1:index + 3], 16))
            index += 3
            continue
        if pending:
            result.append(pending.decode("utf-8", "replace"))
            pending = bytearray()
        result.append(character)
        index += 1
        if character != character.lower() and fileName[index:index + 1] == "_":
            index += 1
    if pending:
        result.append(pending.decode("utf-8", "replace"))
    return "".join(result)


# -------
# Support
# -------

def _escape(name):
    """
    Escape **name** into a list of tokens, one per input character.

    >>> _escape(".A|b")
    ['%2E', 'A_', '%7C', 'b']
    >>> _escape("\\x01")
    ['%01']
    """
    tokens = []
    for index, character in enumerate(name):
        code = ord(character)
        if (index == 0 and character == ".") or character in illegalCharacters or code < 32 or code == 0x7F:
            token = "".join("%%%02X" % b for b in character.encode("utf-8"))
        elif character != character.lower():
            token = character + "_"
        else:
            token = character
        tokens.append(token)
    return tokens


def _shorten(tokens, name, room):
    text = "".join(tokens)
    if _byteLength(text) <= room:
        return text
    digest = "~" + hashlib.sha1(name.encode("utf-8")).hexdigest()[:hashLength]
    room -= len(digest)
    clipped = []
    size = 0
    for token in tokens:
        tokenSize = _byteLength(token)
        if size + tokenSize > room:
            break
        clipped.append(token)
        size += tokenSize
    return "".join(clipped) + digest


def _byteLength(text):
    return len(text.encode("utf-8"))


def _isHex(text):
    return len(text) == 2 and all(c in hexDigits for c in text)


if __name__ == "__main__":
    import doctest
    doctest.testmod()
