"""
A strict, order preserving property list codec built on
:mod:`fontTools.misc.plistlib`.

Values are native Python objects: dict (insertion ordered, str keys),
list, str, int, float, bool, datetime.datetime and bytes. Decoding
rejects anything that is not a well formed property list, including
dicts that repeat a key; encoding rejects anything that is not one of
those types.
"""
from fontTools.misc import etree
from fontTools.misc import plistlib
from ufokit.errors import PropertyListParseError

_scalarElements = ("key", "string", "integer", "real", "true", "false", "date", "data")


def loads(data, fileName=None):
    """
    Decode property list **data** (bytes) into a Python object.

    >>> loads(b'<plist version="1.0"><dict><key>b</key><integer>1</integer><key>a</key><real>2.5</real></dict></plist>')
    {'b': 1, 'a': 2.5}
    >>> loads(b'<plist version="1.0"><array><string>x</string><true/></array></plist>')
    ['x', True]
    """
    root = parseXML(data, fileName, PropertyListParseError)
    if root.tag != "plist":
        raise PropertyListParseError("The root element must be plist, not %s." % root.tag, fileName, _position(root))
    children = _children(root)
    if len(children) != 1:
        raise PropertyListParseError("A property list must contain exactly one value.", fileName, _position(root))
    return elementToObject(children[0], fileName)


def dumps(value):
    """
    Encode **value** into property list bytes. Dict keys are
    written in insertion order.

    >>> lines = dumps({"b": 1, "a": [1.0, 1e-20, "x"]}).splitlines()
    >>> lines[0]
    b"<?xml version='1.0' encoding='UTF-8'?>"
    >>> for line in lines[2:]:
    ...     print(line.decode("utf-8"))
    <plist version="1.0">
      <dict>
        <key>b</key>
        <integer>1</integer>
        <key>a</key>
        <array>
          <real>1.0</real>
          <real>1e-20</real>
          <string>x</string>
        </array>
      </dict>
    </plist>
    """
    return plistlib.dumps(value, sort_keys=False)


def totree(value, indentLevel=1):
    """
    Convert **value** into a property list value element, for
    embedding in another XML document.
    """
    return plistlib.totree(value, sort_keys=False, indent_level=indentLevel)


# --------
# Decoding
# --------

def parseXML(data, fileName=None, errorClass=PropertyListParseError):
    """
    Parse **data** into an element tree root, converting parser
    failures into **errorClass**.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        return etree.fromstring(data)
    except (etree.ParseError, ValueError) as e:
        position = getattr(e, "position", None)
        raise errorClass("The XML could not be parsed: %s" % e, fileName, position) from e


def elementToObject(element, fileName=None):
    """
    Convert a property list value element into a Python object.
    The element structure is checked before the conversion.
    """
    _checkElement(element, fileName)
    try:
        return plistlib.fromtree(element, dict_type=dict)
    except (ValueError, TypeError) as e:
        raise PropertyListParseError("Invalid %s value: %s" % (element.tag, e), fileName, _position(element)) from e


def _checkElement(element, fileName):
    tag = element.tag
    children = _children(element)
    if tag == "dict":
        keys = set()
        for index in range(0, len(children), 2):
            keyElement = children[index]
            if keyElement.tag != "key":
                raise PropertyListParseError("Expected a key in dict, found %s." % keyElement.tag, fileName, _position(keyElement))
            _checkElement(keyElement, fileName)
            if index + 1 == len(children) or children[index + 1].tag == "key":
                raise PropertyListParseError("A dict key is missing its value.", fileName, _position(keyElement))
            key = keyElement.text or ""
            if key in keys:
                raise PropertyListParseError("The key %r occurs more than once in a dict." % key, fileName, _position(keyElement))
            keys.add(key)
            _checkElement(children[index + 1], fileName)
    elif tag == "array":
        for child in children:
            if child.tag == "key":
                raise PropertyListParseError("A key can only appear in a dict.", fileName, _position(child))
            _checkElement(child, fileName)
    elif tag in _scalarElements:
        if children:
            raise PropertyListParseError("The %s element can not have children." % tag, fileName, _position(element))
    else:
        raise PropertyListParseError("Unknown property list element: %s." % tag, fileName, _position(element))


def _children(element):
    # skip comments and processing instructions
    return [child for child in element if isinstance(child.tag, str)]


def _position(element):
    line = getattr(element, "sourceline", None)
    if line is None:
        return None
    return (line, None)


if __name__ == "__main__":
    import doctest
    doctest.testmod()
