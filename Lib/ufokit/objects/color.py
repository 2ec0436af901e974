import re

_colorComponent = r"\s*(?:\d+(?:\.\d*)?|\.\d+)\s*"
_colorPattern = re.compile(r"^%s$" % ",".join([_colorComponent] * 4))


class Color(str):

    """
    This object represents a color. This object is immutable.

    The initial argument can be either a color string as defined in the UFO
    specification or a sequence of (red, green, blue, alpha) components.

    By calling str(colorObject) you will get a UFO compatible color string.
    You can also iterate over the object to create a sequence::

        colorTuple = tuple(colorObject)
    """

    def __new__(cls, value):
        # convert from string
        if isinstance(value, str):
            if not isValidColorString(value):
                raise ValueError("Invalid color string: %r." % value)
            value = _stringToSequence(value)
        r, g, b, a = value
        # validate the values
        color = (("r", r), ("g", g), ("b", b), ("a", a))
        for component, v in color:
            if v < 0 or v > 1:
                raise ValueError("The color for %s (%s) is not between 0 and 1." % (component, str(v)))
        # convert back to a normalized string
        s = ",".join(_stringify(v) for v in (r, g, b, a))
        # call the super
        return super(Color, cls).__new__(cls, s)

    def __iter__(self):
        return iter(_stringToSequence(self))

    def _get_r(self):
        return _stringToSequence(self)[0]

    r = property(_get_r, doc="The red component.")

    def _get_g(self):
        return _stringToSequence(self)[1]

    g = property(_get_g, doc="The green component.")

    def _get_b(self):
        return _stringToSequence(self)[2]

    b = property(_get_b, doc="The blue component.")

    def _get_a(self):
        return _stringToSequence(self)[3]

    a = property(_get_a, doc="The alpha component.")


def normalizeColor(value):
    """
    Convert a color value given to a setter into what is stored.
    Sequences become :class:`Color` objects. Strings are stored as
    given, so that values read from a file survive unchanged even
    when they are malformed. Those are reported by the validator.

    >>> normalizeColor((1, 0, 0, 1))
    '1,0,0,1'
    >>> type(normalizeColor((1, 0, 0, 1))).__name__
    'Color'
    >>> normalizeColor("1,0,0,2")
    '1,0,0,2'
    >>> normalizeColor(None)
    """
    if value is None or isinstance(value, str):
        return value
    return Color(value)


def isValidColorString(value):
    """
    Test a color string against the ``r,g,b,a`` grammar, each
    component a non-negative decimal number between 0 and 1.

    >>> isValidColorString("1,0,0.5,.25")
    True
    >>> isValidColorString("1, 0, 0, 1")
    True
    >>> isValidColorString("1,0,0")
    False
    >>> isValidColorString("1,0,0,2")
    False
    >>> isValidColorString("1,0,0,1e-1")
    False
    >>> isValidColorString("red")
    False
    """
    if not isinstance(value, str):
        return False
    if _colorPattern.match(value) is None:
        return False
    return all(0 <= v <= 1 for v in _stringToSequence(value))


def _stringToSequence(value):
    r, g, b, a = [i.strip() for i in value.split(",")]
    value = []
    for component in (r, g, b, a):
        try:
            v = int(component)
            value.append(v)
            continue
        except ValueError:
            pass
        v = float(component)
        value.append(v)
    return value


def _stringify(v):
    """
    >>> _stringify(1)
    '1'
    >>> _stringify(.1)
    '0.1'
    >>> _stringify(.01)
    '0.01'
    >>> _stringify(.001)
    '0.001'
    >>> _stringify(.0001)
    '0.0001'
    >>> _stringify(.00001)
    '0.00001'
    >>> _stringify(.000001)
    '0'
    >>> _stringify(.000005)
    '0.00001'
    """
    # it's an int
    i = int(v)
    if v == i:
        return str(i)
    # it's a float
    else:
        # find the shortest possible float
        for i in range(1, 6):
            s = "%%.%df" % i
            s = s % v
            if float(s) == v:
                break
        # see if the result can be converted to an int
        f = float(s)
        i = int(f)
        if f == i:
            return str(i)
        # otherwise return the float
        return s


def _test():
    """
    From String:
    >>> tuple(Color("1,1,1,1"))
    (1, 1, 1, 1)
    >>> tuple(Color(".5,.5,.5,.5"))
    (0.5, 0.5, 0.5, 0.5)
    >>> tuple(Color("1, 1, 1, 1"))
    (1, 1, 1, 1)

    From Sequence:
    >>> tuple(Color((1, 1, 1, 1)))
    (1, 1, 1, 1)

    Convert to String:
    >>> Color((0, 0, 0, 0))
    '0,0,0,0'
    >>> Color((.1, .1, .1, .1))
    '0.1,0.1,0.1,0.1'

    Component Attributes:
    >>> c = Color((.25, .5, .75, 1))
    >>> c.r, c.g, c.b, c.a
    (0.25, 0.5, 0.75, 1)

    Invalid Component Values:
    >>> Color((-1, 0, 0, 0))
    Traceback (most recent call last):
        ...
    ValueError: The color for r (-1) is not between 0 and 1.
    >>> Color((0, 0, 0, 2))
    Traceback (most recent call last):
        ...
    ValueError: The color for a (2) is not between 0 and 1.
    >>> Color("1,0,0")
    Traceback (most recent call last):
        ...
    ValueError: Invalid color string: '1,0,0'.
    """

if __name__ == "__main__":
    import doctest
    doctest.testmod()
