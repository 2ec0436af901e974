from ufokit.constants import KERNING_GROUP_PREFIXES
from ufokit.objects.base import BaseDictObject


class Groups(BaseDictObject):

    """
    This object contains all of the groups in a font.

    This object behaves like a dict. The keys are group names and the
    values are lists of glyph names::

        {
            "myGroup" : ["a", "b"],
            "myOtherGroup" : ["a.alt", "g.alt"],
        }

    The API for interacting with the data is the same as a standard dict.
    For example, to get a list of all group names::

        groupNames = groups.keys()

    To get the glyph list for a particular group name::

        glyphList = groups["myGroup"]

    Kerning groups are the groups whose names start with
    ``public.kern1.`` (first side) or ``public.kern2.`` (second side).
    """

    def _get_font(self):
        return self.getParent()

    font = property(_get_font, doc="The :class:`Font` that this object belongs to.")

    # -------------
    # Kerning Sides
    # -------------

    def _get_kerningGroupsSide1(self):
        return [name for name in self.keys() if name.startswith(KERNING_GROUP_PREFIXES[0])]

    kerningGroupsSide1 = property(_get_kerningGroupsSide1, doc="The names of the first side kerning groups, in file order.")

    def _get_kerningGroupsSide2(self):
        return [name for name in self.keys() if name.startswith(KERNING_GROUP_PREFIXES[1])]

    kerningGroupsSide2 = property(_get_kerningGroupsSide2, doc="The names of the second side kerning groups, in file order.")


def _testKerningSides():
    """
    >>> groups = Groups()
    >>> groups["public.kern2.O"] = ["O", "Q"]
    >>> groups["public.kern1.O"] = ["O", "D"]
    >>> groups["caps"] = ["A", "B"]
    >>> groups.kerningGroupsSide1
    ['public.kern1.O']
    >>> groups.kerningGroupsSide2
    ['public.kern2.O']
    >>> list(groups.keys())
    ['public.kern2.O', 'public.kern1.O', 'caps']
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
