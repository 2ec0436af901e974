from ufokit.objects.base import BaseDictObject


class Kerning(BaseDictObject):

    """
    This object contains all of the kerning pairs in a font.

    This object behaves like a dict. For example, to get a list of all kerning pairs::

        pairs = kerning.keys()

    To get all pairs including the values::

        for (left, right), value in kerning.items():

    To get the value for a particular pair::

        value = kerning["a", "b"]

    To set the value for a particular pair::

        kerning["a", "b"] = 100

    And so on.

    Pairs keep the order in which they were added. When the kerning
    is written, first sides are grouped in order of first appearance.

    **Note:** This object is not very smart in the way it handles zero values,
    exceptions, etc. This may change in the future.
    """

    # --------------
    # Parent Objects
    # --------------

    def _get_font(self):
        return self.getParent()

    font = property(_get_font, doc="The :class:`Font` that this object belongs to.")

    # -------------
    # Pair Handling
    # -------------

    def get(self, pair, default=0):
        return super(Kerning, self).get(pair, default)

    def find(self, pair, default=0):
        """
        This will find the value for **pair** even if **pair**
        is not specifically defined. For example: You might want
        to find the value for *public.kern1.O, public.kern2.O*
        but only *O, public.kern2.O* is defined. This method
        will look up the group membership of the glyphs in the
        pair through the font's groups.
        """
        if pair in self:
            return self[pair]
        font = self.font
        if font is None:
            return default
        first, second = pair
        firstCandidates = [first] + _groupsContaining(font.groups, first, "public.kern1.")
        secondCandidates = [second] + _groupsContaining(font.groups, second, "public.kern2.")
        for firstCandidate in firstCandidates:
            for secondCandidate in secondCandidates:
                candidate = (firstCandidate, secondCandidate)
                if candidate in self:
                    return self[candidate]
        return default

    # -------------
    # Nested Format
    # -------------

    def asNested(self):
        """
        Get the pairs as ``{first : {second : value}}``, with first
        sides in order of first appearance.

        >>> kerning = Kerning()
        >>> kerning["b", "a"] = 1
        >>> kerning["a", "b"] = 2
        >>> kerning["b", "c"] = 3
        >>> kerning.asNested()
        {'b': {'a': 1, 'c': 3}, 'a': {'b': 2}}
        """
        nested = {}
        for (first, second), value in self.items():
            if first not in nested:
                nested[first] = {}
            nested[first][second] = value
        return nested

    def updateFromNested(self, nested):
        """
        Add pairs from a ``{first : {second : value}}`` dict.

        >>> kerning = Kerning()
        >>> kerning.updateFromNested({"a": {"b": -10, "c": 5}})
        >>> kerning["a", "c"]
        5
        >>> kerning.get(("x", "y"))
        0
        """
        for first, seconds in nested.items():
            for second, value in seconds.items():
                self[first, second] = value


def _groupsContaining(groups, glyphName, prefix):
    found = []
    for groupName, members in groups.items():
        if groupName.startswith(prefix) and glyphName in members:
            found.append(groupName)
    return found


if __name__ == "__main__":
    import doctest
    doctest.testmod()
