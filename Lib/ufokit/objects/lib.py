from ufokit.objects.base import BaseDictObject


class Lib(BaseDictObject):

    """
    This object contains arbitrary data.

    This object behaves like a dict. For example, to get a particular
    item from the lib::

        data = lib["com.typesupply.someApplication.blah"]

    To set the glyph list for a particular group name::

        lib["com.typesupply.someApplication.blah"] = 123

    And so on.

    **Note 1:** Values must be property list types: dict, list, str,
    int, float, bool, datetime.datetime or bytes. Anything else is
    rejected when the font is saved.

    **Note 2:** The keys used for storing data in the lib should follow the
    reverse domain naming convention detailed in the
    `UFO specification <http://unifiedfontobject.org/filestructure/lib.html>`_.
    The ``public.objectLibs`` key is managed by ufokit and must not be
    set directly.
    """

    # parents

    def _get_font(self):
        from ufokit.objects.font import Font
        parent = self.getParent()
        if parent is None or isinstance(parent, Font):
            return parent
        return parent.font

    font = property(_get_font, doc="The :class:`Font` that this object belongs to.")

    def _get_layer(self):
        from ufokit.objects.layer import Layer
        parent = self.getParent()
        if isinstance(parent, Layer):
            return parent
        glyph = self.glyph
        if glyph is None:
            return None
        return glyph.layer

    layer = property(_get_layer, doc="The :class:`Layer` that this object belongs to (if it isn't a font lib).")

    def _get_glyph(self):
        from ufokit.objects.glyph import Glyph
        parent = self.getParent()
        if isinstance(parent, Glyph):
            return parent
        return None

    glyph = property(_get_glyph, doc="The :class:`Glyph` that this object belongs to (if it is a glyph lib).")


if __name__ == "__main__":
    import doctest
    doctest.testmod()
