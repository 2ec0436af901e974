from ufokit.objects.base import BaseObject


class Features(BaseObject):

    """
    This object contains the text representing features in the font.
    """

    def __init__(self, font=None):
        super(Features, self).__init__()
        self.setParent(font)
        self._text = None

    def _get_font(self):
        return self.getParent()

    font = property(_get_font, doc="The :class:`Font` that this object belongs to.")

    def _set_text(self, value):
        if value is not None and not isinstance(value, str):
            raise TypeError("Feature text must be a string, not %r." % type(value))
        self._text = value

    def _get_text(self):
        return self._text

    text = property(_get_text, _set_text, doc="The raw feature text.")

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        getters = [("text", lambda k: self.text)]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self.text = data.get("text")
