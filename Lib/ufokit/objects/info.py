from copy import deepcopy
from fontTools.ufoLib import fontInfoAttributesVersion3
from ufokit.objects.base import BaseDictObject
from ufokit.objects.guideline import Guideline


class Info(BaseDictObject):

    """
    This object represents info values.

    The values are kept in a dict in the order in which they were
    read or set, so ``fontinfo.plist`` keeps its key order. Every
    UFO 3 font info field is available as an attribute::

        info.familyName = "My Family"

    Setting an attribute to *None* removes the value. Keys that are
    not part of the UFO specification are preserved as they are.

    The global guidelines are :class:`Guideline` objects stored
    under the ``guidelines`` key.
    """

    def __init__(self, font=None, guidelineClass=None):
        if guidelineClass is None:
            guidelineClass = Guideline
        self._guidelineClass = guidelineClass
        super(Info, self).__init__()
        self.setParent(font)

    def __setitem__(self, key, value):
        if key == "guidelines" and value is not None:
            value = [self._wrapGuideline(guideline) for guideline in value]
        super(Info, self).__setitem__(key, value)

    def __deepcopy__(self, memo):
        obj = self.__class__(guidelineClass=self._guidelineClass)
        obj.setDataFromSerialization(self.getDataForSerialization())
        return obj

    # --------------
    # Parent Objects
    # --------------

    def _get_font(self):
        return self.getParent()

    font = property(_get_font, doc="The :class:`Font` that this object belongs to.")

    # ----------
    # Guidelines
    # ----------

    def instantiateGuideline(self, guidelineDict=None):
        guideline = self._guidelineClass(guidelineDict=guidelineDict)
        return guideline

    def _wrapGuideline(self, guideline):
        if not isinstance(guideline, self._guidelineClass):
            guideline = self.instantiateGuideline(guidelineDict=guideline)
        elif guideline.getParent() is not None and guideline.getParent() is not self:
            raise ValueError("This guideline belongs to another object.")
        guideline.setParent(self)
        return guideline

    def _get_guidelines(self):
        return list(self.get("guidelines", []))

    def _set_guidelines(self, value):
        if value is None:
            self.pop("guidelines", None)
        else:
            self["guidelines"] = value

    guidelines = property(_get_guidelines, _set_guidelines, doc="An ordered list of :class:`Guideline` objects stored in the font info. Setting this will clear any existing guidelines.")

    def appendGuideline(self, guideline):
        """
        Append **guideline** to the font. The guideline must be a
        :class:`Guideline` object or a guideline dictionary.
        """
        self.insertGuideline(len(self.get("guidelines", [])), guideline)

    def insertGuideline(self, index, guideline):
        """
        Insert **guideline** into the font at index.
        """
        guideline = self._wrapGuideline(guideline)
        guidelines = list(self.get("guidelines", []))
        guidelines.insert(index, guideline)
        dict.__setitem__(self, "guidelines", guidelines)

    def removeGuideline(self, guideline):
        """
        Remove **guideline** from the font.
        """
        guidelines = self.get("guidelines", [])
        for index, other in enumerate(guidelines):
            if other is guideline:
                del guidelines[index]
                guideline.setParent(None)
                return
        raise ValueError("The guideline is not in the font info.")

    def clearGuidelines(self):
        """
        Clear all guidelines.
        """
        for guideline in self.get("guidelines", []):
            guideline.setParent(None)
        self.pop("guidelines", None)

    # ----------
    # Identifier
    # ----------

    def _get_identifiers(self):
        identifiers = set()
        for guideline in self.get("guidelines", []):
            if guideline.identifier is not None:
                identifiers.add(guideline.identifier)
        return identifiers

    identifiers = property(_get_identifiers, doc="Set of identifiers for the global guidelines. This is primarily for internal use.")

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        def get_value(k):
            value = dict.__getitem__(self, k)
            if k == "guidelines" and value is not None:
                return [guideline.getDataForSerialization() for guideline in value]
            return deepcopy(value)

        getters = [(k, get_value) for k in list(self.keys())]
        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        self.clearGuidelines()
        self.clear()
        for key, value in data.items():
            if key == "guidelines" and value is not None:
                guidelines = []
                for guidelineData in value:
                    guideline = self.instantiateGuideline()
                    guideline.setDataFromSerialization(guidelineData)
                    guidelines.append(guideline)
                value = guidelines
            self[key] = value


def _makeAttributeProperty(attr):
    def getter(self):
        return self.get(attr)

    def setter(self, value):
        if value is None:
            self.pop(attr, None)
        else:
            self[attr] = value

    return property(getter, setter, doc="The font info **%s** value." % attr)


for _attr in sorted(fontInfoAttributesVersion3):
    if _attr != "guidelines":
        setattr(Info, _attr, _makeAttributeProperty(_attr))
del _attr


def _test():
    """
    >>> info = Info()
    >>> info.unitsPerEm = 1000
    >>> info.familyName = "Test"
    >>> info.ascender = 750
    >>> list(info.keys())
    ['unitsPerEm', 'familyName', 'ascender']
    >>> info.familyName = None
    >>> list(info.keys())
    ['unitsPerEm', 'ascender']
    >>> info["com.example.custom"] = True
    >>> info.getDataForSerialization()
    {'unitsPerEm': 1000, 'ascender': 750, 'com.example.custom': True}
    >>> info.styleName is None
    True
    """


def _testGuidelines():
    """
    >>> info = Info()
    >>> info.appendGuideline(dict(x=100, name="left"))
    >>> guideline = info.guidelines[0]
    >>> guideline.name, guideline.getParent() is info
    ('left', True)
    >>> guideline.generateIdentifier() in info.identifiers
    True
    >>> info.removeGuideline(guideline)
    >>> info.guidelines
    []
    >>> info.guidelines = [dict(y=10)]
    >>> info.guidelines[0].y
    10
    >>> info.clearGuidelines()
    >>> "guidelines" in info
    False
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
