from fontTools.pens.pointPen import AbstractPointPen


class GlyphObjectPointPen(AbstractPointPen):

    """
    A point pen that builds contours and components in a :class:`Glyph`.
    Identifiers are taken as given; duplicates are left for the
    validator to report.
    """

    def __init__(self, glyph):
        self._glyph = glyph
        self._contour = None

    def beginPath(self, identifier=None, **kwargs):
        self._contour = self._glyph.instantiateContour()
        self._contour.identifier = identifier

    def endPath(self):
        self._glyph.appendContour(self._contour)
        self._contour = None

    def addPoint(self, pt, segmentType=None, smooth=False, name=None, identifier=None, **kwargs):
        self._contour.addPoint(pt, segmentType, smooth, name, identifier=identifier)

    def addComponent(self, baseGlyphName, transformation, identifier=None, **kwargs):
        component = self._glyph.instantiateComponent()
        component.baseGlyph = baseGlyphName
        component.transformation = transformation
        component.identifier = identifier
        self._glyph.appendComponent(component)
