from fontTools.pens.areaPen import AreaPen
from fontTools.pens.boundsPen import ControlBoundsPen, BoundsPen

# -----
# Glyph
# -----

def glyphBounds(glyph):
    pen = BoundsPen(_glyphSet(glyph))
    glyph.draw(pen)
    return pen.bounds

def glyphControlPointBounds(glyph):
    pen = ControlBoundsPen(_glyphSet(glyph))
    glyph.draw(pen)
    return pen.bounds

def glyphArea(glyph):
    pen = AreaPen(_glyphSet(glyph))
    glyph.draw(pen)
    return abs(pen.value)

# -------
# Contour
# -------

def contourBounds(contour):
    pen = BoundsPen(None)
    contour.draw(pen)
    return pen.bounds

def contourControlPointBounds(contour):
    pen = ControlBoundsPen(None)
    contour.draw(pen)
    return pen.bounds

# area

def contourArea(contour):
    pen = AreaPen()
    contour.draw(pen)
    return pen.value

# ---------
# Component
# ---------

def componentBounds(component):
    pen = BoundsPen(_glyphSet(component))
    component.draw(pen)
    return pen.bounds

def componentControlPointBounds(component):
    pen = ControlBoundsPen(_glyphSet(component))
    component.draw(pen)
    return pen.bounds

# -------
# Support
# -------

def _glyphSet(obj):
    # components of a detached object resolve to nothing
    layer = obj.layer
    if layer is None:
        return {}
    return layer
