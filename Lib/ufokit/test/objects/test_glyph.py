import unittest
from ufokit import Font
from ufokit.objects.glyph import Glyph
from ufokit.objects.anchor import Anchor
from ufokit.objects.contour import Contour
from ufokit.test.testTools import getTestFontPath


def _drawTriangle(glyph):
    pen = glyph.getPen()
    pen.moveTo((0, 0))
    pen.lineTo((100, 0))
    pen.lineTo((100, 100))
    pen.closePath()


class GlyphTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_parents(self):
        font = Font(getTestFontPath())
        glyph = font["A"]
        self.assertIs(glyph.font, font)
        self.assertIs(glyph.layer, font.defaultLayer)
        self.assertIs(glyph.layerSet, font.layers)
        self.assertIs(glyph[0].glyph, glyph)
        self.assertIs(glyph.anchors[0].font, font)
        glyph = Glyph()
        self.assertIsNone(glyph.font)
        self.assertIsNone(glyph.layer)

    def test_read_attributes(self):
        font = Font(getTestFontPath())
        glyph = font["A"]
        self.assertEqual(glyph.unicodes, [0x0041])
        self.assertEqual(glyph.width, 700)
        self.assertEqual(glyph.markColor, "1,0,0,1")
        self.assertEqual(len(glyph), 1)
        self.assertEqual(glyph[0].identifier, "contour1")
        self.assertEqual([(p.x, p.y, p.segmentType) for p in glyph[0]], [(0, 0, "line"), (350, 750, "line"), (700, 0, "line")])
        self.assertEqual([(a.name, a.x, a.y) for a in glyph.anchors], [("top", 350, 750)])
        glyph = font["B"]
        self.assertEqual([(g.name, g.x, g.y) for g in glyph.guidelines], [("bar", None, 350)])
        self.assertEqual([p.smooth for p in glyph[0]], [False, True, False, False, True, False])
        glyph = font["C"]
        self.assertEqual([c.baseGlyph for c in glyph.components], ["A", "B"])
        self.assertEqual(glyph.components[1].transformation, (1, 0, 0, 1, 700, 0))
        self.assertEqual(glyph.note, "Made of A & B.")

    def test_pen(self):
        glyph = Glyph()
        _drawTriangle(glyph)
        self.assertEqual(len(glyph), 1)
        contour = glyph[0]
        self.assertFalse(contour.open)
        self.assertEqual([(p.x, p.y) for p in contour], [(0, 0), (100, 0), (100, 100)])
        self.assertEqual(glyph.bounds, (0, 0, 100, 100))
        self.assertEqual(glyph.area, 5000)

    def test_component_bounds(self):
        font = Font(getTestFontPath())
        self.assertEqual(font["C"].bounds, (0, 0, 1212.5, 750))
        detached = Glyph()
        detached.copyDataFromGlyph(font["C"])
        self.assertIsNone(detached.bounds)

    def test_margins(self):
        glyph = Glyph()
        _drawTriangle(glyph)
        glyph.width = 200
        self.assertEqual(glyph.leftMargin, 0)
        self.assertEqual(glyph.rightMargin, 100)
        glyph.leftMargin = 50
        self.assertEqual(glyph.bounds, (50, 0, 150, 100))
        self.assertEqual(glyph.width, 250)
        glyph.rightMargin = 10
        self.assertEqual(glyph.width, 160)

    def test_unicode(self):
        glyph = Glyph()
        self.assertIsNone(glyph.unicode)
        glyph.unicodes = [65, 66]
        glyph.unicode = 66
        self.assertEqual(glyph.unicodes, [66, 65])
        glyph.unicode = None
        self.assertEqual(glyph.unicodes, [])

    def test_markColor(self):
        glyph = Glyph()
        glyph.markColor = (0, 1, 0, 0.5)
        self.assertEqual(glyph.lib["public.markColor"], "0,1,0,0.5")
        glyph.markColor = None
        self.assertNotIn("public.markColor", glyph.lib)

    def test_anchor_identity(self):
        glyph = Glyph()
        glyph.appendAnchor(dict(x=10, y=20, name="top"))
        glyph.appendAnchor(dict(x=10, y=20, name="top"))
        first, second = glyph.anchors
        self.assertEqual(first, second)
        self.assertIsInstance(first, Anchor)
        self.assertEqual(glyph.anchorIndex(second), 1)
        glyph.removeAnchor(second)
        self.assertIs(glyph.anchors[0], first)
        self.assertIsNone(second.glyph)
        with self.assertRaises(ValueError):
            glyph.removeAnchor(second)

    def test_contour_ownership(self):
        glyph = Glyph()
        other = Glyph()
        contour = Contour()
        glyph.appendContour(contour)
        with self.assertRaises(ValueError):
            glyph.appendContour(contour)
        with self.assertRaises(ValueError):
            other.appendContour(contour)
        glyph.removeContour(contour)
        other.appendContour(contour)
        self.assertIs(contour.glyph, other)

    def test_copyDataFromGlyph(self):
        font = Font(getTestFontPath())
        source = font["A"]
        glyph = Glyph()
        glyph.copyDataFromGlyph(source)
        self.assertIsNone(glyph.name)
        self.assertEqual(glyph.width, 700)
        self.assertEqual(dict(glyph[0].lib), {"com.example.flag": "outer"})
        self.assertIsNot(glyph[0], source[0])
        glyph[0].lib["com.example.flag"] = "inner"
        self.assertEqual(source[0].lib["com.example.flag"], "outer")

    def test_rename(self):
        font = Font(getTestFontPath())
        glyph = font["A"]
        glyph.name = "A.alt"
        self.assertNotIn("A", font)
        self.assertIs(font["A.alt"], glyph)
        self.assertEqual(font.keys(), ["A.alt", "B", "C"])

    def test_move(self):
        glyph = Glyph()
        _drawTriangle(glyph)
        glyph.appendAnchor(dict(x=0, y=0, name="origin"))
        glyph.move((10, -5))
        self.assertEqual(glyph.bounds, (10, -5, 110, 95))
        self.assertEqual((glyph.anchors[0].x, glyph.anchors[0].y), (10, -5))

    def test_clear(self):
        font = Font(getTestFontPath())
        glyph = font["A"]
        glyph.clear()
        self.assertEqual(len(glyph), 0)
        self.assertEqual(glyph.anchors, [])
        self.assertEqual(glyph.width, 700)


if __name__ == "__main__":
    unittest.main()
