import unittest
from ufokit import Font
from ufokit.objects.kerning import Kerning
from ufokit.test.testTools import getTestFontPath


class KerningTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_read(self):
        font = Font(getTestFontPath())
        kerning = font.kerning
        self.assertEqual(list(kerning.keys()), [("public.kern1.A", "public.kern2.B"), ("public.kern1.A", "A"), ("B", "A")])
        self.assertEqual(kerning["public.kern1.A", "public.kern2.B"], -40)
        self.assertEqual(kerning.get(("A", "A")), 0)
        self.assertIs(kerning.font, font)

    def test_find(self):
        font = Font(getTestFontPath())
        kerning = font.kerning
        self.assertEqual(kerning.find(("A", "C")), -40)
        self.assertEqual(kerning.find(("A", "A")), 20)
        self.assertEqual(kerning.find(("B", "A")), -10)
        self.assertEqual(kerning.find(("C", "C")), 0)
        self.assertEqual(Kerning().find(("A", "C"), default=None), None)

    def test_asNested(self):
        font = Font(getTestFontPath())
        self.assertEqual(font.kerning.asNested(), {
            "public.kern1.A": {"public.kern2.B": -40, "A": 20},
            "B": {"A": -10}
        })


class GroupsTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_read(self):
        font = Font(getTestFontPath())
        groups = font.groups
        self.assertEqual(list(groups.keys()), ["public.kern1.A", "public.kern2.B", "control"])
        self.assertEqual(groups["public.kern2.B"], ["B", "C"])
        self.assertEqual(groups.kerningGroupsSide1, ["public.kern1.A"])
        self.assertEqual(groups.kerningGroupsSide2, ["public.kern2.B"])

    def test_overlapping_groups(self):
        font = Font(getTestFontPath())
        font.groups["public.kern2.C"] = ["C"]
        violations = font.validate()
        self.assertEqual([(v.kind, v.subject) for v in violations], [("overlappingKerningGroups", "C")])


class InfoTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_read(self):
        font = Font(getTestFontPath())
        info = font.info
        self.assertEqual(list(info.keys()), [
            "familyName", "styleName", "unitsPerEm", "ascender", "descender",
            "xHeight", "capHeight", "italicAngle", "postscriptDefaultWidthX", "guidelines"
        ])
        self.assertEqual(info.familyName, "Some Font (Family Name)")
        self.assertEqual(info.italicAngle, -12.5)
        self.assertIsNone(info.openTypeNameDesigner)
        guideline = info.guidelines[0]
        self.assertEqual((guideline.x, guideline.name, guideline.identifier), (250, "center", "guideline1"))
        self.assertIs(guideline.font, font)
        self.assertIsNone(guideline.glyph)

    def test_invalid_value(self):
        font = Font(getTestFontPath())
        font.info.unitsPerEm = "many"
        violations = font.validate()
        self.assertEqual([(v.kind, v.subject) for v in violations], [("invalidFontInfo", "unitsPerEm")])

    def test_guideline_identifiers(self):
        font = Font(getTestFontPath())
        font.info.appendGuideline(dict(y=100, identifier="guideline1"))
        violations = font.validate()
        self.assertEqual([(v.kind, v.subject) for v in violations], [("duplicateIdentifier", "guideline1")])


if __name__ == "__main__":
    unittest.main()
