import unittest
from unittest import mock
from ufokit.errors import NameCollisionError
from ufokit.tools import filenames
from ufokit.tools.filenames import glyphNameToFileName, layerNameToDirectoryName, fileNameToGlyphName


class GlyphNameToFileNameTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_case(self):
        existing = set()
        self.assertEqual(glyphNameToFileName("a", existing), "a.glif")
        self.assertEqual(glyphNameToFileName("A", existing), "A_.glif")
        self.assertEqual(glyphNameToFileName("A.SC", existing), "A_.S_C_.glif")
        self.assertEqual(glyphNameToFileName("É", existing), "É_.glif")
        self.assertEqual(existing, set(["a.glif", "a_.glif", "a_.s_c_.glif", "é_.glif"]))

    def test_escapes(self):
        existing = set()
        self.assertEqual(glyphNameToFileName(".notdef", existing), "%2Enotdef.glif")
        self.assertEqual(glyphNameToFileName("a.b", existing), "a.b.glif")
        self.assertEqual(glyphNameToFileName("a*b", existing), "a%2Ab.glif")
        self.assertEqual(glyphNameToFileName("a:b|c", existing), "a%3Ab%7Cc.glif")
        self.assertEqual(glyphNameToFileName("a\x01", existing), "a%01.glif")
        self.assertEqual(glyphNameToFileName("a\x7f", existing), "a%7F.glif")

    def test_reserved_names(self):
        existing = set()
        self.assertEqual(glyphNameToFileName("aux", existing), "aux1.glif")
        self.assertEqual(glyphNameToFileName("com1", existing), "com11.glif")
        self.assertEqual(glyphNameToFileName("nul.alt", existing), "nul1.alt.glif")
        self.assertEqual(glyphNameToFileName("console", existing), "console.glif")

    def test_counters(self):
        existing = set(["a.glif", "a1.glif"])
        self.assertEqual(glyphNameToFileName("a", existing), "a2.glif")
        existing = set(["a.alt.glif"])
        self.assertEqual(glyphNameToFileName("a.alt", existing), "a1.alt.glif")

    def test_existing_is_case_insensitive(self):
        existing = set()
        glyphNameToFileName("a_", existing)
        self.assertEqual(glyphNameToFileName("A", existing), "A_1.glif")

    def test_long_names(self):
        existing = set()
        name = "a" * 300
        fileName = glyphNameToFileName(name, existing)
        self.assertEqual(len(fileName), 255)
        self.assertTrue(fileName.startswith("a" * 200))
        self.assertTrue(fileName.endswith(".glif"))
        self.assertIn("~", fileName)
        other = glyphNameToFileName("a" * 299 + "b", existing)
        self.assertNotEqual(fileName, other)
        self.assertTrue(len(other) <= 255)
        again = glyphNameToFileName(name, existing)
        self.assertNotEqual(again, fileName)
        self.assertTrue(len(again) <= 255)

    def test_long_multibyte_names(self):
        fileName = glyphNameToFileName("é" * 200, set())
        self.assertTrue(len(fileName.encode("utf-8")) <= 255)
        self.assertTrue(fileName.endswith(".glif"))

    def test_collision(self):
        existing = set(["a.glif", "a1.glif"])
        with mock.patch.object(filenames, "maxCounter", 1):
            with self.assertRaises(NameCollisionError):
                glyphNameToFileName("a", existing)


class LayerNameToDirectoryNameTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_names(self):
        existing = set(["glyphs"])
        self.assertEqual(layerNameToDirectoryName("background", existing), "glyphs.background")
        self.assertEqual(layerNameToDirectoryName("BACKGROUND", existing), "glyphs.B_A_C_K_G_R_O_U_N_D_")
        self.assertEqual(layerNameToDirectoryName("sketch/old", existing), "glyphs.sketch%2Fold")
        self.assertEqual(layerNameToDirectoryName(".hidden", existing), "glyphs.%2Ehidden")

    def test_counter(self):
        existing = set(["glyphs", "glyphs.background"])
        self.assertEqual(layerNameToDirectoryName("background", existing), "glyphs.background1")
        self.assertIn("glyphs.background1", existing)


class FileNameToGlyphNameTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_reverse(self):
        for name in ("a", "A", "AE", "A.SC", ".notdef", "a/b", "100%", "a_b", "É", "a\x01"):
            fileName = glyphNameToFileName(name, set())
            self.assertEqual(fileNameToGlyphName(fileName), name)

    def test_suffix(self):
        self.assertEqual(fileNameToGlyphName("glyphs.B_ackground", suffix=""), "glyphs.Background")
        self.assertEqual(fileNameToGlyphName("a.glif", suffix=".txt"), "a.glif")


if __name__ == "__main__":
    unittest.main()
