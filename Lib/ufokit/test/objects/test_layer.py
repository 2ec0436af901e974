import unittest
from ufokit import Font
from ufokit.objects.glyph import Glyph
from ufokit.test.testTools import getTestFontPath


class LayerTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_parents(self):
        font = Font(getTestFontPath())
        layer = font.layers["background"]
        self.assertIs(layer.layerSet, font.layers)
        self.assertIs(layer.font, font)
        self.assertIs(layer["A"].layer, layer)

    def test_dict_behavior(self):
        font = Font(getTestFontPath())
        layer = font.defaultLayer
        self.assertEqual(layer.keys(), ["A", "B", "C"])
        self.assertEqual(len(layer), 3)
        self.assertIn("B", layer)
        self.assertIsNone(layer.get("Z"))
        with self.assertRaises(KeyError):
            layer["Z"]
        del layer["B"]
        self.assertEqual(layer.keys(), ["A", "C"])

    def test_newGlyph_replaces_in_place(self):
        font = Font(getTestFontPath())
        layer = font.defaultLayer
        old = layer["B"]
        new = layer.newGlyph("B")
        self.assertEqual(layer.keys(), ["A", "B", "C"])
        self.assertIs(layer["B"], new)
        self.assertIsNone(old.layer)

    def test_adoptGlyph_keeps_duplicates(self):
        font = Font()
        layer = font.defaultLayer
        first = layer.newGlyph("a")
        duplicate = layer.instantiateGlyphObject(attach=False)
        duplicate._name = "a"
        layer.adoptGlyph(duplicate)
        self.assertEqual(len(layer), 2)
        self.assertEqual(layer.keys(), ["a"])
        self.assertIs(layer["a"], first)
        self.assertEqual(layer.glyphs, [first, duplicate])
        layer.removeGlyph(first)
        self.assertIs(layer["a"], duplicate)

    def test_adoptGlyph_from_other_layer(self):
        font = Font()
        other = font.newLayer("other")
        glyph = other.newGlyph("a")
        with self.assertRaises(ValueError):
            font.defaultLayer.adoptGlyph(glyph)

    def test_insertGlyph(self):
        font = Font(getTestFontPath())
        layer = font.newLayer("copies")
        copied = layer.insertGlyph(font["A"])
        self.assertIsNot(copied, font["A"])
        self.assertEqual(copied.name, "A")
        self.assertEqual(copied.width, 700)
        self.assertIs(copied.layer, layer)

    def test_color_and_lib(self):
        font = Font()
        layer = font.defaultLayer
        self.assertIsNone(layer.color)
        layer.color = (1, 0, 0, 1)
        self.assertEqual(layer.color, "1,0,0,1")
        layer.lib["com.example.key"] = 1
        self.assertIs(layer.lib.layer, layer)

    def test_bounds(self):
        font = Font(getTestFontPath())
        self.assertEqual(font.layers["background"].bounds, (0, 0, 700, 750))
        self.assertIsNone(font.newLayer("empty").bounds)


class LayerSetTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_read(self):
        font = Font(getTestFontPath())
        layers = font.layers
        self.assertEqual(layers.layerOrder, ["public.default", "background"])
        self.assertIs(layers.defaultLayer, layers["public.default"])
        self.assertIs(layers[None], layers.defaultLayer)
        self.assertEqual(len(layers), 2)

    def test_layerOrder(self):
        font = Font(getTestFontPath())
        layers = font.layers
        layers.layerOrder = ["background", "public.default"]
        self.assertEqual([layer.name for layer in layers], ["background", "public.default"])
        self.assertEqual(layers.defaultLayerName, "public.default")

    def test_defaultLayer(self):
        font = Font(getTestFontPath())
        background = font.layers["background"]
        font.layers.defaultLayer = background
        self.assertIs(font.defaultLayer, background)
        self.assertEqual(font.keys(), ["A"])

    def test_delete_default_layer(self):
        font = Font()
        del font.layers["public.default"]
        self.assertIsNone(font.layers.defaultLayer)
        with self.assertRaises(KeyError):
            font._glyphSet
        self.assertEqual([violation.kind for violation in font.validate()], ["missingDefaultLayer"])

    def test_adoptLayer(self):
        font = Font()
        layer = font.layers.instantiateLayer()
        layer.setParent(None)
        layer.name = "public.default"
        font.layers.adoptLayer(layer)
        self.assertEqual(font.layers.layerOrder, ["public.default", "public.default"])
        kinds = [violation.kind for violation in font.validate()]
        self.assertEqual(kinds, ["duplicateLayerName", "multipleDefaultLayers"])

    def test_serialization(self):
        font = Font(getTestFontPath())
        data = font.layers.getDataForSerialization()
        other = Font()
        other.layers.setDataFromSerialization(data)
        self.assertEqual(other.layers.layerOrder, ["public.default", "background"])
        self.assertEqual(other.layers.defaultLayerName, "public.default")
        self.assertIsInstance(other["A"], Glyph)


if __name__ == "__main__":
    unittest.main()
