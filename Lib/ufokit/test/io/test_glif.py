import logging
import re
import unittest
from fontTools.misc.loggingTools import CapturingLogHandler
from ufokit.errors import GlifParseError, UFOKitError, VersionIncompatibilityError
from ufokit.io.glif import readGlyphFromString, writeGlyphToString
from ufokit.objects.glyph import Glyph


def _glif(body, name="a", format="2"):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<glyph name="%s" format="%s">\n%s\n</glyph>\n' % (name, format, body)
    ).encode("utf-8")


def _read(data):
    glyph = Glyph()
    readGlyphFromString(data, glyph, fileName="a.glif")
    return glyph


def _lines(data):
    return [line.strip() for line in data.decode("utf-8").splitlines()]


class ReadGlifTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_format_version(self):
        glyph = Glyph()
        self.assertEqual(readGlyphFromString(_glif(""), glyph), (2, 0))
        glyph = Glyph()
        self.assertEqual(readGlyphFromString(_glif("", format="1"), glyph), (1, 0))
        data = b'<glyph name="a" format="2" formatMinor="1"/>'
        self.assertEqual(readGlyphFromString(data, Glyph()), (2, 1))

    def test_full_glyph(self):
        glyph = _read(_glif("""
            <unicode hex="0061"/>
            <unicode hex="0041"/>
            <advance width="500" height="1000"/>
            <image fileName="sketch.png" xScale="0.5" color="1,0,0,1"/>
            <outline>
                <contour identifier="c1">
                    <point x="0" y="0" type="move" name="start"/>
                    <point x="10.5" y="20"/>
                    <point x="30" y="20"/>
                    <point x="40" y="0" type="curve" smooth="yes" identifier="p1"/>
                </contour>
                <component base="b" xOffset="100" identifier="comp1"/>
            </outline>
            <anchor x="250" y="700" name="top" color="0,1,0,1"/>
            <guideline x="10" y="20" angle="45" name="diagonal"/>
            <lib>
                <dict>
                    <key>com.example.key</key>
                    <string>value</string>
                </dict>
            </lib>
            <note>hello</note>
        """))
        self.assertEqual(glyph.name, "a")
        self.assertEqual(glyph.unicodes, [0x61, 0x41])
        self.assertEqual((glyph.width, glyph.height), (500, 1000))
        self.assertEqual(glyph.image.fileName, "sketch.png")
        self.assertEqual(glyph.image.transformation, (0.5, 0, 0, 1, 0, 0))
        self.assertEqual(glyph.image.color, "1,0,0,1")
        contour = glyph[0]
        self.assertEqual(contour.identifier, "c1")
        self.assertTrue(contour.open)
        self.assertEqual([point.segmentType for point in contour], ["move", None, None, "curve"])
        self.assertEqual(contour[1].x, 10.5)
        self.assertEqual(contour[0].name, "start")
        self.assertTrue(contour[3].smooth)
        self.assertEqual(contour[3].identifier, "p1")
        component = glyph.components[0]
        self.assertEqual((component.baseGlyph, component.transformation, component.identifier), ("b", (1, 0, 0, 1, 100, 0), "comp1"))
        anchor = glyph.anchors[0]
        self.assertEqual((anchor.x, anchor.y, anchor.name, anchor.color), (250, 700, "top", "0,1,0,1"))
        guideline = glyph.guidelines[0]
        self.assertEqual((guideline.x, guideline.y, guideline.angle, guideline.name), (10, 20, 45, "diagonal"))
        self.assertEqual(dict(glyph.lib), {"com.example.key": "value"})
        self.assertEqual(glyph.note, "hello")

    def test_object_libs(self):
        glyph = _read(_glif("""
            <outline>
                <contour identifier="c1">
                    <point x="0" y="0" type="line" identifier="p1"/>
                </contour>
            </outline>
            <anchor x="0" y="0" identifier="a1"/>
            <lib>
                <dict>
                    <key>public.objectLibs</key>
                    <dict>
                        <key>c1</key>
                        <dict><key>com.example.c</key><integer>1</integer></dict>
                        <key>p1</key>
                        <dict><key>com.example.p</key><integer>2</integer></dict>
                        <key>a1</key>
                        <dict><key>com.example.a</key><integer>3</integer></dict>
                        <key>missing</key>
                        <dict><key>com.example.m</key><integer>4</integer></dict>
                    </dict>
                </dict>
            </lib>
        """))
        self.assertEqual(dict(glyph.lib), {})
        self.assertEqual(dict(glyph[0].lib), {"com.example.c": 1})
        self.assertEqual(dict(glyph[0][0].lib), {"com.example.p": 2})
        self.assertEqual(dict(glyph.anchors[0].lib), {"com.example.a": 3})

    def test_format1_anchors(self):
        glyph = _read(_glif("""
            <outline>
                <contour>
                    <point x="250" y="700" type="move" name="top"/>
                </contour>
                <contour>
                    <point x="0" y="0" type="move"/>
                </contour>
            </outline>
        """, format="1"))
        self.assertEqual([(a.name, a.x, a.y) for a in glyph.anchors], [("top", 250, 700)])
        self.assertEqual(len(glyph), 1)

    def test_format1_rejects_format2_elements(self):
        for body in (
            '<anchor x="0" y="0"/>',
            '<guideline y="0"/>',
            '<image fileName="a.png"/>',
            '<outline><contour identifier="c"><point x="0" y="0"/></contour></outline>',
        ):
            with self.assertRaises(GlifParseError):
                _read(_glif(body, format="1"))
        with self.assertRaises(GlifParseError):
            _read(b'<glyph name="a" format="1" formatMinor="0"/>')

    def test_errors(self):
        for data in (
            b"<glyph",
            b'<notglyph name="a" format="2"/>',
            b'<glyph format="2"/>',
            b'<glyph name="a"/>',
            b'<glyph name="a" format="3"/>',
            b'<glyph name="a" format="x"/>',
            _glif('<advance width="a lot"/>'),
            _glif('<advance width="1"/><advance width="2"/>'),
            _glif('<unicode hex="XYZ"/>'),
            _glif('<unicode/>'),
            _glif('<anchor x="1"/>'),
            _glif('<outline><contour><point x="0"/></contour></outline>'),
            _glif('<outline><contour><point x="0" y="0" type="spline"/></contour></outline>'),
            _glif('<outline><contour><point x="0" y="0" smooth="maybe"/></contour></outline>'),
            _glif('<outline><component/></outline>'),
            _glif('<outline><circle/></outline>'),
            _glif('<lib><array/></lib>'),
            _glif('<lib><dict><key>a</key></dict></lib>'),
            _glif('<unknown/>'),
        ):
            with self.assertRaises(GlifParseError):
                _read(data)

    def test_repeated_unicode(self):
        logger = logging.getLogger("ufokit.io.glif")
        with CapturingLogHandler(logger, level="DEBUG") as captor:
            glyph = _read(_glif('<unicode hex="0061"/><unicode hex="0041"/><unicode hex="0061"/>'))
        self.assertEqual(glyph.unicodes, [0x61, 0x41])
        captor.assertRegex("repeated unicode 0061")

    def test_lib_duplicate_key(self):
        with self.assertRaises(GlifParseError):
            _read(_glif("<lib><dict><key>a</key><true/><key>a</key><false/></dict></lib>"))

    def test_error_location(self):
        with self.assertRaises(GlifParseError) as cm:
            _read(_glif('<unicode hex="XYZ"/>'))
        self.assertEqual(cm.exception.fileName, "a.glif")
        self.assertIn("a.glif", str(cm.exception))


class WriteGlifTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def _makeGlyph(self):
        glyph = Glyph()
        glyph.name = "a"
        glyph.unicodes = [0x61]
        glyph.width = 500
        glyph.note = "x < y"
        pen = glyph.getPointPen()
        pen.beginPath()
        pen.addPoint((0, 0), "line")
        pen.addPoint((100, 0), "line")
        pen.addPoint((100, 100), "line")
        pen.endPath()
        pen.addComponent("b", (1, 0, 0, 1, 10, 0))
        glyph.appendAnchor(dict(x=50, y=100, name="top"))
        glyph.lib["com.example.key"] = 1
        return glyph

    def test_element_order(self):
        glyph = self._makeGlyph()
        glyph.appendGuideline(dict(y=100, name="top"))
        glyph.image = dict(fileName="a.png")
        tags = []
        for line in _lines(writeGlyphToString(glyph))[2:]:
            match = re.match(r"<(\w+)", line)
            if match is not None and match.group(1) not in tags:
                tags.append(match.group(1))
        self.assertEqual(tags, ["unicode", "advance", "image", "outline", "contour", "point", "component", "anchor", "guideline", "lib", "dict", "key", "integer", "note"])

    def test_write_and_read(self):
        glyph = self._makeGlyph()
        glyph[0].lib["com.example.contour"] = True
        generated = []
        data = writeGlyphToString(glyph, generatedIdentifiers=generated)
        self.assertIn('<glyph name="a" format="2">', data.decode("utf-8"))
        self.assertIn("<note>x &lt; y</note>", data.decode("utf-8"))
        read = _read(data)
        self.assertIsNotNone(read[0].identifier)
        self.assertEqual(len(generated), 1)
        self.assertIs(generated[0][0], glyph[0])
        self.assertEqual(generated[0][1], read[0].identifier)
        self.assertEqual(dict(read[0].lib), {"com.example.contour": True})
        self.assertEqual(dict(read.lib), {"com.example.key": 1})
        self.assertEqual(writeGlyphToString(read), data)

    def test_defaults_omitted(self):
        glyph = Glyph()
        glyph.name = "a"
        lines = _lines(writeGlyphToString(glyph))
        self.assertEqual(lines[1:], ['<glyph name="a" format="2"/>'])

    def test_identifiers_not_assigned(self):
        glyph = self._makeGlyph()
        glyph[0].lib["com.example.contour"] = True
        glyph[0][1].lib["com.example.point"] = True
        glyph.anchors[0].lib["com.example.anchor"] = True
        data = writeGlyphToString(glyph)
        self.assertIsNone(glyph[0].identifier)
        self.assertIsNone(glyph[0][1].identifier)
        self.assertIsNone(glyph.anchors[0].identifier)
        read = _read(data)
        identifiers = [read[0].identifier, read[0][1].identifier, read.anchors[0].identifier]
        self.assertNotIn(None, identifiers)
        self.assertEqual(len(set(identifiers)), 3)
        self.assertEqual(dict(read[0][1].lib), {"com.example.point": True})
        self.assertEqual(dict(read.anchors[0].lib), {"com.example.anchor": True})

    def test_real_values(self):
        glyph = Glyph()
        glyph.name = "a"
        glyph.width = 1.2345678901234568e-05
        pen = glyph.getPointPen()
        pen.beginPath()
        pen.addPoint((1e-20, 0.1), "line")
        pen.addPoint((123456789.12345679, -2.5e-7), "line")
        pen.endPath()
        glyph.lib["com.example.real"] = 1e-20
        data = writeGlyphToString(glyph)
        self.assertIn('<point x="1e-20" y="0.1" type="line"/>', _lines(data))
        read = _read(data)
        self.assertEqual(read.width, 1.2345678901234568e-05)
        self.assertEqual([(point.x, point.y) for point in read[0]], [(1e-20, 0.1), (123456789.12345679, -2.5e-7)])
        self.assertEqual(read.lib["com.example.real"], 1e-20)

    def test_format1(self):
        glyph = self._makeGlyph()
        data = writeGlyphToString(glyph, formatVersion=1)
        lines = _lines(data)
        self.assertIn('<glyph name="a" format="1">', lines)
        self.assertIn('<point x="50" y="100" type="move" name="top"/>', lines)
        self.assertFalse(any(line.startswith("<anchor") for line in lines))
        read = _read(data)
        self.assertEqual([(a.name, a.x, a.y) for a in read.anchors], [("top", 50, 100)])
        self.assertEqual(len(read), 1)

    def test_format1_guideline(self):
        glyph = self._makeGlyph()
        glyph.appendGuideline(dict(x=10, name="stem"))
        with self.assertRaises(VersionIncompatibilityError):
            writeGlyphToString(glyph, formatVersion=1)

    def test_format1_incompatibilities(self):
        glyph = self._makeGlyph()
        glyph.image = dict(fileName="a.png")
        with self.assertRaises(VersionIncompatibilityError):
            writeGlyphToString(glyph, formatVersion=1)
        glyph = self._makeGlyph()
        glyph[0].identifier = "c1"
        with self.assertRaises(VersionIncompatibilityError):
            writeGlyphToString(glyph, formatVersion=1)
        glyph = self._makeGlyph()
        glyph.components[0].lib["com.example.key"] = 1
        with self.assertRaises(VersionIncompatibilityError):
            writeGlyphToString(glyph, formatVersion=1)
        glyph = self._makeGlyph()
        glyph.anchors[0].color = "1,0,0,1"
        with self.assertRaises(VersionIncompatibilityError):
            writeGlyphToString(glyph, formatVersion=1)

    def test_unsupported_format(self):
        with self.assertRaises(VersionIncompatibilityError):
            writeGlyphToString(self._makeGlyph(), formatVersion=3)

    def test_reserved_lib_key(self):
        glyph = self._makeGlyph()
        glyph.lib["public.objectLibs"] = {}
        with self.assertRaises(UFOKitError):
            writeGlyphToString(glyph)


if __name__ == "__main__":
    unittest.main()
