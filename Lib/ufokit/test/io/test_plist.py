import datetime
import unittest
from fontTools.misc import etree
from ufokit.errors import PropertyListParseError, UFOParseError
from ufokit.io.plist import loads, dumps, elementToObject


def _plist(body):
    return ('<?xml version="1.0" encoding="UTF-8"?>\n<plist version="1.0">%s</plist>' % body).encode("utf-8")


class PropertyListReadTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_types(self):
        data = _plist(
            "<dict>"
            "<key>string</key><string>a &amp; b</string>"
            "<key>empty</key><string/>"
            "<key>integer</key><integer>-3</integer>"
            "<key>real</key><real>1</real>"
            "<key>true</key><true/>"
            "<key>false</key><false/>"
            "<key>date</key><date>2020-01-02T03:04:05Z</date>"
            "<key>data</key><data>aGVsbG8=</data>"
            "<key>array</key><array><integer>1</integer><array/></array>"
            "<key>dict</key><dict/>"
            "</dict>"
        )
        value = loads(data)
        self.assertEqual(value, {
            "string": "a & b",
            "empty": "",
            "integer": -3,
            "real": 1.0,
            "true": True,
            "false": False,
            "date": datetime.datetime(2020, 1, 2, 3, 4, 5),
            "data": b"hello",
            "array": [1, []],
            "dict": {}
        })
        self.assertIsInstance(value["real"], float)
        self.assertIsInstance(value["integer"], int)

    def test_key_order(self):
        value = loads(_plist("<dict><key>z</key><integer>1</integer><key>a</key><integer>2</integer><key>m</key><integer>3</integer></dict>"))
        self.assertEqual(list(value.keys()), ["z", "a", "m"])

    def test_malformed_xml(self):
        with self.assertRaises(PropertyListParseError) as cm:
            loads(b"<plist><dict>", fileName="lib.plist")
        self.assertEqual(cm.exception.fileName, "lib.plist")
        self.assertIn("lib.plist", str(cm.exception))
        self.assertIsInstance(cm.exception, UFOParseError)

    def test_wrong_root(self):
        with self.assertRaises(PropertyListParseError):
            loads(b"<dict/>")

    def test_multiple_values(self):
        with self.assertRaises(PropertyListParseError):
            loads(_plist("<string>a</string><string>b</string>"))

    def test_missing_value(self):
        with self.assertRaises(PropertyListParseError):
            loads(_plist("<dict><key>a</key></dict>"))
        with self.assertRaises(PropertyListParseError):
            loads(_plist("<dict><key>a</key><key>b</key><true/></dict>"))

    def test_key_expected(self):
        with self.assertRaises(PropertyListParseError):
            loads(_plist("<dict><string>a</string><true/></dict>"))

    def test_duplicate_key(self):
        with self.assertRaises(PropertyListParseError) as cm:
            loads(_plist("<dict><key>a</key><true/><key>b</key><true/><key>a</key><false/></dict>"), fileName="lib.plist")
        self.assertIn("'a'", str(cm.exception))
        self.assertEqual(cm.exception.fileName, "lib.plist")
        with self.assertRaises(PropertyListParseError):
            loads(_plist("<array><dict><key>x</key><integer>1</integer><key>x</key><integer>1</integer></dict></array>"))
        with self.assertRaises(PropertyListParseError):
            elementToObject(etree.fromstring("<dict><key>a</key><true/><key>a</key><true/></dict>"))

    def test_same_key_in_different_dicts(self):
        value = loads(_plist("<dict><key>a</key><dict><key>a</key><integer>1</integer></dict></dict>"))
        self.assertEqual(value, {"a": {"a": 1}})

    def test_key_outside_dict(self):
        with self.assertRaises(PropertyListParseError):
            loads(_plist("<array><key>a</key></array>"))

    def test_exponent_reals(self):
        value = loads(_plist("<array><real>1e-20</real><real>1.5E+300</real><real>-2.5e-7</real></array>"))
        self.assertEqual(value, [1e-20, 1.5e300, -2.5e-7])

    def test_invalid_values(self):
        for body in (
            "<integer>1.5</integer>",
            "<real>abc</real>",
            "<date>yesterday</date>",
            "<data>abc</data>",
            "<date>2020Z</date>",
            "<string><b/></string>",
            "<unknown/>",
        ):
            with self.assertRaises(PropertyListParseError):
                loads(_plist(body))


class PropertyListWriteTest(unittest.TestCase):

    def __init__(self, methodName):
        unittest.TestCase.__init__(self, methodName)

    def test_header(self):
        lines = dumps({}).decode("utf-8").splitlines()
        self.assertEqual(lines, [
            "<?xml version='1.0' encoding='UTF-8'?>",
            '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">',
            '<plist version="1.0">',
            '  <dict/>',
            '</plist>'
        ])

    def test_key_order(self):
        value = {"z": 1, "a": 2, "m": 3}
        self.assertEqual(list(loads(dumps(value)).keys()), ["z", "a", "m"])

    def test_types(self):
        value = {
            "string": "<a & b>",
            "integer": 10,
            "real": 0.5,
            "whole real": 2.0,
            "bool": False,
            "date": datetime.datetime(1999, 12, 31, 23, 59, 59),
            "data": b"\x00\x01binary",
            "tuple": (1, "a"),
            "nested": [{"a": []}]
        }
        result = loads(dumps(value))
        expected = dict(value)
        expected["tuple"] = [1, "a"]
        self.assertEqual(result, expected)
        self.assertIs(result["bool"], False)
        self.assertIsInstance(result["whole real"], float)

    def test_whole_real_text(self):
        self.assertIn(b"<real>2.0</real>", dumps(2.0))

    def test_small_and_precise_reals(self):
        values = [1e-20, 1.2345678901234568e-05, 0.1, 1e300, -2.5e-300, 123456789.12345679]
        self.assertEqual(loads(dumps(values)), values)
        self.assertIn(b"<real>1e-20</real>", dumps(1e-20))
        self.assertIn(b"<real>1.2345678901234568e-05</real>", dumps(1.2345678901234568e-05))

    def test_escaping(self):
        self.assertIn(b"<string>a &amp; &lt;b&gt;</string>", dumps("a & <b>"))

    def test_unsupported_type(self):
        with self.assertRaises(TypeError):
            dumps({"a": object()})
        with self.assertRaises(TypeError):
            dumps({1: "a"})
        with self.assertRaises(TypeError):
            dumps(None)

    def test_stable(self):
        value = {"b": [1, 2.5, "x"], "a": {"c": True}}
        data = dumps(value)
        self.assertEqual(dumps(loads(data)), data)


if __name__ == "__main__":
    unittest.main()
