import unittest
from core.errors import InvalidInputError
from core.models import MCBStandard, StandardInfo
from standards.iec import (
    MCB_RATING_PRESETS, MCB_STANDARDS_INFO, get_ratings, get_standard_info, largest_rating, parse_standard,
)

class TestRatingTables(unittest.TestCase):
    def test_every_standard_has_table_and_info(self):
        self.assertEqual(set(MCB_RATING_PRESETS), set(MCBStandard))
        self.assertEqual(set(MCB_STANDARDS_INFO), set(MCBStandard))

    def test_tables_sorted_ascending(self):
        for std, ratings in MCB_RATING_PRESETS.items():
            self.assertEqual(list(ratings), sorted(ratings), std)
            self.assertTrue(all(r > 0 for r in ratings))

    def test_table_bounds(self):
        self.assertEqual(get_ratings(MCBStandard.RESIDENTIAL_COMMERCIAL)[:6], (1, 2, 4, 6, 10, 13))
        self.assertEqual(largest_rating(MCBStandard.RESIDENTIAL_COMMERCIAL), 125)
        self.assertEqual(get_ratings(MCBStandard.INDUSTRIAL)[0], 0.5)
        self.assertEqual(largest_rating(MCBStandard.INDUSTRIAL), 6300)

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            MCB_RATING_PRESETS[MCBStandard.INDUSTRIAL] = (1, 2)
        with self.assertRaises(AttributeError):
            MCB_RATING_PRESETS[MCBStandard.INDUSTRIAL].append(7000)

    def test_standard_info(self):
        info = get_standard_info(MCBStandard.INDUSTRIAL)
        self.assertIsInstance(info, StandardInfo)
        self.assertEqual(info.label, "IEC 60947-2 (Industrial)")
        self.assertIn("6300A", info.description)
        self.assertIn("125A", MCB_STANDARDS_INFO[MCBStandard.RESIDENTIAL_COMMERCIAL].description)

class TestParseStandard(unittest.TestCase):
    def test_enum_value_and_name(self):
        self.assertIs(parse_standard("IEC_60898-1"), MCBStandard.RESIDENTIAL_COMMERCIAL)
        self.assertIs(parse_standard("industrial"), MCBStandard.INDUSTRIAL)
        self.assertIs(parse_standard(MCBStandard.INDUSTRIAL), MCBStandard.INDUSTRIAL)

    def test_loose_forms(self):
        self.assertIs(parse_standard("IEC 60947-2"), MCBStandard.INDUSTRIAL)
        self.assertIs(parse_standard("60898"), MCBStandard.RESIDENTIAL_COMMERCIAL)

    def test_unknown(self):
        with self.assertRaises(InvalidInputError):
            parse_standard("NEMA AB-1")

if __name__ == '__main__':
    unittest.main()
