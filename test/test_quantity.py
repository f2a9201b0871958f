from unittest import TestCase


def _units():
    from pyunits.dimension import MASS, LENGTH, TIME, TEMPERATURE, COUNT
    from pyunits.transform import Decibel
    from pyunits.unit import Unit

    return {
        'meter': Unit.base('meter', LENGTH),
        'kilometer': Unit.linear('kilometer', LENGTH, 1000),
        'centimeter': Unit.linear('centimeter', LENGTH, 1e-2),
        'second': Unit.base('second', TIME),
        'gram': Unit.linear('gram', MASS, 1e-3),
        'joule': Unit.base('joule', MASS * LENGTH ** 2 / TIME ** 2),
        'kelvin': Unit.base('kelvin', TEMPERATURE),
        'degree_celsius': Unit.linear('degree_celsius', TEMPERATURE, 1,
                                      273.15),
        'decibel': Unit('decibel', COUNT, Decibel(1)),
    }


# noinspection PyUnusedLocal
class TestQuantity(TestCase):
    def test___init__(self):
        import numpy as np
        from pyunits.quantity import Quantity

        u = _units()
        x = Quantity(5, u['kilometer'])
        self.assertEqual(x.base_magnitude, 5000)
        self.assertEqual(x.magnitude, 5)
        self.assertIs(x.unit, u['kilometer'])
        self.assertEqual(x.dimension, u['meter'].dimension)

        x = Quantity(25, u['degree_celsius'])
        self.assertAlmostEqual(x.base_magnitude, 298.15)
        self.assertAlmostEqual(x.magnitude, 25)

        x = Quantity([1, 2, 3], u['kilometer'])
        self.assertIsInstance(x.base_magnitude, np.ndarray)
        np.testing.assert_array_equal(x.base_magnitude, [1000, 2000, 3000])

        with self.assertRaises(TypeError):
            Quantity(1, 'meter')

    def test_from_registry(self):
        from pyunits.exceptions import UnknownUnitNameError
        from pyunits.quantity import Quantity
        from pyunits.registry import UnitRegistry

        reg = UnitRegistry(_units().values())
        x = Quantity.from_registry(reg, 3, 'kilometer')
        self.assertEqual(x.base_magnitude, 3000)

        with self.assertRaises(UnknownUnitNameError) as cm:
            Quantity.from_registry(reg, 3, 'furlong')
        self.assertEqual(cm.exception.name, 'furlong')

    def test_magnitude_as(self):
        from pyunits.exceptions import UnitConversionError
        from pyunits.quantity import Quantity

        u = _units()
        self.assertEqual(Quantity(5000, u['meter']).magnitude_as(
            u['kilometer']), 5.0)
        self.assertEqual(Quantity(5, u['kilometer']).magnitude_as(
            u['meter']), 5000.0)
        self.assertEqual(Quantity(5, u['kilometer']).m_as(u['meter']), 5000)

        x = Quantity(0, u['degree_celsius'])
        self.assertAlmostEqual(x.magnitude_as(u['kelvin']), 273.15)
        x = Quantity(300, u['kelvin'])
        self.assertAlmostEqual(x.magnitude_as(u['degree_celsius']), 26.85)

        with self.assertRaises(UnitConversionError) as cm:
            Quantity(1, u['meter']).magnitude_as(u['second'])
        self.assertEqual(cm.exception.expected, u['meter'].dimension)
        self.assertEqual(cm.exception.got, u['second'].dimension)
        self.assertIsInstance(cm.exception, ValueError)

    def test_convert(self):
        from pyunits.exceptions import UnitConversionError
        from pyunits.quantity import Quantity

        u = _units()
        x = Quantity(1500, u['meter']).convert(u['kilometer'])
        self.assertIs(x.unit, u['kilometer'])
        self.assertEqual(x.magnitude, 1.5)
        self.assertEqual(x.base_magnitude, 1500)

        with self.assertRaises(UnitConversionError):
            x.convert(u['gram'])

    def test_composite_arithmetic(self):
        from pyunits.quantity import Quantity

        u = _units()
        e = (Quantity(1000, u['gram']) * Quantity(4, u['meter']).power(2) /
             Quantity(1, u['second']).power(2))
        self.assertEqual(e.dimension, u['joule'].dimension)
        self.assertEqual(e.magnitude_as(u['joule']), 16.0)
        self.assertEqual(e.unit.name, '((gram * (meter^2)) / (second^2))')

        # Base magnitudes are used directly.
        x = Quantity(1, u['meter']) ** 3 / Quantity(1, u['centimeter']) ** 3
        self.assertAlmostEqual(x.base_magnitude, 1e6)
        self.assertTrue(x.dimension.is_dimensionless)

        x = Quantity(2, u['kilometer']) * Quantity(3, u['kilometer'])
        self.assertEqual(x.base_magnitude, 6e6)
        self.assertAlmostEqual(x.magnitude, 6)

    def test_power(self):
        import numpy as np
        from pyunits.exceptions import UnitCompositionError
        from pyunits.quantity import Quantity

        u = _units()
        x = Quantity(2, u['kilometer']) ** 2
        self.assertEqual(x.base_magnitude, 4e6)
        self.assertAlmostEqual(x.magnitude, 4)
        self.assertEqual(x.unit.name, '(kilometer^2)')

        x = Quantity(4, u['meter']).power(-1)
        self.assertEqual(x.base_magnitude, 0.25)

        x = Quantity([1, 2], u['meter']) ** -2
        np.testing.assert_allclose(x.base_magnitude, [1, 0.25])

        with self.assertRaises(UnitCompositionError):
            Quantity(10, u['degree_celsius']) ** 2
        with self.assertRaises(UnitCompositionError):
            Quantity(10, u['decibel']).power(2)
        with self.assertRaises(ValueError):
            Quantity(4, u['meter']) ** 0.5

    def test_scalar_arithmetic(self):
        import numpy as np
        from pyunits.quantity import Quantity

        u = _units()
        x = Quantity(3, u['kilometer']) * 2
        self.assertEqual(x.base_magnitude, 6000)
        self.assertIs(x.unit, u['kilometer'])

        x = 2 * Quantity(3, u['kilometer'])
        self.assertEqual(x.base_magnitude, 6000)

        x = Quantity(3, u['kilometer']) / 4
        self.assertEqual(x.base_magnitude, 750)

        x = np.array([1, 2]) * Quantity(3, u['meter'])
        self.assertIsInstance(x, Quantity)
        np.testing.assert_array_equal(x.base_magnitude, [3, 6])

        # Scaling is always allowed, even for decibel and offset units.
        x = Quantity(20, u['decibel'])
        y = x / 10
        self.assertAlmostEqual(y.base_magnitude, 10.0)
        self.assertIs(y.unit, u['decibel'])
        self.assertAlmostEqual(y.magnitude, 10.0)

        y = Quantity(0, u['degree_celsius']) * 2
        self.assertAlmostEqual(y.magnitude_as(u['kelvin']), 546.3)

        with self.assertRaises(TypeError):
            Quantity(1, u['meter']) * 'abc'
        with self.assertRaises(TypeError):
            1 / Quantity(1, u['meter'])

    def test_add_subtract(self):
        from pyunits.exceptions import IncompatibleDimensionsError
        from pyunits.quantity import Quantity

        u = _units()
        x = Quantity(1, u['kilometer']) + Quantity(500, u['meter'])
        self.assertIs(x.unit, u['kilometer'])
        self.assertEqual(x.base_magnitude, 1500)
        self.assertEqual(x.magnitude, 1.5)

        x = Quantity(500, u['meter']) - Quantity(1, u['kilometer'])
        self.assertIs(x.unit, u['meter'])
        self.assertEqual(x.magnitude, -500)

        # Must never give a result.
        with self.assertRaises(IncompatibleDimensionsError) as cm:
            x = Quantity(1, u['meter']) + Quantity(1, u['second'])
        self.assertEqual(cm.exception.a, u['meter'].dimension)
        self.assertEqual(cm.exception.b, u['second'].dimension)
        with self.assertRaises(IncompatibleDimensionsError):
            x = Quantity(1, u['meter']) - Quantity(1, u['gram'])
        with self.assertRaises(TypeError):
            x = Quantity(1, u['meter']) + 1

    def test_unary(self):
        from pyunits.quantity import Quantity

        u = _units()
        x = -Quantity(2, u['kilometer'])
        self.assertEqual(x.base_magnitude, -2000)
        self.assertIs(x.unit, u['kilometer'])
        self.assertEqual(abs(x).base_magnitude, 2000)
        self.assertEqual(float(Quantity(2, u['kilometer'])), 2.0)

    def test_comparison(self):
        from pyunits.exceptions import IncompatibleDimensionsError
        from pyunits.quantity import Quantity

        u = _units()
        a, b = Quantity(1, u['kilometer']), Quantity(999, u['meter'])
        self.assertTrue(a > b)
        self.assertTrue(a >= b)
        self.assertTrue(b < a)
        self.assertTrue(b <= a)
        self.assertFalse(a == b)
        self.assertTrue(a != b)
        self.assertTrue(a == Quantity(1000, u['meter']))

        # Equality across dimensions is simply false.
        self.assertFalse(Quantity(1, u['meter']) == Quantity(1, u['second']))
        self.assertTrue(Quantity(1, u['meter']) != Quantity(1, u['second']))

        with self.assertRaises(IncompatibleDimensionsError):
            x = Quantity(1, u['meter']) < Quantity(1, u['second'])

        with self.assertRaises(TypeError):
            hash(a)

    def test_arrays(self):
        import numpy as np
        from pyunits.quantity import Quantity

        u = _units()
        x = Quantity(np.array([0.0, 25.0, 100.0]), u['degree_celsius'])
        np.testing.assert_allclose(x.magnitude_as(u['kelvin']),
                                   [273.15, 298.15, 373.15])

        x = Quantity(np.array([0.0, 10.0, 20.0]), u['decibel'])
        np.testing.assert_allclose(x.base_magnitude, [1.0, 10.0, 100.0])

        x = Quantity([1, 2], u['meter']) + Quantity([1, 1], u['kilometer'])
        np.testing.assert_array_equal(x.base_magnitude, [1001, 1002])

        eq = Quantity([1, 2], u['meter']) == Quantity([1, 3], u['meter'])
        np.testing.assert_array_equal(eq, [True, False])

    def test_format(self):
        from pyunits.quantity import Quantity

        u = _units()
        x = Quantity(1.5, u['kilometer'])
        self.assertEqual(f"{x:.2f}", '1.50 kilometer')
        self.assertEqual(str(x), '1.5 kilometer')
        self.assertEqual(repr(x), "Quantity(1.5, 'kilometer')")

    def test_power_numeric_edge_cases(self):
        import math
        import numpy as np
        from pyunits.quantity import Quantity

        u = _units()

        # Numpy integer scalars to negative powers.
        x = Quantity(np.arange(3)[2], u['meter']) ** -1
        self.assertAlmostEqual(x.base_magnitude, 0.5)
        x = Quantity(np.int32(4), u['meter']).power(-2)
        self.assertAlmostEqual(x.base_magnitude, 0.0625)

        # Overflow gives inf, the same as multiplication.
        big = Quantity(1e200, u['meter'])
        self.assertTrue(math.isinf((big * big).base_magnitude))
        x = big ** 2
        self.assertTrue(math.isinf(x.base_magnitude))
        self.assertEqual(x.dimension, (big * big).dimension)

        # Python integers stay exact.
        x = Quantity(10 ** 10, u['meter']) ** 3
        self.assertEqual(x.base_magnitude, 10 ** 30)
