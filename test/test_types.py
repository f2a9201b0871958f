from unittest import TestCase


class TestIntPower(TestCase):
    def test_int_power(self):
        from fractions import Fraction
        import numpy as np
        from pyunits._types import int_power

        self.assertEqual(int_power(3), 3)
        x = int_power(-2.0)
        self.assertIsInstance(x, int)
        self.assertEqual(x, -2)
        self.assertIsInstance(int_power(np.int64(4)), int)
        self.assertEqual(int_power(Fraction(6, 3)), 2)
        self.assertEqual(int_power(10 ** 400), 10 ** 400)  # No float trip.

        for bad in (0.5, True, '2', None, float('nan'), float('inf'),
                    Fraction(1, 3), 2 + 0j):
            with self.assertRaises(ValueError):
                int_power(bad)

    def test_dimension_power(self):
        from pyunits.dimension import LENGTH, TIME

        x = (LENGTH / TIME).power(2.0)
        self.assertEqual(tuple(x)[:3], (0, 2, -2))
        self.assertIsInstance(x.length, int)
        self.assertEqual(LENGTH ** -1, LENGTH.power(-1.0))

        for bad in (1.5, '2', False):
            with self.assertRaises(ValueError):
                LENGTH.power(bad)

    def test_quantity_power(self):
        import numpy as np
        from pyunits.dimension import LENGTH
        from pyunits.quantity import Quantity
        from pyunits.unit import Unit

        m = Unit.base('meter', LENGTH)
        x = Quantity(3, m).power(np.int32(2))
        self.assertEqual(x.base_magnitude, 9)
        self.assertEqual(x.unit.name, '(meter^2)')
        self.assertEqual(x.dimension, LENGTH ** 2)

        x = Quantity(3, m) ** 2.0
        self.assertEqual(x.unit.name, '(meter^2)')

        with self.assertRaises(ValueError):
            Quantity(3, m) ** 0.5
        with self.assertRaises(ValueError):
            Quantity(3, m).power(float('nan'))
