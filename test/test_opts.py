from unittest import TestCase


class TestUnitOptions(TestCase):
    def tearDown(self):
        from pyunits._opts import set_unit_options
        from pyunits.registry import reset_default_registry
        reset_default_registry()
        set_unit_options(default_catalog=None, freeze_default=True)

    def test_get_set(self):
        from pyunits._opts import get_unit_options, set_unit_options

        opts = get_unit_options()
        self.assertIsNone(opts.default_catalog)
        self.assertTrue(opts.freeze_default)

        set_unit_options(freeze_default=False)
        self.assertFalse(get_unit_options().freeze_default)
        self.assertTrue(opts.freeze_default)  # Copy is unchanged.

        with self.assertRaises(AttributeError):
            opts.freeze_default = False  # Frozen.

    def test_invalid(self):
        from pyunits._opts import UnitOptions, set_unit_options

        with self.assertRaises(ValueError):
            set_unit_options(default_catalog='')
        with self.assertRaises(ValueError):
            set_unit_options(default_catalog=42)
        with self.assertRaises(TypeError):
            set_unit_options(colour='blue')
        with self.assertRaises(TypeError):
            UnitOptions(None, True)  # Keyword only.

    def test_change_after_build_warns(self):
        from pyunits._opts import set_unit_options
        from pyunits.registry import default_registry

        default_registry()
        with self.assertWarns(UserWarning):
            set_unit_options(freeze_default=False)
