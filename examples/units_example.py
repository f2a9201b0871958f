#!/usr/bin/env python3

# Examples of units.

from pyunits import quantity, unit, UnitCompositionError


# ----------------------------------------------------------------------------

def main():
    m, ft = unit('meter'), unit('foot')

    wing_span = quantity(10, 'meter')
    chord = 1 * m
    wing_area = wing_span * chord
    print(f"Wing area = {wing_area} [{wing_area.magnitude_as(ft ** 2):.5g} "
          f"ft²]")

    air_density = quantity(0.002378, 'slug') / (1 * ft) ** 3
    kg_m3 = unit('kilogram') / m ** 3
    print(f"Air density = {air_density:5G} "
          f"[{air_density.convert(kg_m3):5G}]")

    takeoff_mass = quantity(300, 'kilogram')
    print(f"Takeoff mass = {takeoff_mass:.5G} "
          f"[{takeoff_mass.convert(unit('pound')):.5G}]")

    g = quantity(9.80665, 'meter') / quantity(1, 'second') ** 2
    wing_loading = (takeoff_mass * g / wing_area).convert(unit('pascal'))
    lbf_ft2 = unit('pound_force') / ft ** 2
    print(f"Wing loading = {wing_loading:.5G} "
          f"[{wing_loading.convert(lbf_ft2):.5G}]")

    v = quantity(60, 'knot')
    q = 0.5 * air_density * v ** 2
    print(f"Dynamic pressure at {v} = {q.convert(unit('pascal')):.5G}")

    t = quantity(15, 'degree_celsius')
    print(f"ISA temperature {t} = {t.convert(unit('degree_fahrenheit')):.5G}"
          f" = {t.convert(unit('kelvin')):.5G}")
    try:
        t * wing_area
    except UnitCompositionError as e:
        print(f"As expected: {e}")

    signal = quantity(-30, 'dBm')
    print(f"Signal {signal} = {signal.convert(unit('milliwatt')):.3g}")


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    main()
