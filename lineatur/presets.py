"""
Proportions and slants of some historic German and English scripts.
See https://de.wikipedia.org/wiki/Lineatur

    1:1:1              Suetterlinschrift (1915 - 1941)
    2:3:2  75-80 deg   Offenbacher Schrift (1927)
    3:4:3              Offenbacher Schrift, Lateinische Ausgangsschrift
    2:1:2  60 deg      Deutsche Kurrentschrift
    3:2:3  52-60 deg   Copperplate
"""
from types import MappingProxyType
from typing import NamedTuple, Optional, Tuple

from .errors import UnknownPresetError
from .geometry import SlantSpec


class Preset(NamedTuple):
    description: str
    proportions: Tuple[float, ...]
    slant: Optional[SlantSpec] = None


PRESETS = MappingProxyType({
    "suetterlin": Preset("Suetterlinschrift", (1.0, 1.0, 1.0)),
    "offenbacher": Preset("Offenbacher Schrift", (2.0, 3.0, 2.0), SlantSpec(75.0, 10)),
    "lateinische": Preset("Offenbacher Schrift, Lateinische Ausgangsschrift", (3.0, 4.0, 3.0)),
    "kurrent": Preset("Deutsche Kurrentschrift", (2.0, 1.0, 2.0), SlantSpec(60.0, 10)),
    "copperplate": Preset("Copperplate", (3.0, 2.0, 3.0), SlantSpec(52.0, 10)),
})


def preset_names():
    return tuple(PRESETS)


def get_preset(name):
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name, preset_names()) from None


def usage_examples():
    """Example command lines, one per preset, for the --help epilog"""
    lines = ['examples:']
    for name, preset in PRESETS.items():
        args = '-p ' + ':'.join('{:g}'.format(p) for p in preset.proportions)
        if preset.slant:
            args += ' -s {:g}:{}'.format(preset.slant.angle, preset.slant.count)
        lines.append('    {:<20} {:<16} {}'.format(args, '--preset ' + name, preset.description))
    return '\n'.join(lines)
