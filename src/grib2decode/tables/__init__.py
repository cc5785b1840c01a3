"""Lookups into the WMO GRIB2 code and flag tables."""

from functools import lru_cache
from typing import Optional, Union, List, Dict
import importlib

from .section0 import *
from .section1 import *
from .section3 import *
from .section4 import *
from .section5 import *
from .section6 import *
from .originating_centers import *

GRIB2_DISCIPLINES = [0, 1]


def _expand_ranges(tbl: dict) -> dict:
    expanded = {}
    for key, val in tbl.items():
        if '-' in key:
            first, last = map(int, key.split('-'))
            expanded.update((str(i), val) for i in range(first, last+1))
        else:
            expanded[key] = val
    return expanded


def get_table(table: str, expand: bool=False) -> dict:
    """
    Look up a code table by its WMO number.

    Parameters
    ----------
    table
        Table number such as '4.4'. Table 4.1 is split by discipline and must
        be given as '4.1.<discipline>'.
    expand
        If `True`, keys naming a range of codes (e.g. '8-9') are replaced by
        one key per code.

    Returns
    -------
    get_table
        Mapping of code (as `str`) to meaning. Empty when the table is not
        known.
    """
    if table == '4.1':
        raise ValueError("Code Table 4.1 is split by discipline; use '4.1.<discipline>'.")
    if table.startswith('4.2'):
        raise ValueError('Parameter tables (4.2) are read with get_varinfo_from_table().')
    tbl = globals().get('table_'+table.replace('.','_'))
    if tbl is None:
        return {}
    return _expand_ranges(tbl) if expand else tbl


def get_value_from_table(
    value: Union[int, str],
    table: str,
) -> Optional[Union[str, list, float]]:
    """
    Meaning of `value` in code table `table`, or `None`.

    Codes covered by a range key (e.g. '193-254') are matched as well.
    """
    tbl = get_table(table)
    if str(value) in tbl:
        return tbl[str(value)]
    code = int(value)
    for key, val in tbl.items():
        if '-' not in key: continue
        first, last = map(int, key.split('-'))
        if first <= code <= last:
            return val
    return None


def get_flag_meanings(bits: List[int], table: str) -> Dict[int, str]:
    """
    Return the meaning of each bit of a GRIB2 flag table.

    Parameters
    ----------
    bits
        List of 8 ints (0 or 1) with the most significant bit first, as
        returned by `grib2decode.utils.int2bin(value, output=list)`.
    table
        Flag table number (e.g. '3.4').

    Returns
    -------
    get_flag_meanings
        Dict keyed by WMO bit number (1 = most significant) of the meaning of
        each bit's current value. Bits the table does not define are omitted.
    """
    tbl = get_table(table)
    meanings = {}
    for n,b in enumerate(bits, start=1):
        try:
            meanings[n] = tbl[str(n)][str(b)]
        except(KeyError):
            continue
    return meanings


@lru_cache(maxsize=None)
def _discipline_module(discipline: int):
    try:
        return importlib.import_module(f'.section4_discipline{discipline}', __name__)
    except(ImportError):
        return None


def get_varinfo_from_table(
    discipline: Union[int, str],
    parmcat: Union[int, str],
    parmnum: Union[int, str],
) -> List[str]:
    """
    Name, units and short name of a parameter (Code Table 4.2).

    Arguments may be given as `int` or `str`.

    Parameters
    ----------
    discipline
        Product discipline from section 0.
    parmcat
        Parameter category from section 4.
    parmnum
        Parameter number from section 4.

    Returns
    -------
    get_varinfo_from_table
        `[full_name, units, short_name]`, each "Unknown" when the parameter is
        not in the tables.
    """
    mod = _discipline_module(int(discipline))
    tbl = getattr(mod, f'table_4_2_{discipline}_{parmcat}', {})
    return tbl.get(str(parmnum), ['Unknown','Unknown','Unknown'])


@lru_cache(maxsize=None)
def get_shortnames(discipline: Optional[Union[int, str]] = None) -> List[str]:
    """
    Sorted short names of every parameter in the tables, optionally for one
    discipline only.
    """
    disciplines = GRIB2_DISCIPLINES if discipline is None else [int(discipline)]
    shortnames = set()
    for d in disciplines:
        mod = _discipline_module(d)
        if mod is None: continue
        for pc in get_table(f'4.1.{d}', expand=True).keys():
            tbl = getattr(mod, f'table_4_2_{d}_{pc}', {})
            shortnames.update(v[2] for v in tbl.values())
    shortnames.discard('Unknown')
    return sorted(shortnames)


def _surface_value(pdt: Dict[str, int], which: str) -> float:
    value = pdt[f'scaledValueOf{which}FixedSurface']/10**pdt[f'scaleFactorOf{which}FixedSurface']
    # Pressure surfaces are reported in mb.
    if pdt[f'typeOf{which}FixedSurface'] in (100, 108):
        value *= 0.01
    return value


def get_wgrib2_level_string(pdtn: int, pdt: Dict[str, int]) -> str:
    """
    Describe the level or layer of a product the way wgrib2 inventories do.

    Surface types without a wgrib2 wording fall back to their Code Table 4.5
    name.

    Parameters
    ----------
    pdtn
        Product Definition Template Number.
    pdt
        Product Definition Template values keyed by field name.

    Returns
    -------
    get_wgrib2_level_string
        Level string such as '500 mb' or '500-250 mb'.
    """
    type1 = pdt['typeOfFirstFixedSurface']
    strings = get_value_from_table(type1, table='wgrib2_level_string')
    if strings is None:
        name = get_value_from_table(type1, table='4.5')
        return 'unknown level' if name is None else name[0]
    level, layer = strings
    if pdt['typeOfSecondFixedSurface'] != 255 and layer != 'reserved':
        fmt, vals = layer, (_surface_value(pdt, 'First'), _surface_value(pdt, 'Second'))
    else:
        fmt, vals = level, _surface_value(pdt, 'First')
    return fmt % vals if '%g' in fmt else fmt
