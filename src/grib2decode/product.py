"""
Product metadata from the Identification (Section 1) and Product Definition
(Section 4) Sections.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import datetime

from . import tables
from . import utils
from .errors import FormatError
from .sections import Section
from .templates import Grib2Metadata


@dataclass(frozen=True)
class ProductInfo:
    """
    What a GRIB2 message holds and when it is valid.

    Attributes
    ----------
    short_name, full_name, units
        Parameter description from Code Table 4.2.
    reference_date
        Reference time of the data (Section 1).
    lead_time
        `datetime.timedelta` from the reference time to the end of the
        forecast or statistical period.
    valid_date
        `reference_date + lead_time`.
    duration
        Length of the statistical process, zero for instantaneous products.
    level
        wgrib2-style level or layer string, e.g. "500 mb".
    fields
        All Section 4 field values keyed by name.
    """
    discipline: int
    parameter_category: int
    parameter_number: int
    template_number: int
    short_name: str
    full_name: str
    units: str
    reference_date: datetime.datetime
    lead_time: datetime.timedelta
    valid_date: datetime.datetime
    duration: datetime.timedelta
    originating_center: int
    type_of_first_fixed_surface: int
    value_of_first_fixed_surface: Optional[float]
    level: str
    statistical_process: Optional[int] = None
    perturbation_number: Optional[int] = None
    fields: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __str__(self):
        return (f'{self.short_name}:{self.full_name} ({self.units}):{self.level}:'
                f'{self.reference_date:%Y%m%d%H} {_lead_time_string(self.lead_time, self.duration)}')

    @property
    def originating_center_name(self) -> Optional[str]:
        return tables.get_value_from_table(self.originating_center, 'originating_centers')

    @property
    def statistical_process_name(self) -> Optional[str]:
        if self.statistical_process is None:
            return None
        return str(Grib2Metadata(self.statistical_process, table='4.10').definition)


def _lead_time_string(lead_time: datetime.timedelta, duration: datetime.timedelta) -> str:
    hours = int(lead_time.total_seconds()//3600)
    if not duration:
        return 'anl' if hours == 0 else f'{hours} hour fcst'
    start = hours-int(duration.total_seconds()//3600)
    return f'{start}-{hours} hour'


def _fixed_surface_value(pdt: Dict[str, Any]) -> Optional[float]:
    if pdt['typeOfFirstFixedSurface'] == 255:
        return None
    return pdt['scaledValueOfFirstFixedSurface']/10**pdt['scaleFactorOfFirstFixedSurface']


def build_product_info(section0: Section, section1: Section, section4: Section) -> ProductInfo:
    """
    Build product metadata for a message.

    Parameters
    ----------
    section0
        Indicator Section, for the discipline.
    section1
        Identification Section, for the reference date and originating center.
    section4
        Product Definition Section decoded with its template.

    Returns
    -------
    build_product_info
        `ProductInfo` object.
    """
    pdtn = section4.template_number
    pdt = section4.to_dict()
    discipline = section0['discipline']
    full_name, units, short_name = tables.get_varinfo_from_table(discipline,
                                                                pdt['parameterCategory'],
                                                                pdt['parameterNumber'])
    refdate = datetime.datetime(*(section1[k] for k in ('year','month','day','hour','minute','second')))
    try:
        leadtime = utils.get_leadtime(refdate, pdtn, pdt)
        validdate = refdate+leadtime
        duration = utils.get_duration(pdtn, pdt)
    except(OverflowError) as e:
        raise FormatError(f'Section 4 forecast time gives a date out of range: {e}') from e
    return ProductInfo(discipline=discipline,
                       parameter_category=pdt['parameterCategory'],
                       parameter_number=pdt['parameterNumber'],
                       template_number=pdtn,
                       short_name=short_name,
                       full_name=full_name,
                       units=units,
                       reference_date=refdate,
                       lead_time=leadtime,
                       valid_date=validdate,
                       duration=duration,
                       originating_center=section1['originatingCenter'],
                       type_of_first_fixed_surface=pdt['typeOfFirstFixedSurface'],
                       value_of_first_fixed_surface=_fixed_surface_value(pdt),
                       level=tables.get_wgrib2_level_string(pdtn, pdt),
                       statistical_process=pdt.get('statisticalProcess'),
                       perturbation_number=pdt.get('perturbationNumber'),
                       fields=pdt)
