import struct
import zlib

import pytest


class Grib2Builder:
    """
    Assemble synthetic GRIB2 messages octet by octet.

    Every `section*` method returns the complete bytes of one section,
    including its length and number octets.  Angles are given in degrees and
    stored in micro-degrees.
    """

    @staticmethod
    def pack_bits(values, nbits):
        """Pack unsigned integers most significant bit first, zero padded to an octet."""
        if nbits == 0 or len(values) == 0:
            return b''
        bits = ''.join(format(int(v), f'0{nbits}b') for v in values)
        bits += '0'*(-len(bits) % 8)
        return int(bits, 2).to_bytes(len(bits)//8, 'big')

    @staticmethod
    def pack_groups(groups):
        """Pack `(values, nbits)` groups back to back, zero padded to an octet at the end only."""
        bits = ''.join(format(int(v), f'0{nbits}b') for values, nbits in groups for v in values if nbits)
        bits += '0'*(-len(bits) % 8)
        return int(bits, 2).to_bytes(len(bits)//8, 'big') if bits else b''

    @staticmethod
    def sm(value, nbytes):
        """Sign and magnitude encoding of an integer."""
        v = abs(int(value))
        if value < 0:
            v |= 1 << (8*nbytes-1)
        return v.to_bytes(nbytes, 'big')

    def micro(self, degrees, nbytes=4):
        return self.sm(round(degrees*1.e6), nbytes)

    @staticmethod
    def section(number, body):
        return struct.pack('>IB', len(body)+5, number)+body

    def section1(self, year=2023, month=1, day=2, hour=12, minute=0, second=0, center=7):
        return self.section(1, struct.pack('>HHBBBHBBBBBBB', center, 0, 2, 1, 1, year, month,
                                           day, hour, minute, second, 0, 1))

    def section2(self, local=b'local'):
        return self.section(2, local)

    @staticmethod
    def _section3_fixed(npoints, template, octets_for_points=0):
        return struct.pack('>BIBBH', 0, npoints, octets_for_points, 0, template)

    @staticmethod
    def earth(shape=6, radius=0):
        return struct.pack('>BBIBIBI', shape, 0, radius, 0, 0, 0, 0)

    def section3_latlon(self, nx, ny, lat1, lon1, lat2, lon2, di=1.0, dj=1.0, scan=0,
                        template=0, npoints=None, resflags=0x30, octets_for_points=0,
                        extra=b''):
        """Template 3.0, or 3.1 and 3.40 with the matching `extra` and `dj`."""
        npoints = nx*ny if npoints is None else npoints
        djraw = dj if template == 40 else round(dj*1.e6)
        body = (self._section3_fixed(npoints, template, octets_for_points) +
                self.earth() +
                struct.pack('>IIII', nx, ny, 0, 0) +
                self.micro(lat1) + self.micro(lon1) + bytes([resflags]) +
                self.micro(lat2) + self.micro(lon2) +
                struct.pack('>II', round(di*1.e6), djraw) +
                bytes([scan]) + extra)
        return self.section(3, body)

    def section3_rotated(self, nx, ny, lat1, lon1, lat2, lon2, south_pole=(-90., 0.),
                         angle=0.0, **kwargs):
        extra = self.micro(south_pole[0]) + self.micro(south_pole[1]) + struct.pack('>f', angle)
        return self.section3_latlon(nx, ny, lat1, lon1, lat2, lon2, template=1, extra=extra, **kwargs)

    def section3_lambert(self, nx, ny, lat1, lon1, lad=25.0, lov=265.0, dx=3000.0, dy=3000.0,
                         latin1=25.0, latin2=25.0, scan=0x40, npoints=None):
        npoints = nx*ny if npoints is None else npoints
        body = (self._section3_fixed(npoints, 30) +
                self.earth() +
                struct.pack('>II', nx, ny) +
                self.micro(lat1) + self.micro(lon1) + bytes([0x08]) +
                self.micro(lad) + self.micro(lov) +
                struct.pack('>II', round(dx*1.e3), round(dy*1.e3)) +
                bytes([0, scan]) +
                self.micro(latin1) + self.micro(latin2) +
                self.micro(-90.0) + self.micro(0.0))
        return self.section(3, body)

    def section3_unknown(self, npoints, template=90):
        return self.section(3, self._section3_fixed(npoints, template) + bytes(20))

    def section4(self, category=0, number=0, surface=100, surface_value=50000, surface_scale=0,
                 forecast=6, unit=1, template=0, second_surface=255, second_value=0,
                 end=None, stat_process=1, time_range=6, ensemble=None):
        """
        Template 4.0.  Giving `ensemble` (type, perturbation, count) makes it
        4.1, giving `end` (a datetime) makes it 4.8, and giving both makes it 4.11.
        """
        body = (struct.pack('>HH', 0, template) +
                bytes([category, number, 2, 0, 96]) +
                struct.pack('>HBB', 0, 0, unit) +
                self.sm(forecast, 4) +
                bytes([surface]) + self.sm(surface_scale, 1) + self.sm(surface_value, 4) +
                bytes([second_surface]) + self.sm(0, 1) + self.sm(second_value, 4))
        if ensemble is not None:
            body += bytes(ensemble)
        if end is not None:
            body += struct.pack('>HBBBBBBIBBBIBI', end.year, end.month, end.day, end.hour,
                                end.minute, end.second, 1, 0, stat_process, 2, unit,
                                time_range, unit, 0)
        return self.section(4, body)

    def _simple(self, npacked, template, R, E, D, nbits):
        return (struct.pack('>IH', npacked, template) + struct.pack('>f', R) +
                self.sm(E, 2) + self.sm(D, 2) + bytes([nbits, 0]))

    def section5_simple(self, npacked, R=0.0, E=0, D=0, nbits=8, template=0):
        return self.section(5, self._simple(npacked, template, R, E, D, nbits))

    def section5_complex(self, npacked, ngroups, R=0.0, E=0, D=0, nbits=8,
                         ref_width=0, nbits_width=0, ref_length=1, length_increment=1,
                         last_length=1, nbits_length=0, missing=0, splitting=1,
                         order=None, nbytes=2):
        """Template 5.2, or 5.3 when `order` is given."""
        template = 2 if order is None else 3
        body = (self._simple(npacked, template, R, E, D, nbits) +
                bytes([splitting, missing]) +
                struct.pack('>III', 0xFFFFFFFF, 0xFFFFFFFE, ngroups) +
                bytes([ref_width, nbits_width]) +
                struct.pack('>IBIB', ref_length, length_increment, last_length, nbits_length))
        if order is not None:
            body += bytes([order, nbytes])
        return self.section(5, body)

    def section5_ieee(self, npacked, precision=1):
        return self.section(5, struct.pack('>IHB', npacked, 4, precision))

    def section5_unknown(self, npacked, template=40):
        """Data representation template outside the catalog, 5.40 (JPEG 2000) by default."""
        return self.section(5, struct.pack('>IH', npacked, template)+bytes(16))

    def section6(self, flag=255, bitmap=None):
        body = bytes([flag])
        if bitmap is not None:
            body += self.pack_bits(bitmap, 1)
        return self.section(6, body)

    def section7(self, payload):
        return self.section(7, payload)

    @staticmethod
    def message(*sections, discipline=0, edition=2, total=None):
        body = b''.join(sections)
        total = 16+len(body)+4 if total is None else total
        return (b'GRIB' + b'\x00\x00' + bytes([discipline, edition]) +
                struct.pack('>Q', total) + body + b'7777')

    def simple_message(self, values, nx=2, ny=2, nbits=8, R=0.0, E=0, D=0, lat1=50.0,
                       lat2=None, lon1=0.0, scan=0, bitmap=None, grid=None, product=None,
                       discipline=0):
        """
        A complete simple packing message on a 1-degree latitude/longitude grid
        whose first row is at `lat1`.
        """
        if lat2 is None:
            lat2 = lat1-(ny-1)
        if grid is None:
            grid = self.section3_latlon(nx, ny, lat1, lon1, lat2, lon1+nx-1, scan=scan)
        if product is None:
            product = self.section4()
        flag = 255 if bitmap is None else 0
        return self.message(self.section1(), grid, product,
                            self.section5_simple(len(values), R, E, D, nbits),
                            self.section6(flag, bitmap),
                            self.section7(self.pack_bits(values, nbits)),
                            discipline=discipline)

    @staticmethod
    def _paeth(a, b, c):
        p = a+b-c
        pa, pb, pc = abs(p-a), abs(p-b), abs(p-c)
        if pa <= pb and pa <= pc:
            return a
        return b if pb <= pc else c

    @staticmethod
    def png(rows, bit_depth=8, filter_type=0):
        """
        Grayscale PNG of integer samples.

        `filter_type` 0 (None), 1 (Sub), 2 (Up), 3 (Average) or 4 (Paeth) is
        applied to every scanline.
        """
        nbytes = max(1, bit_depth//8)
        height, width = len(rows), len(rows[0])
        raw = b''
        prev = bytes((width*bit_depth+7)//8)
        for row in rows:
            line = Grib2Builder.pack_bits(row, bit_depth)
            filtered = bytearray()
            for i, x in enumerate(line):
                a = line[i-nbytes] if i >= nbytes else 0
                b = prev[i]
                c = prev[i-nbytes] if i >= nbytes else 0
                predictor = {0: 0, 1: a, 2: b, 3: (a+b)//2,
                             4: Grib2Builder._paeth(a, b, c)}[filter_type]
                filtered.append((x-predictor) & 0xFF)
            raw += bytes([filter_type]) + bytes(filtered)
            prev = line

        def chunk(ctype, data):
            return (struct.pack('>I', len(data)) + ctype + data +
                    struct.pack('>I', zlib.crc32(ctype+data) & 0xFFFFFFFF))

        return (b'\x89PNG\r\n\x1a\n' +
                chunk(b'IHDR', struct.pack('>IIBBBBB', width, height, bit_depth, 0, 0, 0, 0)) +
                chunk(b'IDAT', zlib.compress(raw)) +
                chunk(b'IEND', b''))


@pytest.fixture()
def builder():
    return Grib2Builder()


@pytest.fixture()
def sample_message(builder):
    """2x2 grid of 10, 20, 30, 40 with the northernmost row first."""
    return builder.simple_message([10, 20, 30, 40])


@pytest.fixture()
def jpeg2000_message(builder):
    """Potential temperature on a 2x2 grid packed with JPEG 2000, which is not decoded."""
    return builder.message(builder.section1(), builder.section3_latlon(2, 2, 50, 0, 49, 1),
                           builder.section4(number=2), builder.section5_unknown(4),
                           builder.section6(), builder.section7(bytes(32)))


@pytest.fixture()
def sample_buffer(builder):
    """Three messages: temperature at 500 mb, relative humidity at 2 m and temperature at 850 mb."""
    return (builder.simple_message([10, 20, 30, 40]) +
            builder.simple_message([1, 2, 3, 4], product=builder.section4(category=1, number=1,
                                                                          surface=103,
                                                                          surface_value=2)) +
            builder.simple_message([5, 6, 7, 8], product=builder.section4(surface_value=85000)))
