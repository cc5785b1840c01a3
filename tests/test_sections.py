import pytest

from grib2decode import templates
from grib2decode.errors import FormatError, UnsupportedFeatureError, UnsupportedTemplateError
from grib2decode.sections import decode_field, decode_section, frame_message
from grib2decode.templates import CATALOG, FieldSpec, Grib2Metadata, get_template, resolve_template


def test_decode_field_is_deterministic():
    spec = FieldSpec('nx', 1, 4, 'uint32')
    data = b'\x00\x00\x01\x2c'
    assert decode_field(spec, data) == decode_field(spec, data)
    assert decode_field(spec, data).value == 300


@pytest.mark.parametrize(
    "spec, data, expected",
    [
        pytest.param(FieldSpec('x', 1, 2, 'int16', regulation='92.1.5'), b'\x80\x05', -5, id='sign-magnitude'),
        pytest.param(FieldSpec('x', 1, 2, 'int16'), b'\xff\xfb', -5, id='twos-complement'),
        pytest.param(FieldSpec('x', 1, 1, 'int8', regulation='92.1.5'), b'\x80', 0, id='negative-zero'),
        pytest.param(FieldSpec('x', 2, 1, 'uint8'), b'\x01\xff', 255, id='offset'),
        pytest.param(FieldSpec('x', 1, 4, 'float32'), b'\x3f\xc0\x00\x00', 1.5, id='float32'),
        pytest.param(FieldSpec('x', 1, 4, 'string'), b'GRIB', 'GRIB', id='string'),
        pytest.param(FieldSpec('x', 2, None, 'bytes'), b'\x00abc', b'abc', id='to-end'),
    ],
)
def test_decode_field_types(spec, data, expected):
    assert decode_field(spec, data).value == expected


def test_decode_field_past_end():
    with pytest.raises(FormatError):
        decode_field(FieldSpec('x', 3, 4, 'uint32'), b'\x00'*5)


def test_field_spec_rejects_unknown_type():
    with pytest.raises(ValueError):
        FieldSpec('x', 1, 3, 'uint24')


def test_resolve_template_leaves_input_untouched():
    fixed = templates.SECTION_LAYOUTS[5]
    before = tuple(fixed)
    specs = resolve_template(5, fixed, 0)
    assert tuple(fixed) == before
    assert specs[:len(fixed)] == fixed
    assert [s.name for s in specs[len(fixed):]] == ['refValue', 'binScaleFactor', 'decScaleFactor',
                                                   'nBitsPacking', 'typeOfValues']
    assert resolve_template(5, fixed, 0) == specs


def test_unknown_template():
    with pytest.raises(UnsupportedTemplateError) as e:
        get_template(3, 90)
    assert e.value.section == 3
    assert e.value.template_number == 90


@pytest.mark.parametrize(
    "section, number, length",
    [(3, 0, 72), (3, 1, 84), (3, 20, 65), (3, 30, 81), (3, 40, 72),
     (4, 0, 34), (4, 1, 37), (4, 8, 58), (4, 11, 61),
     (5, 0, 21), (5, 2, 47), (5, 3, 49), (5, 4, 12), (5, 41, 21)],
)
def test_template_lengths(section, number, length):
    assert CATALOG[(section, number)].length == length


def test_template_fields_do_not_overlap():
    for (section, number), template in CATALOG.items():
        specs = resolve_template(section, templates.SECTION_LAYOUTS[section], number)
        octets = [o for s in specs if s.size for o in range(s.offset, s.offset+s.size)]
        assert len(octets) == len(set(octets)), f'template {section}.{number}'


def test_decode_section5(builder):
    sec = decode_section(5, builder.section5_simple(4, R=1.5, E=-2, D=1, nbits=12))
    assert sec.template_number == 0
    assert sec['numberOfPackedValues'] == 4
    assert sec['refValue'] == 1.5
    assert sec['binScaleFactor'] == -2
    assert sec['decScaleFactor'] == 1
    assert sec['nBitsPacking'] == 12
    assert sec.get('nGroups') is None
    assert 'nGroups' not in sec
    assert sec.get_field('dataRepresentationTemplateNumber').metadata == Grib2Metadata(0, table='5.0')


def test_decode_section_without_template(builder):
    data = builder.section3_unknown(10)
    with pytest.raises(UnsupportedTemplateError):
        decode_section(3, data)
    sec = decode_section(3, data, resolve=False)
    assert sec.template_number == 90
    assert sec['numberOfDataPoints'] == 10


def test_section_flags_and_definitions(builder):
    sec = decode_section(3, builder.section3_latlon(2, 2, 50, 0, 49, 1, scan=0x40))
    field = sec.get_field('scanModeFlags')
    assert field.flags == [0, 1, 0, 0, 0, 0, 0, 0]
    assert field.definition[2].endswith('+j (+y) direction')
    assert sec.get_field('shapeOfEarth').definition == 'Earth assumed spherical with radius = 6,371,229.0 m'
    assert 'bitmap' not in decode_section(6, builder.section6(0, [1, 0])).to_dict()


def test_frame_message(builder, sample_message):
    msg = frame_message(sample_message)
    assert [s.number for s in msg.spans] == [0, 1, 3, 4, 5, 6, 7, 8]
    assert msg.byte_range == (0, len(sample_message))
    assert msg.edition == 2
    assert msg.discipline == 0
    assert msg.span(2) is None
    assert msg.span(8).end == len(sample_message)
    assert msg.section(sample_message, 3)['nx'] == 2


def test_frame_message_with_local_use(builder):
    buf = builder.message(builder.section1(), builder.section2(b'abc'), builder.section3_latlon(1, 1, 0, 0, 0, 0),
                          builder.section4(), builder.section5_simple(1), builder.section6(),
                          builder.section7(b'\x01'))
    msg = frame_message(buf)
    assert [s.number for s in msg.spans] == [0, 1, 2, 3, 4, 5, 6, 7, 8]
    assert msg.section(buf, 2)['localUse'] == b'abc'


def _sections(builder):
    return dict(s1=builder.section1(), s3=builder.section3_latlon(1, 1, 0, 0, 0, 0),
                s4=builder.section4(), s5=builder.section5_simple(1), s6=builder.section6(),
                s7=builder.section7(b'\x01'))


def test_frame_message_bad_indicator(sample_message):
    with pytest.raises(FormatError):
        frame_message(b'GRIX'+sample_message[4:])


def test_frame_message_bad_edition(builder):
    s = _sections(builder)
    with pytest.raises(FormatError, match='edition'):
        frame_message(builder.message(*s.values(), edition=3))


def test_frame_message_truncated(sample_message):
    with pytest.raises(FormatError):
        frame_message(sample_message[:-10])
    with pytest.raises(FormatError):
        frame_message(sample_message[:12])


def test_frame_message_missing_trailer(sample_message):
    with pytest.raises(FormatError, match='7777'):
        frame_message(sample_message[:-4]+b'7778')


def test_frame_message_section_order(builder):
    s = _sections(builder)
    with pytest.raises(FormatError, match='follows'):
        frame_message(builder.message(s['s1'], s['s4'], s['s3'], s['s5'], s['s6'], s['s7']))


def test_frame_message_missing_section(builder):
    s = _sections(builder)
    with pytest.raises(FormatError, match='missing'):
        frame_message(builder.message(s['s1'], s['s3'], s['s4'], s['s5'], s['s7']))


def test_frame_message_repeated_sections(builder):
    s = _sections(builder)
    buf = builder.message(s['s1'], s['s3'], s['s4'], s['s5'], s['s6'], s['s7'],
                          s['s4'], s['s5'], s['s6'], s['s7'])
    with pytest.raises(UnsupportedFeatureError):
        frame_message(buf)


def test_frame_message_length_mismatch(builder):
    s = _sections(builder)
    buf = builder.message(*s.values())
    buf = builder.message(*s.values(), total=len(buf)+4)+b'\x00'*4
    with pytest.raises(FormatError, match='sum of section lengths'):
        frame_message(buf)


def test_frame_message_bad_section_length(builder):
    s = _sections(builder)
    bad = b'\x00\x00\x00\x02\x04'+s['s4'][5:]
    with pytest.raises(FormatError, match='bad length'):
        frame_message(builder.message(s['s1'], s['s3'], bad, s['s5'], s['s6'], s['s7']))
