import pytest

from multibasekit.codecs import RadixCodec, decode10, decode8, decode_radix, encode10, encode8, encode_radix
from multibasekit.exceptions import InvalidPayloadError

CHEESE = b"cheese and onions"
CHEESE_8 = "615503126256331220141334620403366715133667163"
CHEESE_10 = "33826720516383156940929764387734877597299"


def test_hello_scenarios():
    assert encode10(b"hello") == "448378203247"
    assert decode10("448378203247") == b"hello"
    assert encode8(b"hello") == "6414533066157"

    assert encode8(b"\x00\x00hello", padding=True) == "006414533066157"
    assert decode8("006414533066157", padding=True) == b"\x00\x00hello"
    assert encode10(b"\x00\x00hello", padding=True) == "00448378203247"
    assert decode10("00448378203247", padding=True) == b"\x00\x00hello"


@pytest.mark.parametrize("padding", [True, False])
def test_encodes_and_decodes_binaries(padding):
    assert encode8(CHEESE, padding=padding) == CHEESE_8
    assert encode10(CHEESE, padding=padding) == CHEESE_10
    assert decode8(CHEESE_8, padding=padding) == CHEESE
    assert decode10(CHEESE_10, padding=padding) == CHEESE


@pytest.mark.parametrize("radix", [8, 10])
def test_leading_zeroes_collapse_without_padding(radix):
    assert encode_radix(b"\x00\x01", radix) == "1"
    assert encode_radix(b"\x00\x00\x01", radix) == "1"
    assert encode_radix(b"\x00\x00hello", radix, padding=False) == encode_radix(b"hello", radix)

    assert decode_radix("01", radix) == b"\x01"
    assert decode_radix("001", radix) == b"\x01"


@pytest.mark.parametrize("radix", [8, 10])
def test_leading_zeroes_kept_with_padding(radix):
    assert encode_radix(b"\x00\x01", radix, padding=True) == "01"
    assert encode_radix(b"\x00\x00\x01", radix, padding=True) == "001"

    assert decode_radix("01", radix, padding=True) == b"\x00\x01"
    assert decode_radix("001", radix, padding=True) == b"\x00\x00\x01"


@pytest.mark.parametrize("radix", [8, 10])
@pytest.mark.parametrize("padding", [True, False])
def test_empty_and_single_zero(radix, padding):
    assert encode_radix(b"", radix, padding=padding) == ""
    assert decode_radix("", radix, padding=padding) == b""
    assert decode_radix("0", radix, padding=padding) == b"\x00"
    assert encode_radix(b"\x00", radix, padding=padding) == "0"


@pytest.mark.parametrize("radix", [8, 10])
def test_all_zero_input(radix):
    assert encode_radix(b"\x00\x00\x00", radix, padding=True) == "000"
    assert decode_radix("000", radix, padding=True) == b"\x00\x00\x00"

    assert encode_radix(b"\x00\x00\x00", radix) == "0"
    assert decode_radix("000", radix) == b"\x00"


@pytest.mark.parametrize("radix", [8, 10])
def test_padding_transparency(radix):
    body = bytes(range(1, 40))
    data = b"\x00\x00" + body

    padded = encode_radix(data, radix, padding=True)
    assert padded.startswith("00") and padded[2] != "0"
    assert decode_radix(padded, radix, padding=True) == data

    plain = encode_radix(data, radix, padding=False)
    assert decode_radix(plain, radix, padding=False) == body


def test_large_decimal_values_round_trip():
    # well past the interpreter's default int/str digit limit
    data = b"\x00" + bytes(range(1, 256)) * 12
    text = encode10(data, padding=True)
    assert len(text) > 5000
    assert decode10(text, padding=True) == data


@pytest.mark.parametrize("text", ["09", "90", "091", "8", "1a"])
@pytest.mark.parametrize("padding", [True, False])
def test_rejects_non_octal_digits(text, padding):
    with pytest.raises(InvalidPayloadError):
        decode8(text, padding=padding)


@pytest.mark.parametrize("text", ["0A", "A0", "0A0", "1_000", " 12", "+1", "-1", "١٢"])
def test_rejects_non_decimal_digits(text):
    with pytest.raises(InvalidPayloadError):
        decode10(text)


def test_rejects_letters():
    for char in "ABCXYZabcxyz":
        with pytest.raises(InvalidPayloadError):
            decode8(char)
        with pytest.raises(InvalidPayloadError):
            decode10(char)


def test_unsupported_radix_and_types():
    with pytest.raises(ValueError):
        encode_radix(b"x", 16)
    with pytest.raises(ValueError):
        RadixCodec(2)
    with pytest.raises(TypeError):
        encode8("hello")
    with pytest.raises(TypeError):
        encode8(5)


def test_radix_codec_binds_padding():
    padded = RadixCodec(10, padding=True)
    plain = RadixCodec(10, padding=False)

    assert padded.encode(b"\x00\x00hello") == b"00448378203247"
    assert plain.encode(b"\x00\x00hello") == b"448378203247"
    assert padded.decode(b"00448378203247") == b"\x00\x00hello"
    assert plain.decode(b"00448378203247") == b"hello"

    with pytest.raises(InvalidPayloadError):
        padded.decode("٣".encode("utf-8"))
