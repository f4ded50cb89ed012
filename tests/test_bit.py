from enum import Enum, IntEnum

import pytest

from arscrew.bit import BitField, BitSet, extract_bits, set_bits, storage_bits


def test_main_sequence():
    bitset = BitSet(16)

    bitset.set(0, 16, 0x04)
    assert str(bitset) == "0000000000000100"

    bitset[0] = 1
    assert str(bitset) == "0000000000000101"

    cset = BitSet(16, 4)
    assert cset[0] is False

    assert bitset[0] is True

    bits = (~bitset(0, 2)).to_underlying()
    assert bits == 65534

    bitset[BitField(0, 2)] = 0b0011
    bitset[2] = 0
    assert str(bitset) == "0000000000000011"

    bitset[BitField(0, 2)] = bitset(2, 2)
    assert str(bitset) == "0000000000000000"


def test_set_range_h():
    bitset = BitSet(16, 0)
    bitset[BitField(1, 3)] = 0b101
    assert str(bitset) == "0000000000001010"


def test_multidimensional_subscript_with_bitset_value():
    bitset = BitSet(16, 0)
    bs = BitSet(3, 0b111)
    bitset[2, 3] = bs
    assert str(bitset) == "0000000000011100"
    assert bitset[2, 3] == 0b111


def test_extract_bits_31_of_all_ones():
    v = 0xFFFFFFFF
    assert str(BitSet(32, extract_bits(v, 0, 31))) == "0" + "1" * 31


def test_bit_field_wrapper_layout():
    a = BitField(0, 2)
    b = BitField(2, 2)
    c = BitField(4, 4)
    bitset = BitSet(8, 0)
    assert str(bitset) == "00000000"
    bitset[b] = 1
    assert str(bitset) == "00000100"
    bitset[c] = 1
    assert str(bitset) == "00010100"
    assert bitset[a] == 0
    assert bitset[c] == 1


def test_enum_keys():
    class MenumC(IntEnum):
        a = 0
        b = 1
        c = 2
        d = 3

    class Menum(Enum):
        xa = 0
        xb = 1
        xc = 2
        xd = 3

    bitset = BitSet(16)
    assert str(bitset) == "0000000000000000"

    bitset[Menum.xa] = 1
    assert str(bitset) == "0000000000000001"

    bitset[MenumC.b] = 1
    assert str(bitset) == "0000000000000011"

    bitset[BitField(int(MenumC.d), int(MenumC.c))] = 3
    assert str(bitset) == "0000000000011011"

    cset = BitSet(16, bitset)
    assert cset[Menum.xa] is True
    assert cset[MenumC.b] is True
    assert cset[BitField(int(MenumC.d), int(MenumC.c))] == 3


def test_bitfield_str():
    assert str(BitField(3, 2)) == "{3,2}"


def test_storage_bits():
    assert storage_bits(1) == 8
    assert storage_bits(8) == 8
    assert storage_bits(9) == 16
    assert storage_bits(17) == 32
    assert storage_bits(64) == 64
    assert storage_bits(65) == 0


def test_too_many_bits_rejected():
    with pytest.raises(ValueError):
        BitSet(65)


def test_set_bits_round_trip():
    for pos in range(0, 12):
        for length in range(1, 5):
            for value in range(1 << length):
                word = set_bits(0xABCD, pos, length, value)
                assert extract_bits(word, pos, length) == value


def test_set_bits_with_bitfield():
    field = BitField(4, 4)
    assert extract_bits(set_bits(0, field, 0xF), field) == 0xF


def test_set_bits_masks_value():
    assert set_bits(0, 0, 2, 0b111) == 0b11


def test_in_place_operators():
    bitset = BitSet(8, 0b1100)
    bitset &= 0b1010
    assert bitset.to_underlying() == 0b1000
    bitset |= BitSet(8, 0b0001)
    assert bitset.to_underlying() == 0b1001
    bitset ^= 0b1111
    assert bitset.to_underlying() == 0b0110


def test_invert_uses_storage_width():
    assert (~BitSet(3, 0)).to_underlying() == 0xFF
    assert ~~BitSet(12, 0x123) == BitSet(12, 0x123)


def test_extract_keeps_size():
    bitset = BitSet(16, 0b110100)
    part = bitset.extract(2, 4)
    assert part.size() == 16
    assert part.to_underlying() == 0b1101
    assert bitset.extract_underlying(2, 4) == 0b1101


def test_size_and_storage_width():
    bitset = BitSet(12)
    assert bitset.size() == 12
    assert bitset.storage_nbits() == 16


def test_equality():
    assert BitSet(16, 5) == BitSet(16, 5)
    assert not (BitSet(16, 5) == BitSet(8, 5))
    assert BitSet(16, 5) == 5