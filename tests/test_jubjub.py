import pytest

from zledger.jubjub import (
    BASE,
    BASE_COFACTOR,
    FIELD_MODULUS,
    ORDER,
    ParseZkPublicKeyError,
    PointAffine,
    PointCompressed,
    PointProjective,
    ZkPublicKey,
)


def test_twisted_edwards_curve_ops():
    a = BASE.double() + BASE + BASE
    b = BASE.double().double()
    assert a == b

    c = BASE + BASE + BASE + BASE
    assert b == c

    pnt1 = BASE.to_projective().double().double() + BASE.to_projective()
    pnt2 = BASE.double().double() + BASE
    assert pnt1.to_affine() == pnt2


def test_jubjub_public_key_compression():
    p1 = BASE.multiply(123)
    p2 = p1.compress().decompress()
    assert p1 == p2


@pytest.mark.parametrize("k", [1, 2, 5, 77, 123456789])
def test_compression_round_trip_many(k):
    point = BASE.multiply(k)
    assert point.compress().decompress() == point


def test_base_on_curve():
    assert BASE.is_on_curve()
    assert BASE_COFACTOR.is_on_curve()


def test_multiply_matches_repeated_addition():
    assert BASE.multiply(4) == BASE + BASE + BASE + BASE
    assert BASE.multiply(1) == BASE
    assert BASE.multiply(2) == BASE.double()


def test_multiply_by_zero_is_infinity():
    assert BASE.multiply(0).is_infinity()
    assert BASE.multiply(0) == PointAffine.zero()


def test_cofactor_point_has_prime_order():
    assert BASE_COFACTOR.multiply(ORDER).is_infinity()
    assert not BASE_COFACTOR.is_infinity()


def test_cofactor_point_is_eight_times_base():
    assert BASE_COFACTOR == BASE.double().double().double()


def test_zero_is_identity_for_affine_add():
    assert PointAffine.zero() + BASE == BASE


def test_point_plus_negation_is_zero():
    negated = PointAffine(FIELD_MODULUS - BASE.x, BASE.y)
    assert negated.is_on_curve()
    assert (BASE + negated) == PointAffine.zero()


def test_projective_zero_behaviour():
    zero = PointProjective.zero()
    assert zero.is_zero()
    assert zero.double() == zero
    assert zero.to_affine() == PointAffine.zero()
    base = BASE.to_projective()
    assert zero + base == base
    assert base + zero == base


def test_projective_same_point_doubles():
    base = BASE.to_projective()
    assert (base + base).to_affine() == BASE.double()


def test_infinity_detection():
    assert PointAffine(0, 1).is_infinity()
    assert PointAffine(0, FIELD_MODULUS - 1).is_infinity()
    assert not BASE.is_infinity()


def test_off_curve_point():
    assert not PointAffine(1, 1).is_on_curve()


def test_compress_keeps_parity():
    compressed = BASE.compress()
    assert compressed.x == BASE.x
    assert compressed.odd == bool(BASE.y & 1)
    assert compressed.odd is False


def test_public_key_format():
    key = ZkPublicKey(PointCompressed(1, True))
    assert str(key) == "0z3" + "0" * 63 + "1"
    key = ZkPublicKey(PointCompressed(0x1F, False))
    assert str(key) == "0z2" + "0" * 62 + "1f"


def test_public_key_round_trip():
    key = ZkPublicKey(BASE.multiply(99).compress())
    assert ZkPublicKey.parse(str(key)) == key


def test_public_key_parse_upper_case():
    key = ZkPublicKey(BASE.compress())
    text = str(key)
    assert ZkPublicKey.parse(text[:3] + text[3:].upper()) == key


@pytest.mark.parametrize(
    "text",
    [
        "",
        "0z2" + "00" * 31,
        "0z4" + "00" * 32,
        "0x2" + "00" * 32,
        "0z2" + "zz" * 32,
        "0z2" + "ff" * 32,
    ],
)
def test_public_key_parse_rejects(text):
    with pytest.raises(ParseZkPublicKeyError):
        ZkPublicKey.parse(text)


def test_default_public_key():
    assert str(ZkPublicKey()) == "0z2" + "0" * 64