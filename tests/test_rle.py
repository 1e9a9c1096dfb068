import random

import pytest

from discretelabs.rle import rle_decode, rle_encode


def test_encode_format():
    assert rle_encode("aaabcc") == "a3,b1,c2,"


def test_short_texts_encode_to_nothing():
    assert rle_encode("a") == ""
    assert rle_encode("") == rle_encode("a")


def test_decode_of_empty_and_single():
    assert rle_decode("") == rle_encode("")
    assert rle_decode("x") == rle_encode("")


@pytest.mark.parametrize(
    "text",
    [
        "ab",
        "aaaa",
        "b" * 25,
        ",,55,,",
        "1111222233",
        "fk pFK. %%%%",
    ],
)
def test_round_trip(text):
    assert rle_decode(rle_encode(text)) == text


def test_round_trip_random():
    rng = random.Random(3)
    text = "".join(rng.choice("ab0,.") for _ in range(2000))
    assert rle_decode(rle_encode(text)) == text


def test_one_group_per_run():
    text = "aaabbbbcdddd"
    encoded = rle_encode(text)
    assert encoded.count(",") == 4
    assert encoded.endswith(",")


def test_negative_count_expands_to_nothing():
    assert rle_decode("a-2,") == ""


def test_missing_count_raises():
    with pytest.raises(ValueError):
        rle_decode("a,b2,")