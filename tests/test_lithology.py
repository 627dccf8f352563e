import pytest

from welllog.lithology import Lithology, classify_value, identify_lithologies


@pytest.mark.parametrize(
    "value, carbonates, expected",
    [
        (29.0, True, Lithology.CARBONATE),
        (30.0, True, Lithology.SANDSTONE),
        (90.0, True, Lithology.SANDSTONE),
        (90.5, True, Lithology.SHALE),
        (29.0, False, Lithology.SANDSTONE),
        (89.9, False, Lithology.SANDSTONE),
        (90.0, False, Lithology.SHALE),
    ],
)
def test_classify_value(value, carbonates, expected):
    assert classify_value(value, carbonates) is expected


def test_identify_without_carbonates():
    log = identify_lithologies([10.0, 95.0, 60.0], [1.0, 2.0, 3.0], False)
    assert log.sandstone_gamma == [10.0, 60.0]
    assert log.sandstone_depth == [1.0, 3.0]
    assert log.shale_gamma == [95.0]
    assert log.shale_depth == [2.0]
    assert log.carbonate_gamma == []


def test_identify_with_carbonates():
    log = identify_lithologies([10.0, 95.0, 60.0], [1.0, 2.0, 3.0], True)
    assert log.carbonate_gamma == [10.0]
    assert log.carbonate_depth == [1.0]
    assert log.sandstone_gamma == [60.0]
    assert log.shale_depth == [2.0]


def test_every_reading_is_kept():
    gamma = [5.0, 35.0, 120.0, 88.0, 91.0]
    log = identify_lithologies(gamma, range(5), True)
    total = log.carbonate_gamma + log.sandstone_gamma + log.shale_gamma
    assert sorted(total) == sorted(gamma)


def test_short_depth_raises():
    with pytest.raises(ValueError):
        identify_lithologies([10.0, 20.0], [1.0], False)