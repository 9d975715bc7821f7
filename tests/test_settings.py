import pytest

from philosophers.settings import ArgumentError, Settings, parse_arguments


def test_four_arguments_leave_meals_unset():
    settings = parse_arguments(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_fifth_argument_sets_meals():
    settings = parse_arguments(["4", "410", "200", "100", "7"])
    assert settings.meals == 7
    assert settings.number == 4
    assert settings.time_to_die == 410


def test_arguments_are_parsed_leniently():
    settings = parse_arguments([" 3", "+100x", "10", "20"])
    assert (settings.number, settings.time_to_die) == (3, 100)


def test_eat_and_sleep_are_not_range_checked():
    settings = parse_arguments(["2", "100", "-5", "-6"])
    assert (settings.time_to_eat, settings.time_to_sleep) == (-5, -6)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["1", "2", "3"],
        ["1", "2", "3", "4", "5", "6"],
    ],
)
def test_wrong_argument_count_is_rejected(argv):
    with pytest.raises(ArgumentError):
        parse_arguments(argv)


@pytest.mark.parametrize(
    "argv",
    [
        ["0", "800", "200", "200"],
        ["abc", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "-1", "200", "200"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "200", "none"],
    ],
)
def test_out_of_range_values_are_rejected(argv):
    with pytest.raises(ArgumentError):
        parse_arguments(argv)


def test_argument_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])