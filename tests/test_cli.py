import pytest

from philo.cli import ArgumentError, main, parse_config


def test_parse_config_four_arguments():
    config = parse_config(["5", "800", "200", "150"])
    assert config.num_philo == 5
    assert config.time_to_die == 800
    assert config.time_to_eat == 200
    assert config.time_to_sleep == 150
    assert config.num_meals is None


def test_parse_config_with_meal_count():
    config = parse_config(["4", "410", "200", "200", "7"])
    assert config.num_meals == 7
    assert config.num_philo == 4


def test_parse_config_zero_meals_allowed():
    assert parse_config(["3", "310", "100", "100", "0"]).num_meals == 0


def test_parse_config_meal_count_wrapping_to_minus_one_means_no_limit():
    assert parse_config(["3", "310", "100", "100", "4294967295"]).num_meals is None


@pytest.mark.parametrize(
    "args",
    [
        ["-5", "600", "200", "200"],
        ["4", "-5", "200", "200"],
        ["4", "600", "-5", "200"],
        ["4", "600", "200", "-5"],
        ["4", "600", "200", "200", "-5"],
        ["+4", "600", "200", "200"],
        ["4", "600", "2a0", "200"],
    ],
)
def test_parse_config_rejects_non_digits(args):
    with pytest.raises(ArgumentError):
        parse_config(args)


@pytest.mark.parametrize(
    "args",
    [[], ["4", "600", "200"], ["4", "600", "200", "200", "5", "6"]],
)
def test_parse_config_rejects_wrong_count(args):
    with pytest.raises(ArgumentError):
        parse_config(args)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "600", "200", "200"],
        ["4", "0", "200", "200"],
        ["4", "600", "0", "200"],
        ["4", "600", "200", "0"],
        ["", "600", "200", "200"],
    ],
)
def test_parse_config_rejects_non_positive(args):
    with pytest.raises(ArgumentError):
        parse_config(args)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_config(["x", "1", "1", "1"])


def test_main_invalid_arguments_prints_usage(capsys):
    assert main(["4", "600", "200", "-5"]) == 1
    out = capsys.readouterr().out
    assert "Error. Invalid arguments:  ./philo [#1] [#2] [#3] [#4]" in out
    assert "#4: [Time to sleep] (ms)" in out


def test_main_single_philosopher_dies(capsys):
    assert main(["1", "60", "20", "20"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    died = [line for line in lines if line.endswith(" died")]
    assert died == [lines[-1]]
    assert died[0].split()[1] == "1"


def test_main_stops_when_meals_reached(capsys):
    assert main(["4", "800", "30", "30", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert not any(line.endswith(" died") for line in lines)
    eaters = {line.split()[1] for line in lines if line.endswith(" is eating")}
    assert eaters == {"1", "2", "3", "4"}


def test_main_output_lines_are_well_formed(capsys):
    assert main(["2", "800", "20", "20", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines
    for line in lines:
        stamp, philo_id, _state = line.split(" ", 2)
        assert len(stamp) >= 6 and stamp.isdigit()
        assert philo_id in {"1", "2"}


def test_main_zero_meals_ends_without_deaths(capsys):
    assert main(["5", "800", "200", "200", "0"]) == 0
    out = capsys.readouterr().out
    assert "died" not in out
    assert "Error" not in out