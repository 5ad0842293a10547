import pytest
from possible_cpus import CpuSpecError, CpuSpecFormatError, CpuSpecRangeError, parse_cpus


@pytest.mark.parametrize(
    "spec,expected",
    [
        ("0", 1),
        ("0\n", 1),
        ("0-3", 4),
        ("0-3\n", 4),
        ("0-0", 1),
        ("0-127\n", 128),
        ("0-8191", 8192),
    ],
)
def test_parse_cpus(spec, expected):
    assert parse_cpus(spec) == expected


def test_parse_cpus_not_starting_at_zero():
    with pytest.raises(CpuSpecRangeError) as excinfo:
        parse_cpus("1-3")
    assert "doesn't start at zero" in str(excinfo.value)
    assert excinfo.value.spec == "1-3"


@pytest.mark.parametrize(
    "spec",
    [
        "",
        "\n",
        "1",
        "0-3,8-11",
        "0-1,4-5\n",
        "0,2",
        "0-",
        "-3",
        "a-b",
        "0-3 ",
        " 0-3",
        "0-3\n\n",
        "0-0x10",
        "0--1",
        "\u0660-\u0663",
        "0-\uff13",
    ],
)
def test_parse_cpus_invalid_format(spec):
    with pytest.raises(CpuSpecFormatError) as excinfo:
        parse_cpus(spec)
    assert "invalid format" in str(excinfo.value)


def test_cpu_spec_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_cpus("garbage")
    with pytest.raises(CpuSpecError):
        parse_cpus("2-3")
