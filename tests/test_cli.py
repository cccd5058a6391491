from pathlib import Path

import pytest

from fioplot.cli.cli import parse_plot_args, resolve_chart_config
from fioplot.config.chart_style import ChartStyle
from fioplot.consts.ValueType import ValueType
from fioplot.errors import ConfigError


def resolve(argv):
    return resolve_chart_config(parse_plot_args(argv))


def test_defaults_applied():
    config = resolve(["--input", "results", "--output", "out.png", "--ylabel", "MB/s"])

    assert config.input_dir == Path("results")
    assert config.output_path == Path("out.png")
    assert config.title == "SSD Benchmark Results"
    assert config.xlabel == "Test Type"
    assert config.ylabel == "MB/s"
    assert config.value_type == ValueType.BW
    assert config.style == ChartStyle()


def test_all_options():
    config = resolve([
        "--input", "r", "--output", "o.svg", "--ylabel", "IOPS",
        "--title", "NVMe", "--xlabel", "Workload", "--value-type", "iops",
    ])

    assert (config.title, config.xlabel, config.value_type) == ("NVMe", "Workload", ValueType.IOPS)


@pytest.mark.parametrize("selector", ["bw", "BW", "latency", ""])
def test_unknown_value_type_means_bandwidth(selector):
    config = resolve(["--input", "r", "--output", "o", "--ylabel", "y", "--value-type", selector])

    assert config.value_type == ValueType.BW


@pytest.mark.parametrize("argv, missing", [
    (["--output", "o", "--ylabel", "y"], "input"),
    (["--input", "r", "--ylabel", "y"], "output"),
    (["--input", "r", "--output", "o"], "ylabel"),
    (["--input", "", "--output", "o", "--ylabel", "y"], "input"),
])
def test_missing_required_option(argv, missing):
    with pytest.raises(ConfigError, match=missing):
        resolve(argv)


def test_env_without_style_is_rejected():
    with pytest.raises(ConfigError, match="--style"):
        resolve(["--input", "r", "--output", "o", "--ylabel", "y", "--env", "print"])


def test_style_file_is_loaded(tmp_path):
    style_file = tmp_path / "style.yaml"
    style_file.write_text("read_color: '#000000'\n")

    config = resolve(["--input", "r", "--output", "o", "--ylabel", "y", "--style", str(style_file)])

    assert config.style.read_color == "#000000"


def test_whitespace_values_count_as_given():
    config = resolve(["--input", "r", "--output", "o", "--ylabel", " "])

    assert config.ylabel == " "
