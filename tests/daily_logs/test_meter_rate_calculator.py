from src.wagewise.wagewise.daily_logs.calculator.meter_rate_calculator import MeterRateCalculator
from src.wagewise.wagewise.products.model import Product


def test_row_total_is_meter_times_rate():
    line = MeterRateCalculator().line_for(Product(id="p1", name="Bricks", rate=2.5), "40")

    assert line.meter_value == 40
    assert line.row_total == 100


def test_non_numeric_meter_counts_as_zero():
    calc = MeterRateCalculator()
    bricks = Product(id="p1", name="Bricks", rate=2.5)

    for raw in ["abc", "", None, "  "]:
        assert calc.line_for(bricks, raw).row_total == 0


def test_grand_total_sums_rows():
    calc = MeterRateCalculator()
    lines = [
        calc.line_for(Product(id="p1", name="Bricks", rate=2.5), "40"),
        calc.line_for(Product(id="p2", name="Tiles", rate=4), "abc"),
        calc.line_for(Product(id="p3", name="Blocks", rate=10), "1.5"),
    ]

    assert calc.grand_total(lines) == 115
