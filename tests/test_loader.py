import pytest

from palletload.loader import (
    DataLoadError,
    load_pallets,
    load_truck,
    parse_pallet_line,
    parse_truck_line,
)
from palletload.models import Pallet


def test_parse_pallet_line():
    pallet = parse_pallet_line("1,10,60")
    assert pallet.id == 1
    assert pallet.weight == 10.0
    assert pallet.profit == 60.0
    assert pallet.weight_profit_ratio == pytest.approx(6.0)


def test_parse_pallet_line_ignores_trailing_text():
    pallet = parse_pallet_line(" 3,4kg,5\r")
    assert (pallet.id, pallet.weight, pallet.profit) == (3, 4.0, 5.0)


def test_parse_pallet_line_accepts_decimals_and_exponents():
    pallet = parse_pallet_line("2,1.5,2e2")
    assert pallet.weight == 1.5
    assert pallet.profit == 200.0


@pytest.mark.parametrize("line", ["", "abc,1,2", "1,x,2", "1,2", "1,2,", "99999999999,1,1"])
def test_parse_pallet_line_rejects_bad_lines(line):
    with pytest.raises(DataLoadError):
        parse_pallet_line(line)


def test_parse_truck_line_reads_first_field():
    truck = parse_truck_line("100,5")
    assert truck.capacity == 100.0
    assert truck.loaded_pallets == []


def test_parse_truck_line_rejects_garbage():
    with pytest.raises(DataLoadError):
        parse_truck_line("capacity")


def test_load_truck(tmp_path):
    path = tmp_path / "truck.csv"
    path.write_text("Capacity,Pallets\n250,10\n")
    assert load_truck(path).capacity == 250.0


def test_load_truck_without_data_line(tmp_path):
    path = tmp_path / "truck.csv"
    path.write_text("Capacity,Pallets\n")
    with pytest.raises(DataLoadError):
        load_truck(path)


def test_load_truck_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        load_truck(tmp_path / "absent.csv")


def test_load_pallets_round_trip(tmp_path):
    pallets = [Pallet.from_values(1, 10.0, 60.0), Pallet.from_values(2, 20.5, 100.0)]
    path = tmp_path / "pallets.csv"
    lines = ["Pallet,Weight,Profit"] + [f"{p.id},{p.weight},{p.profit}" for p in pallets]
    path.write_text("\n".join(lines) + "\n")
    assert load_pallets(path) == pallets


def test_load_pallets_skips_bad_lines(tmp_path):
    path = tmp_path / "pallets.csv"
    path.write_text("Pallet,Weight,Profit\n1,10,60\nbroken\n\n2,20,100\n")
    assert [p.id for p in load_pallets(path)] == [1, 2]


def test_load_pallets_header_only(tmp_path):
    path = tmp_path / "pallets.csv"
    path.write_text("Pallet,Weight,Profit\n")
    with pytest.raises(DataLoadError):
        load_pallets(path)


def test_load_pallets_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        load_pallets(tmp_path / "absent.csv")