import pytest

from dsakit.datagen import generate_files, main
from dsakit.sorting import read_numbers


def test_file_names_and_count(tmp_path):
    paths = generate_files(tmp_path, num_files=3, num_elements=5, seed=1)
    assert [p.name for p in paths] == [
        "inputdata_type5_001.dat",
        "inputdata_type5_002.dat",
        "inputdata_type5_003.dat",
    ]
    assert all(p.exists() for p in paths)


def test_values_in_range_and_count(tmp_path):
    paths = generate_files(tmp_path, num_files=2, num_elements=400, min_val=-200, max_val=200, seed=7)
    for path in paths:
        numbers = read_numbers(path)
        assert len(numbers) == 400
        assert all(-200 <= n <= 200 for n in numbers)


def test_format_space_separated_with_trailing_space(tmp_path):
    (path,) = generate_files(tmp_path, num_files=1, num_elements=4, seed=3)
    text = path.read_text(encoding="utf-8")
    assert text.endswith(" ")
    assert len(text.split(" ")) == 5


def test_single_value_range(tmp_path):
    (path,) = generate_files(tmp_path, num_files=1, num_elements=10, min_val=9, max_val=9)
    assert read_numbers(path) == [9] * 10


def test_seed_is_deterministic(tmp_path):
    first = generate_files(tmp_path / "a", num_files=2, num_elements=50, seed=42)
    second = generate_files(tmp_path / "b", num_files=2, num_elements=50, seed=42)
    for a, b in zip(first, second):
        assert a.read_text(encoding="utf-8") == b.read_text(encoding="utf-8")


def test_creates_nested_directory(tmp_path):
    target = tmp_path / "x" / "y"
    paths = generate_files(target, num_files=1, num_elements=1, seed=0)
    assert target.is_dir()
    assert paths[0].parent == target


def test_min_greater_than_max_raises(tmp_path):
    with pytest.raises(ValueError):
        generate_files(tmp_path, num_files=1, num_elements=1, min_val=5, max_val=1)


def test_main_writes_files(tmp_path, capsys):
    out_dir = tmp_path / "out"
    code = main([str(out_dir), "--files", "2", "--elements", "3", "--seed", "1"])
    assert code == 0
    assert sorted(p.name for p in out_dir.iterdir()) == [
        "inputdata_type5_001.dat",
        "inputdata_type5_002.dat",
    ]
    assert capsys.readouterr().out.count("Created file:") == 2


def test_main_bad_range_fails(tmp_path):
    assert main([str(tmp_path), "--files", "1", "--min", "3", "--max", "1"]) == 1