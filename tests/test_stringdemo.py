import io
import re

from syslab import stringdemo
from syslab.stringdemo import (
    CONCAT_PREFIX,
    GlibcRandom,
    main,
    run_basic_checks,
    write_test_1a,
    write_test_1b,
)


def test_glibc_random_known_sequence():
    rng = GlibcRandom(1)
    assert [rng.next(), rng.next()] == [1804289383, 846930886]


def test_seed_zero_matches_seed_one():
    a, b = GlibcRandom(0), GlibcRandom(1)
    assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]


def test_random_range_and_determinism():
    a, b = GlibcRandom(12345), GlibcRandom(12345)
    values = [a.next() for _ in range(200)]
    assert values == [b.next() for _ in range(200)]
    assert all(0 <= v < 2 ** 31 for v in values)


def test_run_basic_checks():
    assert run_basic_checks() == "hash" + "hola" + "a" + "todos!"


def test_write_1a_structure():
    out = io.StringIO()
    write_test_1a(out, GlibcRandom(0))
    text = out.getvalue()
    assert text.startswith("== Ejercicio 1a ==\n\nCreando lista vacia\n\n")
    assert text.endswith("======================== Fin del test 1a =======================")
    assert "List length: 0\n" in text
    assert f"List length: {len(stringdemo.STARS)}\n" in text
    assert f"List length: {len(stringdemo.CONSTELLATIONS_1A)}\n" in text
    nodes = re.findall(r"\tnode hash: (.*) \| type: (\d+)\n", text)
    assert [h for h, _ in nodes] == list(stringdemo.STARS) + list(stringdemo.CONSTELLATIONS_1A)
    assert all(0 <= int(t) < stringdemo.MAX_TYPE for _, t in nodes)


def test_write_1a_consumes_one_value_per_node():
    rng = GlibcRandom(0)
    write_test_1a(io.StringIO(), rng)
    reference = GlibcRandom(0)
    for _ in range(len(stringdemo.STARS) + len(stringdemo.CONSTELLATIONS_1A)):
        reference.next()
    assert rng.next() == reference.next()


def test_write_1b_concatenations_cover_all_names():
    out = io.StringIO()
    write_test_1b(out, GlibcRandom(0))
    text = out.getvalue()
    assert text.startswith("== Ejercicio 1b ==\n\n")
    lines = [line for line in text.split("\n") if line.startswith(CONCAT_PREFIX)]
    assert len(lines) == stringdemo.MAX_TYPE
    total = sum(len(line) - len(CONCAT_PREFIX) for line in lines)
    assert total == sum(len(name) for name in stringdemo.NAMES_1B)


def test_main_writes_file(tmp_path):
    path = tmp_path / "out.txt"
    assert main([str(path)]) == 0
    expected = io.StringIO()
    rng = GlibcRandom(0)
    write_test_1a(expected, rng)
    write_test_1b(expected, rng)
    assert path.read_text(encoding="utf-8") == expected.getvalue()


def test_main_overwrites_previous_output(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("stale", encoding="utf-8")
    main([str(path)])
    first = path.read_text(encoding="utf-8")
    main([str(path)])
    assert path.read_text(encoding="utf-8") == first
    assert not first.startswith("stale")


def test_main_rejects_extra_arguments(tmp_path):
    assert main([str(tmp_path / "a"), str(tmp_path / "b")]) == 1